"""Full-screen terminal application.

The card view and the "Add New Card" dialog share one screen; the dialog is
only shown while the session is in editing mode. Browsing keys are filtered
on the session mode, so typing in the dialog never triggers them.
"""

from typing import Any, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.bindings.focus import focus_next, focus_previous
from prompt_toolkit.layout import (
    ConditionalContainer,
    Float,
    FloatContainer,
    FormattedTextControl,
    Layout,
    Window,
    WindowAlign,
)
from prompt_toolkit.widgets import Button, Dialog, TextArea

from flashdeck.common.errors import FlashdeckError
from flashdeck.common.logging import log
from flashdeck.session.controller import Controller
from flashdeck.session.render import render_card_text
from flashdeck.session.state import Mode


FORM_TITLE = "Add New Card"
FIELD_WIDTH = 50
MIN_CARD_WIDTH = 40


def card_width(columns: int) -> int:
    """Half the terminal, at least MIN_CARD_WIDTH, never wider than the terminal."""
    return min(columns, max(MIN_CARD_WIDTH, columns // 2))


class FlashcardApp:
    """Wires a Controller to a prompt_toolkit Application."""

    def __init__(
        self,
        controller: Controller,
        exit_on_error: bool = False,
        input: Optional[Any] = None,
        output: Optional[Any] = None,
    ) -> None:
        self.controller = controller
        self.state = controller.state
        self.exit_on_error = exit_on_error

        self.card_control = FormattedTextControl(self._card_text, focusable=True, show_cursor=False)
        self.card_window = Window(self.card_control, align=WindowAlign.CENTER)

        self.input_field = TextArea(
            multiline=False,
            prompt="English: ",
            width=FIELD_WIDTH + len("English: "),
            accept_handler=self._on_accept,
        )
        self.dialog = Dialog(
            title=FORM_TITLE,
            body=self.input_field,
            buttons=[
                Button("Save", handler=self._submit),
                Button("Cancel", handler=self._cancel),
            ],
            with_background=False,
        )

        editing = Condition(lambda: self.state.mode is Mode.EDITING)
        root = FloatContainer(
            content=self.card_window,
            floats=[Float(content=ConditionalContainer(self.dialog, filter=editing))],
        )

        self.app = Application(
            layout=Layout(root, focused_element=self.card_window),
            key_bindings=self._key_bindings(editing),
            full_screen=True,
            input=input,
            output=output,
        )

    def _key_bindings(self, editing: Condition) -> KeyBindings:
        kb = KeyBindings()
        browsing = ~editing

        @kb.add("right", filter=browsing)
        @kb.add(" ", filter=browsing)
        def _advance(event):
            self.controller.advance()

        @kb.add("n", filter=browsing)
        def _new_card(event):
            self.controller.open_editor()
            self.input_field.text = ""
            event.app.layout.focus(self.input_field)

        @kb.add("q", filter=browsing)
        def _quit(event):
            self.controller.quit()
            event.app.exit()

        @kb.add("escape", filter=editing, eager=True)
        def _escape(event):
            self._cancel()

        kb.add("tab", filter=editing)(focus_next)
        kb.add("s-tab", filter=editing)(focus_previous)

        @kb.add("c-c")
        def _interrupt(event):
            event.app.exit()

        return kb

    def _card_width(self) -> int:
        return card_width(self.app.output.get_size().columns)

    def _card_text(self):
        return ANSI(render_card_text(self.state, width=self._card_width(), color=True))

    def _back_to_cards(self) -> None:
        self.input_field.text = ""
        self.app.layout.focus(self.card_window)

    def _on_accept(self, buff) -> bool:
        self._submit()
        return False

    def _submit(self) -> None:
        text = self.input_field.text
        try:
            self.controller.submit(text)
        except FlashdeckError as e:
            if self.exit_on_error:
                log("error", "Stopping on failed submit")
                self.app.exit(exception=e)
                return
        self._back_to_cards()

    def _cancel(self) -> None:
        self.controller.cancel()
        self._back_to_cards()

    def run(self) -> None:
        """Run until the user quits. Raises if the app was stopped with an error."""
        self.app.run()


__all__ = ["FlashcardApp", "FORM_TITLE", "card_width"]
