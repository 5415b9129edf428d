"""Browse/edit state machine driving a SessionState."""

from pathlib import Path
from typing import Optional, Protocol, Tuple

from flashdeck.common.errors import DeckFileError, TranslationError
from flashdeck.common.logging import log
from flashdeck.common.utils import _clean_value
from flashdeck.deck.models import Card
from flashdeck.deck.store import append_card
from flashdeck.session.state import Mode, SessionState


class Translator(Protocol):
    def translate(self, sentence: str) -> Tuple[str, str]:
        ...


class Controller:
    """Applies key-driven transitions to a session.

    Transitions called in the wrong mode are ignored.
    """

    def __init__(self, state: SessionState, translator: Translator, deck_path: Path) -> None:
        self.state = state
        self.translator = translator
        self.deck_path = deck_path

    def advance(self) -> None:
        """Reveal the current card, or hide it and move to the next one."""
        st = self.state
        if st.mode is not Mode.BROWSING or not st.deck:
            return
        st.message = None
        if not st.revealed:
            st.revealed = True
        else:
            st.revealed = False
            st.index = (st.index + 1) % len(st.deck)

    def open_editor(self) -> None:
        st = self.state
        if st.mode is not Mode.BROWSING:
            return
        st.mode = Mode.EDITING
        st.message = None

    def cancel(self) -> None:
        st = self.state
        if st.mode is not Mode.EDITING:
            return
        st.mode = Mode.BROWSING

    def quit(self) -> None:
        if self.state.mode is Mode.BROWSING:
            self.state.quit_requested = True

    def submit(self, text: str) -> Optional[Card]:
        """Translate ``text`` and append it as a new card.

        Blank text cancels. On failure nothing is appended, the session goes
        back to browsing with the error as its message, and the error is
        re-raised.
        """
        st = self.state
        if st.mode is not Mode.EDITING:
            return None
        english = _clean_value(text).strip()
        if not english:
            self.cancel()
            return None

        try:
            chinese, pinyin = self.translator.translate(english)
            card = Card(id=len(st.deck) + 1, english=english, chinese=chinese, pinyin=pinyin)
            append_card(self.deck_path, card)
        except (TranslationError, DeckFileError) as e:
            log("error", f"Adding card failed: {e}")
            st.mode = Mode.BROWSING
            st.message = f"Error adding card: {e}"
            raise

        st.deck.append(card)
        st.mode = Mode.BROWSING
        st.revealed = False
        st.message = f"Added card {card.id}: {card.english}"
        return card


__all__ = ["Controller", "Translator"]
