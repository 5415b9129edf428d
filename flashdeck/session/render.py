"""Card view rendering with rich."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from flashdeck.session.state import SessionState


TITLE = "Chinese Learning Cards"
EMPTY_DECK = "No cards in deck!"
CONTROLS = "→: Reveal/Next Card  |  n: New Card  |  q: Quit"


def card_markup(state: SessionState) -> str:
    """Rich markup for the current card.

    The Chinese and pinyin lines are only emitted when the card is revealed.
    """
    card = state.current_card
    lines = []
    if card is None:
        lines.append(EMPTY_DECK)
    else:
        lines += [
            "",
            f"Card {state.index + 1}/{len(state.deck)} (ID: {card.id})",
            "",
            "[bold]English:[/bold]",
            f"[cyan]{escape(card.english)}[/cyan]",
        ]
        if state.revealed:
            lines += [
                "",
                "[bold]Chinese:[/bold]",
                f"[yellow]{escape(card.chinese)}[/yellow]",
                "",
                "[bold]Pinyin:[/bold]",
                f"[green]{escape(card.pinyin)}[/green]",
            ]
        lines += ["", "─" * 25, "", "Controls:", CONTROLS]

    if state.message:
        lines += ["", f"[magenta]{escape(state.message)}[/magenta]"]
    return "\n".join(lines)


def render_card(state: SessionState) -> Panel:
    body = Text.from_markup(card_markup(state), justify="center")
    return Panel(body, title=f" {TITLE} ", title_align="center")


def render_card_text(state: SessionState, width: int = 60, color: bool = False) -> str:
    """Render the card panel to a string, with ANSI colour codes if ``color``."""
    console = Console(
        width=width,
        force_terminal=color,
        color_system="standard" if color else None,
        highlight=False,
    )
    with console.capture() as capture:
        console.print(render_card(state))
    return capture.get()


__all__ = ["TITLE", "EMPTY_DECK", "CONTROLS", "card_markup", "render_card", "render_card_text"]
