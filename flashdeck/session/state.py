"""Session state for one viewing session."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from flashdeck.deck.models import Card


class Mode(Enum):
    BROWSING = "browsing"
    EDITING = "editing"


@dataclass
class SessionState:
    """Everything the card view and the controller need.

    ``index`` is valid (0 <= index < len(deck)) whenever the deck is non-empty.
    """
    deck: List[Card] = field(default_factory=list)
    index: int = 0
    revealed: bool = False
    mode: Mode = Mode.BROWSING
    message: Optional[str] = None
    quit_requested: bool = False

    @property
    def current_card(self) -> Optional[Card]:
        if not self.deck:
            return None
        return self.deck[self.index]


__all__ = ["Mode", "SessionState"]
