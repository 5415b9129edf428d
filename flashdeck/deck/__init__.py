"""Card model and deck storage."""

from flashdeck.deck.models import Card
from flashdeck.deck.store import load_deck, append_card

__all__ = ["Card", "load_deck", "append_card"]
