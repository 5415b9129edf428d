"""JSONL record store for decks.

One card per line. Loading is all-or-nothing; writing only ever appends.
"""

import json
from pathlib import Path
from typing import List

from flashdeck.common.errors import DeckFileError
from flashdeck.common.logging import log
from flashdeck.deck.models import Card


def load_deck(path: Path) -> List[Card]:
    """Read every card from a JSONL deck file, in file order."""
    cards: List[Card] = []
    try:
        with path.open("r", encoding="utf-8") as f:
            for lineno, raw in enumerate(f, 1):
                line = raw.strip()
                if not line:
                    continue
                try:
                    data = json.loads(line)
                except ValueError as e:
                    raise DeckFileError(f"{path}:{lineno}: invalid JSON: {e}") from e
                if not isinstance(data, dict):
                    raise DeckFileError(f"{path}:{lineno}: expected a JSON object")
                try:
                    cards.append(Card.from_dict(data))
                except (TypeError, ValueError) as e:
                    raise DeckFileError(f"{path}:{lineno}: invalid card: {e}") from e
    except OSError as e:
        raise DeckFileError(f"cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DeckFileError(f"{path} is not valid UTF-8: {e}") from e

    log("deck", f"Loaded {len(cards)} cards from {path}")
    return cards


def append_card(path: Path, card: Card) -> None:
    """Append one card as a JSON line, creating the file if needed.

    A last line missing its newline is terminated first so the new record
    lands on a line of its own.
    """
    line = json.dumps(card.to_dict(), ensure_ascii=False, separators=(",", ":"))
    data = (line + "\n").encode("utf-8")
    try:
        with path.open("ab+") as f:
            if f.seek(0, 2) > 0:
                f.seek(-1, 2)
                if f.read(1) != b"\n":
                    data = b"\n" + data
            f.write(data)
    except OSError as e:
        raise DeckFileError(f"cannot append to {path}: {e}") from e
    log("file", f"Saved card {card.id} to {path.name}")


__all__ = [
    "load_deck",
    "append_card",
]
