"""Card record and its JSONL mapping."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Card:
    """A single flashcard. Immutable once created."""
    id: int
    english: str
    chinese: str
    pinyin: str

    def to_dict(self) -> Dict[str, Any]:
        # Key order is the on-disk field order
        return {
            "id": self.id,
            "en": self.english,
            "zh": self.chinese,
            "pinyin": self.pinyin,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Card":
        """Build a card from a decoded record.

        Unknown keys are ignored and missing (or null) fields take zero
        values. A field of the wrong type raises ValueError.
        """
        card_id = data.get("id")
        if card_id is None:
            card_id = 0
        elif isinstance(card_id, bool) or not isinstance(card_id, int):
            raise ValueError(f"field 'id' must be an integer, got {card_id!r}")

        texts = {}
        for key in ("en", "zh", "pinyin"):
            value = data.get(key)
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise ValueError(f"field {key!r} must be a string, got {value!r}")
            texts[key] = value

        return cls(id=card_id, english=texts["en"], chinese=texts["zh"], pinyin=texts["pinyin"])


__all__ = ["Card"]
