"""Terminal user interface."""

from flashdeck.ui.app import FlashcardApp

__all__ = ["FlashcardApp"]
