"""Terminal flashcard viewer for English → Mandarin study decks.

Subpackages:
- flashdeck.common: Shared utilities (config, errors, logging, openai client)
- flashdeck.deck: Card model and JSONL record store
- flashdeck.session: Session state, controller and card rendering
- flashdeck.ui: Full-screen terminal application
"""

__version__ = "0.1.0"
