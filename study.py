#!/usr/bin/env python3
"""Study a flashcard deck in the terminal.

Loads a JSONL deck, shows one card at a time and lets you add new cards
translated by the OpenAI API.

Usage:
    python study.py --file flashcards.jsonl
    python study.py --api-key sk-... --model gpt-4o-mini --verbose
"""

import argparse
import sys
from typing import List, Optional

from flashdeck.common.utils import _load_env_file
from flashdeck.common import (
    ConfigError,
    DeckFileError,
    FlashdeckError,
    TranslationClient,
    hold_stdout,
    log_debug,
    resolve_config,
    set_log_file,
)
from flashdeck.deck import load_deck
from flashdeck.session import Controller, SessionState
from flashdeck.ui import FlashcardApp


# Load .env on import
_load_env_file()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Terminal flashcards: review a deck and add new cards with OpenAI translations"
    )
    parser.add_argument(
        "--api-key",
        default="",
        help="OpenAI API key (falls back to OPENAI_API_KEY)",
    )
    parser.add_argument(
        "--file",
        default=None,
        help="Path to flashcards file (default: flashcards.jsonl)",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="OpenAI model name (overrides OPENAI_MODEL, default: gpt-4o-mini)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a JSON config file",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Translation request timeout in seconds (default: 60)",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Attempts per translation on connection errors (default: 1, no retries)",
    )
    parser.add_argument(
        "--exit-on-error",
        action="store_true",
        help="Quit instead of showing the error when adding a card fails",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Append log lines to this file instead of stdout",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
        set_log_file(config.log_file)
    except ConfigError as e:
        print(e)
        return 1

    try:
        log_debug(config.verbose, f"Model: {config.model}, deck: {config.deck_path}")
        translator = TranslationClient(
            config.api_key,
            model=config.model,
            timeout=config.timeout,
            max_attempts=config.max_attempts,
            verbose=config.verbose,
        )

        try:
            deck = load_deck(config.deck_path)
        except DeckFileError as e:
            print(f"Error loading deck: {e}")
            return 1

        controller = Controller(SessionState(deck=deck), translator, config.deck_path)
        app = FlashcardApp(controller, exit_on_error=config.exit_on_error)
        try:
            with hold_stdout():
                app.run()
        except FlashdeckError as e:
            print(f"Error adding card: {e}")
            return 1
        except Exception as e:
            print(f"Error running application: {e}")
            return 1
        return 0
    finally:
        set_log_file(None)


if __name__ == "__main__":
    raise SystemExit(main())
