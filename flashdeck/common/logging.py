"""Logging utilities.

Log lines are plain ``[tag] message`` strings. They go to stdout by default,
to an append-mode file after ``set_log_file()``, and are held back while the
full-screen UI owns the terminal (see ``hold_stdout()``).
"""

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from flashdeck.common.errors import ConfigError


# Module-level state
_LOG_FILE: Optional[TextIO] = None
_HELD: Optional[List[str]] = None

_TAG_EMOJI = {
    "api": "🤖",
    "file": "💾",
    "deck": "🗂️",
    "error": "❌",
}


def set_log_file(path: Optional[Path]) -> None:
    """Send log lines to ``path`` (appending), or back to stdout if None."""
    global _LOG_FILE
    if _LOG_FILE is not None:
        _LOG_FILE.close()
        _LOG_FILE = None
    if path is not None:
        try:
            _LOG_FILE = open(path, "a", encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot open log file {path}: {e}") from e


def _format(tag: str, message: str) -> str:
    emoji = _TAG_EMOJI.get(tag, "")
    emoji_spacer = (emoji + " ") if emoji else ""
    return f"[{tag}] {emoji_spacer}{message}"


def log(tag: str, message: str) -> None:
    """Write a tagged log line."""
    line = _format(tag, message)
    if _LOG_FILE is not None:
        _LOG_FILE.write(line + "\n")
        _LOG_FILE.flush()
    elif _HELD is not None:
        _HELD.append(line)
    else:
        print(line)


def log_debug(enabled: bool, message: str) -> None:
    """Write a debug message if debugging is enabled."""
    if enabled:
        log("debug", message)


@contextmanager
def hold_stdout() -> Iterator[List[str]]:
    """Buffer stdout log lines for the duration of the block, then replay them."""
    global _HELD
    previous = _HELD
    _HELD = []
    held = _HELD
    try:
        yield held
    finally:
        _HELD = previous
        for line in held:
            if previous is not None:
                previous.append(line)
            else:
                print(line)
        try:
            sys.stdout.flush()
        except (AttributeError, ValueError):
            pass
