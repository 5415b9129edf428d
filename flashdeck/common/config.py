"""Application configuration.

Settings come from, in order of precedence:
- command-line flags
- an optional JSON config file (``--config``), with keys:
  file, model, timeout, max_attempts, exit_on_error, log_file
- environment (OPENAI_API_KEY, OPENAI_MODEL; a project-root .env is loaded)
- built-in defaults
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from flashdeck.common.errors import ConfigError
from flashdeck.common.openai import DEFAULT_MODEL, DEFAULT_TIMEOUT_S


DEFAULT_DECK_FILE = "flashcards.jsonl"
CONFIG_KEYS = ("file", "model", "timeout", "max_attempts", "exit_on_error", "log_file")


@dataclass
class AppConfig:
    """Resolved settings for one run."""
    api_key: str
    deck_path: Path = Path(DEFAULT_DECK_FILE)
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT_S
    max_attempts: int = 1  # 1 = single attempt, no retries
    exit_on_error: bool = False  # stop the UI on a failed submit
    log_file: Optional[Path] = None
    verbose: bool = False

    def __post_init__(self):
        if not self.api_key:
            raise ConfigError("Please provide an API key")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")
        if self.max_attempts < 1:
            raise ConfigError(f"max_attempts must be at least 1, got {self.max_attempts}")


def load_config_file(path: Path) -> Optional[Dict[str, Any]]:
    """Load settings from a JSON config file.

    Returns None if the file doesn't exist.
    """
    if not path.exists():
        return None
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    return data


def _first(*values):
    for v in values:
        if v is not None:
            return v
    return None


def resolve_config(args) -> AppConfig:
    """Build an AppConfig from parsed CLI args, the config file and the environment."""
    file_data: Dict[str, Any] = {}
    if getattr(args, "config", None):
        config_path = Path(args.config)
        loaded = load_config_file(config_path)
        if loaded is None:
            raise ConfigError(f"Config file {config_path} not found")
        file_data = loaded

    exit_on_error = file_data.get("exit_on_error", False)
    if not isinstance(exit_on_error, bool):
        raise ConfigError(f"exit_on_error must be true or false, got {exit_on_error!r}")

    api_key = args.api_key or os.environ.get("OPENAI_API_KEY", "")
    model = _first(args.model, file_data.get("model"), os.environ.get("OPENAI_MODEL") or None, DEFAULT_MODEL)
    deck_file = _first(args.file, file_data.get("file"), DEFAULT_DECK_FILE)
    log_file = _first(args.log_file, file_data.get("log_file"))

    try:
        timeout = float(_first(args.timeout, file_data.get("timeout"), DEFAULT_TIMEOUT_S))
        max_attempts = int(_first(args.max_attempts, file_data.get("max_attempts"), 1))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid numeric setting: {e}") from e

    return AppConfig(
        api_key=api_key,
        deck_path=Path(deck_file),
        model=model,
        timeout=timeout,
        max_attempts=max_attempts,
        exit_on_error=bool(args.exit_on_error) or exit_on_error,
        log_file=Path(log_file) if log_file else None,
        verbose=bool(getattr(args, "verbose", False)),
    )
