"""Common utilities shared across the package."""

from flashdeck.common.utils import (
    _load_env_file,
    _clean_value,
)
from flashdeck.common.errors import (
    FlashdeckError,
    ConfigError,
    DeckFileError,
    TranslationError,
    EmptyResponse,
    ParseError,
    MissingFields,
    TransportError,
)
from flashdeck.common.logging import (
    log,
    log_debug,
    set_log_file,
    hold_stdout,
)
from flashdeck.common.openai import TranslationClient
from flashdeck.common.config import AppConfig, load_config_file, resolve_config

__all__ = [
    # utils
    "_load_env_file",
    "_clean_value",
    # errors
    "FlashdeckError",
    "ConfigError",
    "DeckFileError",
    "TranslationError",
    "EmptyResponse",
    "ParseError",
    "MissingFields",
    "TransportError",
    # logging
    "log",
    "log_debug",
    "set_log_file",
    "hold_stdout",
    # openai
    "TranslationClient",
    # config
    "AppConfig",
    "load_config_file",
    "resolve_config",
]
