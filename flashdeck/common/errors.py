"""Exception types raised across the package."""


class FlashdeckError(Exception):
    """Base class for all flashdeck errors."""


class ConfigError(FlashdeckError):
    """Missing or invalid configuration (e.g. no API key)."""


class DeckFileError(FlashdeckError):
    """Deck file could not be read, decoded or appended to."""


class TranslationError(FlashdeckError):
    """The translation service call failed."""


class EmptyResponse(TranslationError):
    """The service replied without any choices."""


class ParseError(TranslationError):
    """The reply body or its embedded JSON payload is not well-formed."""


class MissingFields(TranslationError):
    """The reply parsed but a required field is empty."""


class TransportError(TranslationError):
    """Connection failure, timeout or non-success HTTP status."""


__all__ = [
    "FlashdeckError",
    "ConfigError",
    "DeckFileError",
    "TranslationError",
    "EmptyResponse",
    "ParseError",
    "MissingFields",
    "TransportError",
]
