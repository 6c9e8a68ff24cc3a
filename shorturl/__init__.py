from shorturl.core.errors import (
    ConfigurationError,
    InvalidCharacterError,
    InvalidInputError,
    NegativeResultError,
    ShortCodeError,
)
from shorturl.utils.encoding import DEFAULT_ALPHABET, SHUFFLED_ALPHABET, Codec, CodecConfig

__version__ = "0.1.0"

__all__ = [
    "Codec",
    "CodecConfig",
    "DEFAULT_ALPHABET",
    "SHUFFLED_ALPHABET",
    "ShortCodeError",
    "ConfigurationError",
    "InvalidInputError",
    "InvalidCharacterError",
    "NegativeResultError",
]
