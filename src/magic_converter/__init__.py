# magic_converter/__init__.py

"""Magic Converter package.

Re-exports the core logic for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
)

from .logic import (
    MAGIC_WIDTH,
    MAGIC_MAX,
    AmbiguousImageError,
    BadCodeError,
    NonAsciiError,
    ReverseMagicError,
    TooLongError,
    TooShortError,
    bytes_to_magic,
    code_to_byte,
    format_magic,
    is_code_word,
    magic_to_bytes,
    parse_magic_value,
    reverse_magic,
    show_byte,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE",
    # Logic
    "MAGIC_WIDTH", "MAGIC_MAX",
    "AmbiguousImageError", "BadCodeError", "NonAsciiError",
    "ReverseMagicError", "TooLongError", "TooShortError",
    "bytes_to_magic", "code_to_byte", "format_magic", "is_code_word",
    "magic_to_bytes", "parse_magic_value", "reverse_magic", "show_byte",
]
