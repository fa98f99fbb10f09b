"""utf16conv — strict UTF-8 to UTF-16 conversion.

The core is a single pure operation, :func:`convert`, which validates a
byte sequence as well-formed UTF-8 and returns a freshly allocated array
of UTF-16 code units, or raises a typed error.
"""

from utf16conv.core.converter import Utf16Converter, convert, units_to_text
from utf16conv.exceptions import (
    ConversionError,
    InvalidEncodingError,
    LengthOverflowError,
    PlatformConversionError,
    Utf16ConvError,
)
from utf16conv.version import __version__

__all__: list[str] = [
    "ConversionError",
    "InvalidEncodingError",
    "LengthOverflowError",
    "PlatformConversionError",
    "Utf16ConvError",
    "Utf16Converter",
    "__version__",
    "convert",
    "units_to_text",
]
