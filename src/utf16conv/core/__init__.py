"""Core layer — pure conversion logic and its data types.

Rules
-----
* No ``print()`` calls, no logging.
* No filesystem or stream I/O.
* No imports from ``cli``.  ``infra`` is imported lazily, and only to
  supply the default conversion primitive.
* All functions must be fully typed and deterministic.
"""

from utf16conv.core.converter import (
    Utf16Converter,
    convert,
    units_to_hex,
    units_to_text,
)
from utf16conv.core.models import DiagnosticCode, PrimitiveResult, Utf16Units
from utf16conv.core.protocols import ConversionPrimitive

__all__: list[str] = [
    "ConversionPrimitive",
    "DiagnosticCode",
    "PrimitiveResult",
    "Utf16Converter",
    "Utf16Units",
    "convert",
    "units_to_hex",
    "units_to_text",
]
