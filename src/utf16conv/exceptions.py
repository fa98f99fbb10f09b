"""Custom exception hierarchy for utf16conv.

All exceptions that cross layer boundaries must inherit from
:class:`Utf16ConvError`.  Raw codec exceptions (``UnicodeDecodeError``,
``MemoryError``) must NEVER propagate beyond the infrastructure layer —
they are turned into diagnostic values there and re-raised by the core
as a typed subclass defined here.

Hierarchy
---------
Utf16ConvError
├── LengthOverflowError
├── ConversionError
│   ├── InvalidEncodingError
│   └── PlatformConversionError
├── InvalidInputError
├── InputReadError
├── TerminalConfigError
└── EnvironmentError
"""

from __future__ import annotations

from utf16conv.core.models import DiagnosticCode


class Utf16ConvError(Exception):
    """Base exception for all utf16conv errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Length guard ----------------------------------------------------------

class LengthOverflowError(Utf16ConvError):
    """Raised when the input is too long to hand to the conversion primitive.

    Detected before any decoding attempt or allocation.
    """

    def __init__(
        self,
        length: int,
        limit: int,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            "Input string too long: "
            f"length {length} doesn't fit into a signed {limit.bit_length() + 1}-bit int.",
            hint=hint or "Split the input into smaller chunks and convert each one.",
        )
        self.length: int = length
        self.limit: int = limit


# --- Conversion failures ---------------------------------------------------

class ConversionError(Utf16ConvError):
    """Raised when the UTF-8 to UTF-16 conversion itself fails.

    Carries the diagnostic code reported by the conversion primitive.
    The code is opaque to callers beyond equality and display.
    """

    def __init__(
        self,
        message: str,
        error_code: DiagnosticCode | int,
        *,
        position: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.error_code: int = int(error_code)
        self.position: int | None = position
        """Byte offset of the first offending byte, when known."""

    def __str__(self) -> str:
        message = super().__str__()
        if self.position is None:
            return message
        return f"{message} (at byte offset {self.position})"


class InvalidEncodingError(ConversionError):
    """Raised when the input is not well-formed UTF-8 under strict validation."""

    def __init__(
        self,
        message: str,
        error_code: DiagnosticCode | int = DiagnosticCode.NO_UNICODE_TRANSLATION,
        *,
        position: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            message,
            error_code,
            position=position,
            hint=hint or "Reject the input or sanitize it to valid UTF-8 first.",
        )


class PlatformConversionError(ConversionError):
    """Raised when the primitive fails for a reason other than bad input."""

    def __init__(
        self,
        message: str,
        error_code: DiagnosticCode | int,
        *,
        position: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            message,
            error_code,
            position=position,
            hint=hint or "The input may be fine; retry or check available memory.",
        )


# --- CLI input -------------------------------------------------------------

class InvalidInputError(Utf16ConvError):
    """Raised when command-line input cannot be turned into bytes."""


class InputReadError(Utf16ConvError):
    """Raised when an input file cannot be read."""


# --- Environment / terminal ------------------------------------------------

class TerminalConfigError(Utf16ConvError):
    """Raised when the output stream cannot be switched to Unicode output."""


class EnvironmentError(Utf16ConvError):
    """Raised when an optional runtime dependency is not available."""
