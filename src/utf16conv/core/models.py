"""Domain models for utf16conv.

Diagnostic codes and primitive outcomes are immutable values.  A
failed primitive call hands back a :class:`PrimitiveResult` that already
owns its diagnostic code, so there is no "last error" state to query
after the fact.
"""

from __future__ import annotations

from array import array
from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias

from utf16conv.utils.constants import ARRAY_TYPECODE


# ---------------------------------------------------------------------------
# Output sequence
# ---------------------------------------------------------------------------

Utf16Units: TypeAlias = "array[int]"
"""Owned sequence of unsigned 16-bit code units (``array("H")``)."""


# ---------------------------------------------------------------------------
# Diagnostic codes
# ---------------------------------------------------------------------------

class DiagnosticCode(IntEnum):
    """Numeric diagnostics reported by a conversion primitive.

    The values follow the classic platform last-error numbering so that
    codes stay recognisable when displayed.
    """

    SUCCESS = 0
    NOT_ENOUGH_MEMORY = 8
    INVALID_PARAMETER = 87
    INSUFFICIENT_BUFFER = 122
    NO_UNICODE_TRANSLATION = 1113

    @property
    def is_translation_failure(self) -> bool:
        """Whether the code means the input bytes were not valid UTF-8."""
        return self is DiagnosticCode.NO_UNICODE_TRANSLATION


# ---------------------------------------------------------------------------
# Primitive outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PrimitiveResult:
    """Outcome of a single ``measure`` or ``fill`` primitive call."""

    count: int
    """UTF-16 units measured or written.  ``0`` on failure."""

    code: DiagnosticCode = DiagnosticCode.SUCCESS
    """Diagnostic captured at the failure point."""

    detail: str | None = None
    """Human-readable reason from the primitive, if any."""

    position: int | None = None
    """Byte offset of the first offending input byte, if known."""

    @property
    def ok(self) -> bool:
        return self.count > 0 and self.code == DiagnosticCode.SUCCESS

    @classmethod
    def success(cls, count: int) -> PrimitiveResult:
        return cls(count=count)

    @classmethod
    def failure(
        cls,
        code: DiagnosticCode,
        *,
        detail: str | None = None,
        position: int | None = None,
    ) -> PrimitiveResult:
        return cls(count=0, code=code, detail=detail, position=position)


def new_units(length: int) -> Utf16Units:
    """Allocate a zero-filled unit buffer of exactly *length* units."""
    return array(ARRAY_TYPECODE, bytes(2 * length))
