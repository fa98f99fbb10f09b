"""Protocols (interfaces) consumed by the core layer.

These define the contract that an encoding primitive must satisfy.
Core code depends ONLY on this protocol — never on a concrete
implementation — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from utf16conv.core.models import PrimitiveResult, Utf16Units


class ConversionPrimitive(Protocol):
    """Contract for UTF-8 to UTF-16 conversion backends.

    Any object that provides :attr:`max_input_length`, :meth:`measure`
    and :meth:`fill` with the correct signatures satisfies this protocol
    structurally (no explicit inheritance required).

    Both methods validate strictly: a malformed byte sequence is a
    failure, never silently replaced.  Neither method raises for bad
    input; failures come back as a :class:`PrimitiveResult` carrying its
    own diagnostic code.
    """

    max_input_length: int
    """Largest input length, in bytes, the primitive accepts."""

    def measure(self, data: memoryview) -> PrimitiveResult:
        """Return the exact number of UTF-16 units *data* converts to.

        Nothing is written anywhere.  ``count`` is ``0`` on failure.
        """
        ...  # pragma: no cover

    def fill(self, data: memoryview, dest: Utf16Units) -> PrimitiveResult:
        """Convert *data* into the pre-sized buffer *dest*.

        Implementations must not grow *dest*.  When the converted text
        does not fit, the result carries
        :attr:`~utf16conv.core.models.DiagnosticCode.INSUFFICIENT_BUFFER`.
        """
        ...  # pragma: no cover
