"""Python ``codecs`` backed implementation of
:class:`~utf16conv.core.protocols.ConversionPrimitive`.

This module is the **only** place in the codebase that runs the UTF-8
decoder on untrusted input.  ``UnicodeDecodeError`` and ``MemoryError``
are caught here and turned into a
:class:`~utf16conv.core.models.PrimitiveResult` carrying the matching
:class:`~utf16conv.core.models.DiagnosticCode`.

Rules
-----
* Strict decoding only — the ``"strict"`` error handler, never
  ``"replace"`` or ``"surrogatepass"``.
* Zero-length and oversized requests are refused, like a C primitive
  taking an ``int`` length would.
* Never writes past the end of the destination buffer.
"""

from __future__ import annotations

import codecs

from utf16conv.core.models import DiagnosticCode, PrimitiveResult, Utf16Units
from utf16conv.utils.constants import INT32_MAX, NATIVE_UTF16_CODEC


class CodecPrimitive:
    """Concrete :class:`ConversionPrimitive` over the stdlib UTF-8 codec.

    This class satisfies the :class:`~utf16conv.core.protocols.ConversionPrimitive`
    protocol structurally — no explicit inheritance required.

    Parameters
    ----------
    max_input_length:
        Largest accepted input length in bytes.  Defaults to the signed
        32-bit ``int`` maximum.
    """

    def __init__(self, max_input_length: int = INT32_MAX) -> None:
        self.max_input_length: int = max_input_length

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_request(self, data: memoryview) -> PrimitiveResult | None:
        """Return a failure for requests the primitive refuses outright."""
        if len(data) == 0:
            return PrimitiveResult.failure(
                DiagnosticCode.INVALID_PARAMETER,
                detail="zero-length input",
            )
        if len(data) > self.max_input_length:
            return PrimitiveResult.failure(
                DiagnosticCode.INVALID_PARAMETER,
                detail=f"input length exceeds {self.max_input_length} bytes",
            )
        return None

    @staticmethod
    def _encode(data: memoryview) -> bytes | PrimitiveResult:
        """Decode *data* strictly and re-encode it as native UTF-16."""
        try:
            text, _consumed = codecs.utf_8_decode(data, "strict", True)
            return text.encode(NATIVE_UTF16_CODEC)
        except UnicodeDecodeError as exc:
            return PrimitiveResult.failure(
                DiagnosticCode.NO_UNICODE_TRANSLATION,
                detail=exc.reason,
                position=exc.start,
            )
        except MemoryError:
            return PrimitiveResult.failure(
                DiagnosticCode.NOT_ENOUGH_MEMORY,
                detail="out of memory while decoding",
            )

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def measure(self, data: memoryview) -> PrimitiveResult:
        """Return the number of UTF-16 units *data* decodes to."""
        refused = self._check_request(data)
        if refused is not None:
            return refused

        encoded = self._encode(data)
        if isinstance(encoded, PrimitiveResult):
            return encoded
        return PrimitiveResult.success(len(encoded) // 2)

    def fill(self, data: memoryview, dest: Utf16Units) -> PrimitiveResult:
        """Convert *data* into *dest* without resizing it."""
        refused = self._check_request(data)
        if refused is not None:
            return refused

        encoded = self._encode(data)
        if isinstance(encoded, PrimitiveResult):
            return encoded

        count = len(encoded) // 2
        if count > len(dest):
            return PrimitiveResult.failure(
                DiagnosticCode.INSUFFICIENT_BUFFER,
                detail=f"need {count} units, buffer holds {len(dest)}",
            )

        memoryview(dest).cast("B")[: len(encoded)] = encoded
        return PrimitiveResult.success(count)
