"""Core converter — strict UTF-8 to UTF-16 conversion.

The conversion is delegated to a
:class:`~utf16conv.core.protocols.ConversionPrimitive` injected at
construction time, driven through a measure-then-fill protocol:

1. **Guard** — empty input short-circuits; oversized input is rejected
   before anything is decoded or allocated.
2. **Measure** — ask the primitive for the exact output length.
3. **Fill** — allocate exactly that many units and convert into them.

Guarantees
----------
* Pure — no I/O, no ``print()``, no logging, no global state.
* The input buffer is only read, never written.
* Either a complete unit array is returned or an error is raised;
  the partially filled buffer is never observable.
* Only :class:`~utf16conv.exceptions.Utf16ConvError` subclasses escape
  for malformed or oversized input.
"""

from __future__ import annotations

from utf16conv.core.models import (
    DiagnosticCode,
    PrimitiveResult,
    Utf16Units,
    new_units,
)
from utf16conv.core.protocols import ConversionPrimitive
from utf16conv.exceptions import (
    ConversionError,
    InvalidEncodingError,
    LengthOverflowError,
    PlatformConversionError,
)
from utf16conv.utils.constants import NATIVE_UTF16_CODEC

INVALID_SEQUENCE_MESSAGE = "Invalid UTF-8 sequence found in input string."
MEASURE_FAILED_MESSAGE = (
    "Cannot get result string length when converting from UTF-8 to UTF-16."
)
FILL_FAILED_MESSAGE = "Cannot convert from UTF-8 to UTF-16."


def _conversion_error(result: PrimitiveResult, fallback: str) -> ConversionError:
    """Build the typed error for a failed primitive call."""
    if result.code.is_translation_failure:
        return InvalidEncodingError(
            INVALID_SEQUENCE_MESSAGE,
            result.code,
            position=result.position,
        )
    return PlatformConversionError(
        fallback,
        result.code,
        position=result.position,
    )


class Utf16Converter:
    """Stateless service that converts UTF-8 bytes to UTF-16 code units.

    Parameters
    ----------
    primitive:
        Any object satisfying the :class:`ConversionPrimitive` protocol.
        Defaults to :class:`~utf16conv.infra.codec_primitive.CodecPrimitive`.
    """

    def __init__(self, primitive: ConversionPrimitive | None = None) -> None:
        if primitive is None:
            from utf16conv.infra.codec_primitive import CodecPrimitive

            primitive = CodecPrimitive()
        self._primitive: ConversionPrimitive = primitive

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def convert(self, data: bytes | bytearray | memoryview) -> Utf16Units:
        """Convert UTF-8 *data* to a freshly allocated UTF-16 unit array.

        Raises
        ------
        TypeError
            If *data* is a ``str`` or does not expose a byte buffer.
            Non-contiguous views are accepted and copied first.
        LengthOverflowError
            If the byte length of *data* exceeds what the primitive
            accepts.
        InvalidEncodingError
            If *data* is not well-formed UTF-8.
        PlatformConversionError
            If the primitive fails for any other reason.
        """
        if isinstance(data, str):
            raise TypeError("convert() expects a bytes-like object, not 'str'")

        # Byte length, not item count, for memoryviews of wide items.
        length = getattr(data, "nbytes", None)
        if length is None:
            length = len(data)
        if length == 0:
            return new_units(0)

        limit = self._primitive.max_input_length
        if length > limit:
            raise LengthOverflowError(length, limit)

        view = memoryview(data)
        if not view.c_contiguous:
            view = memoryview(view.tobytes())
        source = view.cast("B")

        measured = self._primitive.measure(source)
        if not measured.ok:
            raise _conversion_error(measured, MEASURE_FAILED_MESSAGE)

        try:
            units = new_units(measured.count)
        except MemoryError as exc:
            raise PlatformConversionError(
                FILL_FAILED_MESSAGE,
                DiagnosticCode.NOT_ENOUGH_MEMORY,
            ) from exc

        written = self._primitive.fill(source, units)
        if not written.ok:
            raise _conversion_error(written, FILL_FAILED_MESSAGE)
        if written.count != measured.count:
            raise PlatformConversionError(
                FILL_FAILED_MESSAGE,
                DiagnosticCode.INSUFFICIENT_BUFFER,
            )
        return units


# ---------------------------------------------------------------------------
# Module-level conveniences
# ---------------------------------------------------------------------------

def convert(data: bytes | bytearray | memoryview) -> Utf16Units:
    """Convert UTF-8 *data* to UTF-16 using the default primitive."""
    return Utf16Converter().convert(data)


def units_to_text(units: Utf16Units) -> str:
    """Decode a UTF-16 unit sequence back to ``str``.

    Raises
    ------
    InvalidEncodingError
        If *units* contains an unpaired surrogate.
    """
    try:
        return units.tobytes().decode(NATIVE_UTF16_CODEC)
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(
            f"Invalid UTF-16 sequence: {exc.reason}.",
            position=exc.start // 2,
        ) from exc


def units_to_hex(units: Utf16Units) -> str:
    """Render units as space-separated ``0xHHHH`` literals."""
    return " ".join(f"0x{unit:04X}" for unit in units)