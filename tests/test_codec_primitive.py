"""Tests for the codecs-backed primitive (infra/codec_primitive.py).

Coverage:
* ``measure`` counts UTF-16 units, including surrogate pairs.
* ``fill`` writes into the given buffer and never grows it.
* Malformed UTF-8 maps to ``NO_UNICODE_TRANSLATION`` with an offset.
* Zero-length and oversized requests are refused.
* ``MemoryError`` maps to ``NOT_ENOUGH_MEMORY``.
"""

from __future__ import annotations

from unittest.mock import patch

from utf16conv.core.models import DiagnosticCode, new_units
from utf16conv.infra.codec_primitive import CodecPrimitive
from utf16conv.utils.constants import INT32_MAX

JAPAN_UTF8 = memoryview(bytes([0xE6, 0x97, 0xA5, 0xE6, 0x9C, 0xAC]))


# ---------------------------------------------------------------------------
# measure
# ---------------------------------------------------------------------------

class TestMeasure:
    def test_default_limit_is_int32_max(self) -> None:
        assert CodecPrimitive().max_input_length == INT32_MAX

    def test_ascii(self) -> None:
        result = CodecPrimitive().measure(memoryview(b"Japan"))
        assert result.ok
        assert result.count == 5

    def test_multibyte(self) -> None:
        assert CodecPrimitive().measure(JAPAN_UTF8).count == 2

    def test_astral_counts_two_units(self) -> None:
        data = memoryview("\U0001F600".encode("utf-8"))
        assert CodecPrimitive().measure(data).count == 2

    def test_invalid(self) -> None:
        result = CodecPrimitive().measure(memoryview(b"ab\xe6\x97"))
        assert not result.ok
        assert result.code is DiagnosticCode.NO_UNICODE_TRANSLATION
        assert result.position == 2
        assert result.detail

    def test_empty_refused(self) -> None:
        result = CodecPrimitive().measure(memoryview(b""))
        assert result.code is DiagnosticCode.INVALID_PARAMETER

    def test_oversized_refused(self) -> None:
        result = CodecPrimitive(max_input_length=3).measure(memoryview(b"Japan"))
        assert result.code is DiagnosticCode.INVALID_PARAMETER

    @patch("utf16conv.infra.codec_primitive.codecs.utf_8_decode", side_effect=MemoryError)
    def test_memory_error(self, _mock_decode: object) -> None:
        result = CodecPrimitive().measure(memoryview(b"Japan"))
        assert result.code is DiagnosticCode.NOT_ENOUGH_MEMORY


# ---------------------------------------------------------------------------
# fill
# ---------------------------------------------------------------------------

class TestFill:
    def test_writes_units(self) -> None:
        dest = new_units(2)
        result = CodecPrimitive().fill(JAPAN_UTF8, dest)
        assert result.ok
        assert result.count == 2
        assert list(dest) == [0x65E5, 0x672C]

    def test_surrogate_pair(self) -> None:
        dest = new_units(2)
        CodecPrimitive().fill(memoryview("\U0001F600".encode("utf-8")), dest)
        assert list(dest) == [0xD83D, 0xDE00]

    def test_buffer_too_small(self) -> None:
        dest = new_units(1)
        result = CodecPrimitive().fill(JAPAN_UTF8, dest)
        assert result.code is DiagnosticCode.INSUFFICIENT_BUFFER
        assert list(dest) == [0]

    def test_larger_buffer_not_grown(self) -> None:
        dest = new_units(4)
        result = CodecPrimitive().fill(JAPAN_UTF8, dest)
        assert result.count == 2
        assert len(dest) == 4
        assert list(dest) == [0x65E5, 0x672C, 0, 0]

    def test_invalid_leaves_buffer_untouched(self) -> None:
        dest = new_units(2)
        result = CodecPrimitive().fill(memoryview(b"\xff\xff"), dest)
        assert result.code is DiagnosticCode.NO_UNICODE_TRANSLATION
        assert list(dest) == [0, 0]

    def test_empty_refused(self) -> None:
        result = CodecPrimitive().fill(memoryview(b""), new_units(0))
        assert result.code is DiagnosticCode.INVALID_PARAMETER
