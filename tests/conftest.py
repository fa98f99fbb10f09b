"""Shared pytest fixtures and configuration for the utf16conv test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* The conversion primitive is replaced at the protocol boundary when a
  test needs to observe or script its calls.
* Tests must not depend on OS state (terminal encoding, byte order).
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from utf16conv.core.models import PrimitiveResult, Utf16Units
from utf16conv.infra.codec_primitive import CodecPrimitive
from utf16conv.utils.constants import INT32_MAX


class RecordingPrimitive:
    """Primitive double that records calls and can script results.

    Unscripted calls are delegated to the real :class:`CodecPrimitive`.
    """

    def __init__(
        self,
        *,
        max_input_length: int = INT32_MAX,
        measure_result: PrimitiveResult | None = None,
        fill_result: PrimitiveResult | None = None,
    ) -> None:
        self.max_input_length = max_input_length
        self._real = CodecPrimitive(max_input_length)
        self._measure_result = measure_result
        self._fill_result = fill_result
        self.measure_calls = 0
        self.fill_calls = 0
        self.fill_buffer_sizes: list[int] = []

    def measure(self, data: memoryview) -> PrimitiveResult:
        self.measure_calls += 1
        if self._measure_result is not None:
            return self._measure_result
        return self._real.measure(data)

    def fill(self, data: memoryview, dest: Utf16Units) -> PrimitiveResult:
        self.fill_calls += 1
        self.fill_buffer_sizes.append(len(dest))
        if self._fill_result is not None:
            return self._fill_result
        return self._real.fill(data, dest)


@pytest.fixture
def make_primitive() -> Callable[..., RecordingPrimitive]:
    """Factory fixture for :class:`RecordingPrimitive` instances."""
    return RecordingPrimitive


@pytest.fixture
def recording_primitive() -> RecordingPrimitive:
    """A pass-through primitive that only counts calls."""
    return RecordingPrimitive()
