"""Limits and codec constants shared by the core and infrastructure layers."""

from __future__ import annotations

import sys

INT32_MAX: int = 2**31 - 1
"""Largest value of a signed 32-bit ``int``.

Input lengths above this cannot be handed to a primitive that takes its
source length as a C ``int`` without truncation or a sign flip.
"""

ARRAY_TYPECODE: str = "H"
"""``array`` typecode for unsigned 16-bit code units."""

NATIVE_UTF16_CODEC: str = "utf-16-le" if sys.byteorder == "little" else "utf-16-be"
"""Codec whose byte layout matches ``array("H")`` on this machine."""
