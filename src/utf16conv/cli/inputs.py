"""Turning command-line arguments into the raw bytes to convert.

Three sources are supported: literal text (encoded as UTF-8 by the
interpreter), a hex byte string, and a file read in binary mode.  Hex
and file sources can carry malformed UTF-8, which is what makes them
useful for exercising the converter's error paths.
"""

from __future__ import annotations

import binascii
from pathlib import Path

from utf16conv.exceptions import InputReadError, InvalidInputError

_HEX_SEPARATORS = str.maketrans("", "", " \t\n,:-")


def parse_hex(value: str) -> bytes:
    """Parse ``"E6 97 A5"``, ``"e697a5"`` or ``"0xE6,0x97"`` into bytes.

    Raises
    ------
    InvalidInputError
        If *value* is empty or not an even run of hex digits.
    """
    cleaned = value.replace("0x", "").replace("0X", "").translate(_HEX_SEPARATORS)
    if not cleaned:
        raise InvalidInputError(
            "Hex input is empty.",
            hint='Pass bytes like --hex "E6 97 A5".',
        )
    try:
        return binascii.unhexlify(cleaned)
    except (binascii.Error, ValueError) as exc:
        raise InvalidInputError(
            f"Not a valid hex byte string: {value!r}",
            hint="Use pairs of hex digits, optionally separated by spaces.",
        ) from exc


def read_file(path: Path) -> bytes:
    """Read *path* as raw bytes.

    Raises
    ------
    InputReadError
        If the file cannot be opened or read.
    """
    try:
        return path.read_bytes()
    except OSError as exc:
        raise InputReadError(
            f"Cannot read {path}: {exc.strerror or exc}",
            hint="Check the path and its permissions.",
        ) from exc


def resolve_source(
    text: str | None,
    hex_value: str | None,
    file: Path | None,
) -> bytes:
    """Return the bytes of whichever single source was given.

    Raises
    ------
    InvalidInputError
        If zero or more than one source was given.
    """
    given = [source for source in (text, hex_value, file) if source is not None]
    if len(given) != 1:
        raise InvalidInputError(
            "Give exactly one input: TEXT, --hex or --file.",
            hint='Example: utf16conv convert --hex "E6 97 A5 E6 9C AC"',
        )
    if hex_value is not None:
        return parse_hex(hex_value)
    if file is not None:
        return read_file(file)
    if text is None:
        raise InvalidInputError(
            "Give exactly one input: TEXT, --hex or --file.",
        )
    # surrogateescape turns undecodable argv bytes back into raw bytes.
    return text.encode("utf-8", "surrogateescape")
