"""Infrastructure: terminal output encoding detection and configuration.

Converted text is only useful if the output stream can carry every
code point.  This module reports the encoding of a text stream and can
switch it to UTF-8 — the Python counterpart of putting a console into a
Unicode text mode before writing wide strings.

Rules
-----
* Only ``TextIOWrapper.reconfigure()`` is used — no file-descriptor
  tricks, no environment variables.
* No ``print()`` — callers handle user-facing output.
* A stream that cannot be reconfigured is reported, not patched.
"""

from __future__ import annotations

import codecs
import sys
from dataclasses import dataclass
from typing import TextIO

from utf16conv.exceptions import TerminalConfigError

TARGET_ENCODING = "utf-8"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TerminalStatus:
    """Result of a terminal encoding probe or reconfiguration.

    Attributes
    ----------
    stream_name : str
        Display name of the stream (e.g. ``"<stdout>"``).
    encoding : str
        Encoding in effect after the call, or ``"unknown"``.
    reconfigured : bool
        Whether this call changed the stream's encoding.
    detail : str
        Human-readable status line.
    """

    stream_name: str
    encoding: str
    reconfigured: bool
    detail: str

    @property
    def is_unicode(self) -> bool:
        """Whether the stream can write any code point."""
        return _normalize(self.encoding).startswith("utf-")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _normalize(encoding: str | None) -> str:
    """Return the canonical codec name, or ``"unknown"``."""
    if not encoding:
        return "unknown"
    try:
        return codecs.lookup(encoding).name
    except LookupError:
        return encoding.lower()


def _stream_name(stream: TextIO) -> str:
    return str(getattr(stream, "name", "<stream>"))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def detect_terminal(stream: TextIO | None = None) -> TerminalStatus:
    """Report the encoding of *stream* (default ``sys.stdout``) unchanged."""
    target = stream if stream is not None else sys.stdout
    encoding = _normalize(getattr(target, "encoding", None))
    return TerminalStatus(
        stream_name=_stream_name(target),
        encoding=encoding,
        reconfigured=False,
        detail=f"writing {encoding}",
    )


def configure_unicode_output(stream: TextIO | None = None) -> TerminalStatus:
    """Switch *stream* (default ``sys.stdout``) to UTF-8 output.

    Streams that are already Unicode-capable are left alone.  Streams
    without ``reconfigure()`` (e.g. ``io.StringIO``, pytest capture
    objects) are reported with ``reconfigured=False``.

    Raises
    ------
    TerminalConfigError
        If the stream supports ``reconfigure()`` but refuses the change.
    """
    target = stream if stream is not None else sys.stdout
    status = detect_terminal(target)
    if status.is_unicode:
        return TerminalStatus(
            stream_name=status.stream_name,
            encoding=status.encoding,
            reconfigured=False,
            detail=f"already {status.encoding}",
        )

    reconfigure = getattr(target, "reconfigure", None)
    if not callable(reconfigure):
        return TerminalStatus(
            stream_name=status.stream_name,
            encoding=status.encoding,
            reconfigured=False,
            detail="stream does not support reconfigure()",
        )

    try:
        reconfigure(encoding=TARGET_ENCODING)
    except (ValueError, OSError) as exc:
        raise TerminalConfigError(
            f"Cannot switch {status.stream_name} to {TARGET_ENCODING}: {exc}",
            hint="Set PYTHONIOENCODING=utf-8 before starting the program.",
        ) from exc

    return TerminalStatus(
        stream_name=status.stream_name,
        encoding=_normalize(getattr(target, "encoding", TARGET_ENCODING)),
        reconfigured=True,
        detail=f"switched from {status.encoding} to {TARGET_ENCODING}",
    )
