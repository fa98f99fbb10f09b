"""Infrastructure layer — external system integration.

This layer wraps the interpreter's text codecs and the process's output
streams.  Raw codec exceptions are caught here and handed back as
diagnostic values; stream failures are re-raised as a
:class:`~utf16conv.exceptions.Utf16ConvError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from utf16conv.infra.codec_primitive import CodecPrimitive
from utf16conv.infra.terminal import (
    TerminalStatus,
    configure_unicode_output,
    detect_terminal,
)

__all__: list[str] = [
    "CodecPrimitive",
    "TerminalStatus",
    "configure_unicode_output",
    "detect_terminal",
]
