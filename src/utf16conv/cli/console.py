"""CLI console helpers with optional Rich support.

Diagnostics and tables go to stderr through :data:`console`; converted
text goes to stdout through :func:`write_text` so it can be piped.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) keep working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from utf16conv.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def rich_available() -> bool:
    """Whether Rich can be imported in this environment."""
    try:
        _load_rich_console_class()
    except EnvironmentError:
        return False
    return True


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def write_text(text: str) -> None:
    """Write converted *text* and a newline to stdout, unstyled."""
    sys.stdout.write(text)
    sys.stdout.write("\n")
    sys.stdout.flush()
