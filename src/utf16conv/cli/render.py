"""Presentation of converted UTF-16 code units.

This module is responsible for:

* Describing each code unit (BMP character, high/low surrogate).
* Rendering a Rich table of units, or a plain-text table without Rich.

All display-related logic lives here — no conversion, no argument
parsing.
"""

from __future__ import annotations

import sys
import unicodedata
from typing import Any

from utf16conv.cli.console import console
from utf16conv.core.models import Utf16Units


def _import_rich_table() -> type[Any] | None:
    """Import the Rich table class lazily, or ``None`` without Rich."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return None
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O)
# ---------------------------------------------------------------------------

def _unit_kind(unit: int) -> str:
    """Classify a single UTF-16 code unit."""
    if 0xD800 <= unit <= 0xDBFF:
        return "high surrogate"
    if 0xDC00 <= unit <= 0xDFFF:
        return "low surrogate"
    return "BMP"


def _char_name(char: str) -> str:
    """Unicode name of *char*, or its ``U+XXXX`` label when unnamed."""
    return unicodedata.name(char, f"U+{ord(char):04X}")


def build_unit_rows(units: Utf16Units) -> list[tuple[str, str, str, str]]:
    """Return ``(index, hex, char, name)`` rows, one per code unit.

    A surrogate pair shows the combined character on its high unit and
    ``"…"`` on its low unit.
    """
    rows: list[tuple[str, str, str, str]] = []
    index = 0
    while index < len(units):
        unit = units[index]
        kind = _unit_kind(unit)
        pair_ok = (
            kind == "high surrogate"
            and index + 1 < len(units)
            and _unit_kind(units[index + 1]) == "low surrogate"
        )
        if pair_ok:
            low = units[index + 1]
            code_point = 0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00)
            char = chr(code_point)
            rows.append((str(index), f"0x{unit:04X}", char, _char_name(char)))
            rows.append((str(index + 1), f"0x{low:04X}", "…", "low surrogate"))
            index += 2
            continue
        if kind == "BMP":
            char = chr(unit)
            shown = char if char.isprintable() else "·"
            rows.append((str(index), f"0x{unit:04X}", shown, _char_name(char)))
        else:
            rows.append((str(index), f"0x{unit:04X}", "?", f"unpaired {kind}"))
        index += 1
    return rows


# ---------------------------------------------------------------------------
# Table display
# ---------------------------------------------------------------------------

def _print_plain_units(title: str, rows: list[tuple[str, str, str, str]]) -> None:
    """Render the unit table without Rich."""
    print(f"\n{title}", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'#':<5} {'Unit':<8} {'Char':<5} {'Name'}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for index, hex_unit, char, name in rows:
        print(f"{index:<5} {hex_unit:<8} {char:<5} {name}", file=sys.stderr)
    print(file=sys.stderr)


def render_units(title: str, units: Utf16Units) -> None:
    """Print a table summarising *units* to stderr."""
    rows = build_unit_rows(units)
    table_class = _import_rich_table()
    if table_class is None:
        _print_plain_units(title, rows)
        return

    table = table_class(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Unit", style="bold")
    table.add_column("Char", justify="center")
    table.add_column("Name")
    for row in rows:
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print(f"[dim]{len(units)} UTF-16 code unit(s)[/dim]")
