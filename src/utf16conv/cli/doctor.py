"""``utf16conv doctor`` — environment diagnostics command.

Gathers interpreter and terminal information, runs a conversion
self-test, and renders a Rich table summarising whether the runtime
environment can convert and display Unicode text.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No conversion logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from utf16conv.cli import exit_codes
from utf16conv.cli.console import console, rich_available
from utf16conv.core.converter import Utf16Converter, units_to_hex
from utf16conv.exceptions import Utf16ConvError
from utf16conv.infra.terminal import detect_terminal
from utf16conv.version import __version__

SELF_TEST_INPUT: bytes = bytes([0xE6, 0x97, 0xA5, 0xE6, 0x9C, 0xAC])
SELF_TEST_EXPECTED: tuple[int, ...] = (0x65E5, 0x672C)
SELF_TEST_INVALID: bytes = bytes([0xE6, 0x97])


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _utf16conv_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the utf16conv version row."""
    return "utf16conv", __version__, "[green]OK[/green]"


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _byte_order_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the native byte order row."""
    return "Byte order", f"{sys.byteorder}-endian", "[green]OK[/green]"


def _terminal_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the stdout encoding row."""
    status_obj = detect_terminal()
    if status_obj.is_unicode:
        return "stdout", status_obj.encoding, "[green]OK[/green]"
    return "stdout", status_obj.encoding, "[yellow]WARN[/yellow]"


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row."""
    if rich_available():
        return "rich", "installed", "[green]OK[/green]"
    return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"


def _self_test_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the conversion self-test row.

    Converts a known two-character sample and confirms that a truncated
    sequence is rejected.
    """
    converter = Utf16Converter()
    try:
        units = converter.convert(SELF_TEST_INPUT)
    except Utf16ConvError as exc:
        return "Self-test", str(exc), "[red]FAIL[/red]"
    if tuple(units) != SELF_TEST_EXPECTED:
        return "Self-test", units_to_hex(units), "[red]FAIL[/red]"

    try:
        converter.convert(SELF_TEST_INVALID)
    except Utf16ConvError:
        return "Self-test", units_to_hex(units), "[green]OK[/green]"
    return "Self-test", "truncated input accepted", "[red]FAIL[/red]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nutf16conv doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        plain_status = _status_plain(status)
        print(f"{label:<12} {value:<32} {plain_status:<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _utf16conv_version_check(),
        _python_version_check(),
        _byte_order_check(),
        _terminal_check(),
        _rich_check(),
        _self_test_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        Table = None

    if Table is not None:
        table = Table(
            title="utf16conv doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    terminal = detect_terminal()
    if not terminal.is_unicode:
        console.print(f"stdout writes {terminal.encoding}; non-ASCII output may fail.")
        console.print("Set PYTHONIOENCODING=utf-8 or run 'utf16conv demo', which switches it.")

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
