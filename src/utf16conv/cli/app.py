"""CLI application entry point and command routing for utf16conv.

This module is the **sole error boundary** for the entire application.
It catches :class:`~utf16conv.exceptions.Utf16ConvError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No conversion logic lives here — all work is delegated to the core
  and infrastructure layers.
* Diagnostics go to stderr through the console proxy; converted text is
  the only thing written to stdout.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from utf16conv.cli import exit_codes
from utf16conv.cli.console import console
from utf16conv.exceptions import ConversionError, Utf16ConvError
from utf16conv.version import __version__

DEMO_SAMPLES: tuple[tuple[str, bytes], ...] = (
    ("Japan", b"Japan"),
    ("Japan (kanji)", bytes([0xE6, 0x97, 0xA5, 0xE6, 0x9C, 0xAC])),
)
"""Inputs of the demonstration run: ASCII text and U+65E5 U+672C."""

SHOW_CHOICES: tuple[str, ...] = ("text", "units", "both")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``utf16conv demo``      — print the demonstration conversions
    * ``utf16conv convert``   — convert TEXT, --hex bytes or --file bytes
    * ``utf16conv doctor``    — environment diagnostics
    * ``utf16conv --version``
    """
    parser = argparse.ArgumentParser(
        prog="utf16conv",
        description="Strict UTF-8 to UTF-16 conversion.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    demo = commands.add_parser(
        "demo",
        help="Convert and print the built-in sample texts.",
    )
    demo.add_argument(
        "--units",
        action="store_true",
        help="Also show the UTF-16 code units of each sample.",
    )

    convert = commands.add_parser(
        "convert",
        help="Convert UTF-8 input and show the UTF-16 result.",
    )
    convert.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to convert (encoded as UTF-8).",
    )
    convert.add_argument(
        "--hex",
        dest="hex_value",
        default=None,
        metavar="HEX",
        help='UTF-8 bytes as hex, e.g. "E6 97 A5".',
    )
    convert.add_argument(
        "--file",
        type=Path,
        default=None,
        metavar="PATH",
        help="Read the UTF-8 bytes from a file.",
    )
    convert.add_argument(
        "--show",
        choices=SHOW_CHOICES,
        default="both",
        help="What to print: decoded text, code units, or both (default).",
    )

    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_demo(show_units: bool) -> int:
    """Configure the terminal, then convert and print each sample."""
    from utf16conv.cli.console import write_text
    from utf16conv.cli.render import render_units
    from utf16conv.core.converter import Utf16Converter, units_to_text
    from utf16conv.infra.terminal import configure_unicode_output

    configure_unicode_output()
    converter = Utf16Converter()

    for index, (label, data) in enumerate(DEMO_SAMPLES):
        units = converter.convert(data)
        if index:
            # Samples are separated by a blank line.
            write_text("")
        write_text(units_to_text(units))
        if show_units:
            render_units(label, units)

    return exit_codes.SUCCESS


def _handle_convert(
    text: str | None,
    hex_value: str | None,
    file: Path | None,
    show: str,
) -> int:
    """Convert one input and print the text and/or unit table."""
    from utf16conv.cli.console import write_text
    from utf16conv.cli.inputs import resolve_source
    from utf16conv.cli.render import render_units
    from utf16conv.core.converter import Utf16Converter, units_to_text
    from utf16conv.infra.terminal import configure_unicode_output

    data = resolve_source(text, hex_value, file)
    units = Utf16Converter().convert(data)

    if show in ("text", "both"):
        configure_unicode_output()
        write_text(units_to_text(units))
    if show in ("units", "both"):
        render_units(f"{len(data)} UTF-8 byte(s)", units)

    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from utf16conv.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the utf16conv CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "demo":
        return _handle_demo(args.units)

    if args.command == "doctor":
        return _handle_doctor()

    return _handle_convert(args.text, args.hex_value, args.file, args.show)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report_error(exc: Utf16ConvError) -> None:
    """Render a known error, its diagnostic code, and its hint."""
    console.print(f"[bold red]Error:[/bold red] {exc}")
    if isinstance(exc, ConversionError):
        console.print(f"[dim]Diagnostic code: {exc.error_code}[/dim]")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {exc.hint}")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except Utf16ConvError as exc:
        _report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
