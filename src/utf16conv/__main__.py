"""Allow ``python -m utf16conv`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m utf16conv`` behaves identically to the ``utf16conv``
console script.
"""

from __future__ import annotations

from utf16conv.cli.app import cli

if __name__ == "__main__":
    cli()
