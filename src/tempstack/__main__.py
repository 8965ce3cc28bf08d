"""Allow ``python -m tempstack`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m tempstack`` behaves identically to the ``tempstack``
console script.
"""

from __future__ import annotations

from tempstack.cli.app import cli

if __name__ == "__main__":
    cli()
