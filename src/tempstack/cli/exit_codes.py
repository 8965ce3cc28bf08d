"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — run or maintenance action completed."""

GENERAL_ERROR: int = 1
"""A known TempStackError was caught (e.g. an invalid slot index)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

BROKEN_PIPE: int = 141
"""Stdout was closed by its reader (128 + SIGPIPE=13).  Nothing is printed."""
