"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, so the whole state machine can run against a
temp-directory store and in-memory streams in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileStore(Protocol):
    """Contract for whole-file text storage.

    Implementations must map every ``OSError`` to a
    :class:`~tempstack.exceptions.TempStackError` subclass.
    """

    def exists(self, path: Path) -> bool:
        """Return whether *path* currently exists."""
        ...  # pragma: no cover

    def ensure_dir(self, path: Path) -> None:
        """Create directory *path* (and parents) if it is missing.

        Raises
        ------
        StateInitializationError
            When the directory cannot be created.
        """
        ...  # pragma: no cover

    def ensure_file(self, path: Path) -> None:
        """Create an empty file at *path* if it is missing.

        Raises
        ------
        StateInitializationError
            When the file cannot be created.
        """
        ...  # pragma: no cover

    def read_text(self, path: Path) -> str:
        """Return the full content of *path*.

        Raises
        ------
        StorageError
            When the file cannot be read.
        """
        ...  # pragma: no cover

    def write_text(self, path: Path, text: str) -> None:
        """Replace the content of *path* with *text*."""
        ...  # pragma: no cover

    def append_text(self, path: Path, text: str) -> None:
        """Append *text* to *path*, creating it when absent."""
        ...  # pragma: no cover

    def remove_tree(self, path: Path) -> None:
        """Recursively delete directory *path*.

        Raises
        ------
        StorageError
            When removal fails.
        """
        ...  # pragma: no cover


class InputSource(Protocol):
    """Contract for the process's standard input."""

    def is_pipe(self) -> bool:
        """Return ``True`` when input is not an interactive terminal."""
        ...  # pragma: no cover

    def read_all(self) -> str:
        """Read input to completion."""
        ...  # pragma: no cover


class OutputSink(Protocol):
    """Contract for the process's standard output."""

    def write(self, text: str) -> None:
        """Write *text* verbatim, with no added newline."""
        ...  # pragma: no cover
