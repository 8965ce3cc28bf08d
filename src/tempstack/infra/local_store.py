"""Local-disk implementation of :class:`~tempstack.core.protocols.FileStore`.

This module is the **only** place in the codebase that reads, writes or
deletes files.  Every ``OSError`` is caught here and re-raised as a
typed :class:`~tempstack.exceptions.TempStackError` subclass, so nothing
raw escapes the infrastructure boundary.

Text is UTF-8 with the ``surrogateescape`` handler and no newline
translation, so any byte sequence written through the store reads back
unchanged.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from tempstack.exceptions import StateInitializationError, StorageError
from tempstack.utils.constants import TEXT_ENCODING, TEXT_ERRORS


class LocalFileStore:
    """Concrete :class:`FileStore` backed by :mod:`pathlib` and :mod:`shutil`.

    This class satisfies the :class:`~tempstack.core.protocols.FileStore`
    protocol structurally, without explicit inheritance.
    """

    def exists(self, path: Path) -> bool:
        return path.exists()

    def ensure_dir(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StateInitializationError(
                f"Cannot create state directory {path}: {exc}",
                hint="Check permissions on the temp directory or set TEMPSTACK_DIR.",
            ) from exc

    def ensure_file(self, path: Path) -> None:
        try:
            path.touch(exist_ok=True)
        except OSError as exc:
            raise StateInitializationError(
                f"Cannot create registry file {path}: {exc}",
                hint="Check permissions on the temp directory or set TEMPSTACK_DIR.",
            ) from exc

    def read_text(self, path: Path) -> str:
        try:
            with path.open("r", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as fh:
                return fh.read()
        except OSError as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

    def write_text(self, path: Path, text: str) -> None:
        self._write(path, text, mode="w")

    def append_text(self, path: Path, text: str) -> None:
        self._write(path, text, mode="a")

    def remove_tree(self, path: Path) -> None:
        try:
            shutil.rmtree(path)
        except OSError as exc:
            raise StorageError(f"Cannot remove {path}: {exc}") from exc

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _write(path: Path, text: str, *, mode: str) -> None:
        try:
            with path.open(mode, encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as fh:
                fh.write(text)
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc
