"""The path registry ("master record") — durable source of truth for the stack.

The registry is a plain-text file holding one absolute slot path per
line, in stack order.  It grows by appending a single line and is only
ever rewritten in full when pruning drops entries whose files were
deleted behind our back.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tempstack.core.models import Stack
from tempstack.core.protocols import FileStore

logger = logging.getLogger(__name__)


class PathRegistry:
    """Load, prune and extend the registry file.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`FileStore` protocol.
    registry_file:
        Location of the registry file.  Its parent is the state directory.
    """

    def __init__(self, store: FileStore, registry_file: Path) -> None:
        self._store: FileStore = store
        self._registry_file: Path = registry_file

    @property
    def registry_file(self) -> Path:
        return self._registry_file

    @property
    def state_dir(self) -> Path:
        return self._registry_file.parent

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def initialize_if_absent(self) -> None:
        """Make sure the state directory and an (empty) registry exist.

        Raises
        ------
        StateInitializationError
            When either cannot be created.  There is no recovery from
            this: nothing else can work without a registry.
        """
        if not self._store.exists(self.state_dir):
            self._store.ensure_dir(self.state_dir)
            logger.debug("created state dir %s", self.state_dir)
        if not self._store.exists(self._registry_file):
            self._store.ensure_file(self._registry_file)
            logger.debug("created registry %s", self._registry_file)

    def load(self) -> Stack:
        """Return the stack of registered slots that still exist on disk.

        Entries whose file is gone are dropped, keeping the survivors in
        their original order.  When anything was dropped the registry is
        rewritten immediately so it matches the filesystem again.
        """
        self.initialize_if_absent()
        entries = self._read_entries()
        surviving = tuple(p for p in entries if self._store.exists(p))

        if len(surviving) != len(entries):
            logger.debug(
                "pruning %d stale registry entries",
                len(entries) - len(surviving),
            )
            self._store.write_text(self._registry_file, _render(surviving))

        logger.debug("found %d temp files on stack", len(surviving))
        return Stack(paths=surviving)

    def append(self, path: Path) -> None:
        """Register *path* as the newest slot."""
        logger.debug("append file %s to registry", path)
        self._store.append_text(self._registry_file, f"{path}\n")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_entries(self) -> list[Path]:
        content = self._store.read_text(self._registry_file)
        return [Path(line) for line in content.split("\n") if line.strip()]


def _render(paths: tuple[Path, ...]) -> str:
    return "".join(f"{p}\n" for p in paths)
