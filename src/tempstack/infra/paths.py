"""State-directory layout and slot naming."""

from __future__ import annotations

import os
import tempfile
import time
from collections.abc import Mapping
from pathlib import Path

from tempstack.utils.constants import (
    ENV_STATE_DIR,
    REGISTRY_FILE_NAME,
    SLOT_FILE_PREFIX,
    STATE_DIR_NAME,
)


def state_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return the directory holding the registry and all slot files.

    ``$TEMPSTACK_DIR`` wins when set and non-empty; otherwise
    ``<system temp dir>/tempstack``.
    """
    env = os.environ if env is None else env
    override = env.get(ENV_STATE_DIR, "").strip()
    if override:
        return Path(override).expanduser().absolute()
    return Path(tempfile.gettempdir()).absolute() / STATE_DIR_NAME


def registry_file(directory: Path) -> Path:
    return directory / REGISTRY_FILE_NAME


def new_slot_path(directory: Path, now_ms: int | None = None) -> Path:
    """Name a fresh slot after the current time in milliseconds.

    Two slots created within the same millisecond share a name; the
    second capture then appends to the first file.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return directory / f"{SLOT_FILE_PREFIX}{now_ms}"
