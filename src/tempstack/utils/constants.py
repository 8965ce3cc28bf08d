"""Fixed names and environment keys shared across layers."""

from __future__ import annotations

STATE_DIR_NAME: str = "tempstack"
"""Directory created under the system temp dir to hold all state."""

REGISTRY_FILE_NAME: str = "master_record"
"""Registry (master record) file inside the state directory."""

SLOT_FILE_PREFIX: str = "tempfile_"
"""Slot files are named ``<prefix><milliseconds since epoch>``."""

TEXT_ENCODING: str = "utf-8"

TEXT_ERRORS: str = "surrogateescape"
"""Error handler that lets undecodable bytes round-trip unchanged."""

ENV_STATE_DIR: str = "TEMPSTACK_DIR"
"""Overrides the state directory location."""

ENV_LOG_LEVEL: str = "TEMPSTACK_LOG_LEVEL"
"""Overrides the default log level (``WARNING``)."""

DEFAULT_LOG_LEVEL: str = "WARNING"
