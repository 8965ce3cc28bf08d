"""Core / service layer — the slot stack and its state machine.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or stream I/O: everything goes through the
  protocols in :mod:`tempstack.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from tempstack.core.application import StackApplication
from tempstack.core.models import (
    MaintenanceAction,
    RunOptions,
    RunState,
    SlotSelector,
    Stack,
)
from tempstack.core.protocols import FileStore, InputSource, OutputSink
from tempstack.core.registry import PathRegistry

__all__: list[str] = [
    "FileStore",
    "InputSource",
    "MaintenanceAction",
    "OutputSink",
    "PathRegistry",
    "RunOptions",
    "RunState",
    "SlotSelector",
    "Stack",
    "StackApplication",
]
