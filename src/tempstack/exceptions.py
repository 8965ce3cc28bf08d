"""Custom exception hierarchy for tempstack.

All exceptions that cross layer boundaries must inherit from
:class:`TempStackError`.  Raw ``OSError`` exceptions must NEVER
propagate beyond the infrastructure layer; they are caught there and
re-raised as a typed subclass defined here.

Hierarchy
---------
TempStackError
├── StateInitializationError
├── InvalidSlotError
│   ├── InvalidInputSlotError
│   └── InvalidOutputSlotError
├── StorageError
│   └── OutputClosedError
└── EnvironmentError
"""

from __future__ import annotations


class TempStackError(Exception):
    """Base exception for all tempstack errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- State directory / registry -------------------------------------------

class StateInitializationError(TempStackError):
    """Raised when the state directory or registry file cannot be created."""


# --- Slot references -------------------------------------------------------

class InvalidSlotError(TempStackError):
    """Raised when a slot index does not name an existing slot.

    Covers out-of-range, zero, negative and non-numeric indices alike.
    """

    kind: str = "slot"

    def __init__(self, index_text: str) -> None:
        super().__init__(
            f"invalid {self.kind} file at idx: {index_text}",
            hint="Run with --list-files to see the available slots.",
        )
        self.index_text: str = index_text


class InvalidInputSlotError(InvalidSlotError):
    """Raised when ``--input`` names a slot that does not exist."""

    kind = "input"


class InvalidOutputSlotError(InvalidSlotError):
    """Raised when ``--output`` names a slot that does not exist."""

    kind = "output"


# --- File I/O --------------------------------------------------------------

class StorageError(TempStackError):
    """Raised when reading or writing a slot or input file fails."""


class OutputClosedError(StorageError):
    """Raised when the reader on the other end of stdout has gone away."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TempStackError):
    """Raised when an optional runtime dependency is not available."""
