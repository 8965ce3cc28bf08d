"""Domain models for tempstack.

All models except :class:`RunState` are **frozen** dataclasses.  The
only behaviour they carry is pure index arithmetic; they perform no I/O.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path


# ---------------------------------------------------------------------------
# Slot selector
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SlotSelector:
    """A user-supplied 1-based slot index, parsed once.

    ``index`` is ``None`` when the raw text is not a positive integer.
    Such a selector never resolves, so non-numeric input is reported the
    same way as an out-of-range index.
    """

    text: str
    """The index exactly as the user typed it (used in error messages)."""

    index: int | None
    """Parsed 1-based index, or ``None`` when unparsable or below 1."""

    @classmethod
    def parse(cls, text: str) -> SlotSelector:
        stripped = text.strip()
        if not (stripped.isascii() and stripped.isdigit()):
            return cls(text=text, index=None)
        index = int(stripped)
        return cls(text=text, index=index if index >= 1 else None)


# ---------------------------------------------------------------------------
# Stack snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Stack:
    """Ordered, oldest-first snapshot of the registry's existing slots.

    Index 1 is the oldest surviving slot and ``len(stack)`` the newest.
    Numbering is stable for the lifetime of one run.
    """

    paths: tuple[Path, ...] = ()

    def __len__(self) -> int:
        return len(self.paths)

    def __bool__(self) -> bool:
        return len(self.paths) > 0

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def resolve_slot(self, selector: SlotSelector) -> Path | None:
        """Map *selector* to a slot path, or ``None`` when no such slot exists.

        Valid indices are exactly ``1..len(self)``.
        """
        if selector.index is None or selector.index > len(self.paths):
            return None
        return self.paths[selector.index - 1]

    def top(self) -> Path | None:
        """Return the most recently appended slot, if any."""
        return self.paths[-1] if self.paths else None

    def numbered(self) -> Iterator[tuple[int, Path]]:
        """Yield ``(index, path)`` pairs, oldest first, 1-based."""
        return enumerate(self.paths, start=1)


# ---------------------------------------------------------------------------
# Run options
# ---------------------------------------------------------------------------

class MaintenanceAction(enum.Enum):
    """Terminal actions that run instead of the capture/print flow.

    Declaration order is precedence order when several are requested.
    """

    LIST_FILES = "list-files"
    LIST_CONTENTS = "list-contents"
    CLEAR = "clear"


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Pre-parsed command-line options for a single run."""

    arg_file: Path | None = None
    """Explicit input file, used only when stdin is a terminal."""

    input_slot: SlotSelector | None = None
    """Slot to overwrite with this run's input."""

    output_slot: SlotSelector | None = None
    """Slot to print instead of the buffer."""

    silent: bool = False
    """Suppress buffer printing when no output slot is selected."""

    action: MaintenanceAction | None = None
    """Maintenance action to run instead of capture and print, if any."""


# ---------------------------------------------------------------------------
# Mutable per-run state
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class RunState:
    """Transient state owned by one :class:`StackApplication` run."""

    stack: Stack
    new_slot_path: Path
    """Path a brand-new slot would be created at during this run."""

    buffer: str = field(default="")
