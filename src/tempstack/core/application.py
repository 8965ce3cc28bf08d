"""Core application — the capture/print state machine.

:class:`StackApplication` turns one set of :class:`RunOptions` into
reads and writes against the slot stack.  Every side effect goes
through the injected :class:`PathRegistry`, :class:`FileStore`,
:class:`InputSource` and :class:`OutputSink`; nothing here touches
``sys`` or the filesystem directly.

Flow
----
1. Load (and prune) the registry.
2. If a maintenance action was requested, run it and stop.
3. Acquire input: pipe, explicit file, or a peek at the top slot.
4. Emit output: the selected slot, or the buffer.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tempstack.core.models import MaintenanceAction, RunOptions, RunState
from tempstack.core.protocols import FileStore, InputSource, OutputSink
from tempstack.core.registry import PathRegistry
from tempstack.exceptions import (
    InvalidInputSlotError,
    InvalidOutputSlotError,
    StorageError,
)

logger = logging.getLogger(__name__)


class StackApplication:
    """Drive a single tempstack invocation.

    Parameters
    ----------
    registry:
        The registry that owns stack order and membership.
    store:
        File storage used for slot and input-file content.
    stdin:
        Source of piped input.
    stdout:
        Destination for printed text.
    new_slot_path:
        Where a brand-new slot is created if this run captures one.
    """

    def __init__(
        self,
        registry: PathRegistry,
        store: FileStore,
        stdin: InputSource,
        stdout: OutputSink,
        new_slot_path: Path,
    ) -> None:
        self._registry: PathRegistry = registry
        self._store: FileStore = store
        self._stdin: InputSource = stdin
        self._stdout: OutputSink = stdout
        self._new_slot_path: Path = new_slot_path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, options: RunOptions) -> RunState:
        """Execute one invocation and return its final state.

        Raises
        ------
        InvalidInputSlotError
            When ``options.input_slot`` does not name an existing slot.
        InvalidOutputSlotError
            When ``options.output_slot`` does not name an existing slot.
        StateInitializationError
            When the registry cannot be created.
        OutputClosedError
            When stdout is closed before everything is written.
        """
        state = RunState(
            stack=self._registry.load(),
            new_slot_path=self._new_slot_path,
        )
        logger.debug("new slot would be %s", state.new_slot_path)

        if options.action is not None:
            self.run_action(options.action, state)
            return state

        self.acquire_input(options, state)
        self.emit_output(options, state)
        return state

    def acquire_input(self, options: RunOptions, state: RunState) -> None:
        """Fill ``state.buffer`` and store it where the options direct."""
        if self._stdin.is_pipe():
            logger.debug("stdin pipe")
            state.buffer = self._stdin.read_all()
            self._store_buffer(options, state)
            return

        logger.debug("stdin term")
        if options.arg_file is not None:
            state.buffer = self._store.read_text(options.arg_file)
            self._store_buffer(options, state)
            return

        # Read-only peek at the newest slot; nothing is written.
        top = state.stack.top()
        if top is not None:
            state.buffer = self._store.read_text(top)

    def emit_output(self, options: RunOptions, state: RunState) -> None:
        """Print the selected slot, or the buffer unless silenced."""
        selector = options.output_slot
        if selector is not None:
            slot = state.stack.resolve_slot(selector)
            if slot is None:
                raise InvalidOutputSlotError(selector.text)
            self._stdout.write(self._store.read_text(slot))
            return

        if not options.silent:
            self._stdout.write(state.buffer)

    def run_action(self, action: MaintenanceAction, state: RunState) -> None:
        """Run a terminal maintenance action against the loaded stack."""
        if action is MaintenanceAction.LIST_FILES:
            logger.debug("list files")
            for index, path in state.stack.numbered():
                self._stdout.write(f"{index}: {path}\n")
        elif action is MaintenanceAction.LIST_CONTENTS:
            logger.debug("list contents")
            for index, path in state.stack.numbered():
                self._stdout.write(f"{index}: {path}\n")
                self._stdout.write(f"{self._store.read_text(path)}\n")
        elif action is MaintenanceAction.CLEAR:
            self._clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _store_buffer(self, options: RunOptions, state: RunState) -> None:
        """Overwrite the selected slot, or capture into a new one."""
        selector = options.input_slot
        if selector is not None:
            slot = state.stack.resolve_slot(selector)
            if slot is None:
                raise InvalidInputSlotError(selector.text)
            logger.debug("overwrite slot %s with %s", selector.index, slot)
            self._store.write_text(slot, state.buffer)
            return

        self._registry.append(state.new_slot_path)
        self._store.append_text(state.new_slot_path, state.buffer)

    def _clear(self) -> None:
        state_dir = self._registry.state_dir
        try:
            self._store.remove_tree(state_dir)
        except StorageError as exc:
            # Clearing is best effort; the run still succeeds.
            logger.warning("could not clear %s: %s", state_dir, exc)
        else:
            logger.debug("cleared %s", state_dir)
