"""Shared pytest fixtures and configuration for the tempstack test suite.

Guidelines
----------
* No test touches the real system temp directory — state lives under
  ``tmp_path`` and ``TEMPSTACK_DIR`` is redirected for every test.
* Core tests use the real local store plus in-memory stream fakes.
* Tests must not depend on whether the runner has a terminal attached.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from tempstack.core.application import StackApplication
from tempstack.core.registry import PathRegistry
from tempstack.infra.local_store import LocalFileStore
from tempstack.logging_config import LOGGER_NAME
from tempstack.utils.constants import ENV_LOG_LEVEL, ENV_STATE_DIR


# ---------------------------------------------------------------------------
# Stream fakes
# ---------------------------------------------------------------------------

class FakeStdin:
    """In-memory :class:`InputSource`.  ``text=None`` means a terminal."""

    def __init__(self, text: str | None = None) -> None:
        self.text = text
        self.reads = 0

    def is_pipe(self) -> bool:
        return self.text is not None

    def read_all(self) -> str:
        self.reads += 1
        return self.text or ""


class FakeStdout:
    """In-memory :class:`OutputSink` collecting everything written."""

    def __init__(self) -> None:
        self.chunks: list[str] = []

    def write(self, text: str) -> None:
        self.chunks.append(text)

    @property
    def value(self) -> str:
        return "".join(self.chunks)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_STATE_DIR, str(tmp_path / "state"))
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)


@pytest.fixture
def state_dir(tmp_path: Path) -> Path:
    return tmp_path / "state"


@pytest.fixture
def store() -> LocalFileStore:
    return LocalFileStore()


@pytest.fixture
def registry(store: LocalFileStore, state_dir: Path) -> PathRegistry:
    return PathRegistry(store, state_dir / "master_record")


@pytest.fixture
def seed_slots(
    registry: PathRegistry, state_dir: Path,
) -> Callable[..., list[Path]]:
    """Create slot files with the given contents and register them in order."""

    def _seed(*contents: str) -> list[Path]:
        registry.initialize_if_absent()
        created: list[Path] = []
        for i, text in enumerate(contents, start=1):
            path = state_dir / f"tempfile_{1000 + i}"
            path.write_text(text, encoding="utf-8")
            registry.append(path)
            created.append(path)
        return created

    return _seed


@pytest.fixture
def make_app(
    registry: PathRegistry, store: LocalFileStore, state_dir: Path,
) -> Callable[..., tuple[StackApplication, FakeStdout]]:
    """Build an application over *stdin_text* (``None`` = terminal)."""

    def _make(
        stdin_text: str | None = None,
        new_slot_name: str = "tempfile_9999",
    ) -> tuple[StackApplication, FakeStdout]:
        stdout = FakeStdout()
        app = StackApplication(
            registry=registry,
            store=store,
            stdin=FakeStdin(stdin_text),
            stdout=stdout,
            new_slot_path=state_dir / new_slot_name,
        )
        return app, stdout

    return _make


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    root = logging.getLogger(LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
