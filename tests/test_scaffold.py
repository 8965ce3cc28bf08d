"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from tempstack import __version__
from tempstack.cli import exit_codes
from tempstack.cli.app import main
from tempstack.exceptions import (
    EnvironmentError,
    InvalidInputSlotError,
    InvalidOutputSlotError,
    InvalidSlotError,
    OutputClosedError,
    StateInitializationError,
    StorageError,
    TempStackError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            StateInitializationError,
            InvalidSlotError,
            InvalidInputSlotError,
            InvalidOutputSlotError,
            StorageError,
            OutputClosedError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[TempStackError]
    ) -> None:
        assert issubclass(exc_class, TempStackError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(TempStackError, Exception)

    def test_hint_is_stored(self) -> None:
        err = TempStackError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = TempStackError("boom")
        assert err.hint is None

    def test_slot_errors_name_direction_and_index(self) -> None:
        assert str(InvalidInputSlotError("3")) == "invalid input file at idx: 3"
        assert str(InvalidOutputSlotError("x")) == "invalid output file at idx: x"

    def test_closed_output_is_a_storage_error(self) -> None:
        assert issubclass(OutputClosedError, StorageError)

    def test_slot_errors_carry_hint_and_index(self) -> None:
        err = InvalidOutputSlotError("7")
        assert err.index_text == "7"
        assert err.hint is not None and "--list-files" in err.hint


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_broken_pipe_is_141(self) -> None:
        assert exit_codes.BROKEN_PIPE == 141


# ---------------------------------------------------------------------------
# CLI bootstrap
# ---------------------------------------------------------------------------

class TestCLIBootstrap:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_help_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "--list-contents" in capsys.readouterr().out

    def test_input_requires_value(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--input"])
        assert exc_info.value.code == 2

    def test_package_main_module_importable(self) -> None:
        import tempstack.__main__  # noqa: F401
