"""Standard-stream adapters for the core's input and output protocols.

Both adapters resolve ``sys.stdin`` / ``sys.stdout`` lazily, at call
time, so tests that swap the streams (``capsys``, ``monkeypatch``) are
honoured.  Bytes go through the underlying binary buffer when one exists
so output is byte-for-byte identical to what was captured.  Write
failures leave this module as :class:`~tempstack.exceptions.StorageError`.
"""

from __future__ import annotations

import sys
from typing import IO, Any

from tempstack.exceptions import OutputClosedError, StorageError
from tempstack.utils.constants import TEXT_ENCODING, TEXT_ERRORS


class StdinSource:
    """Concrete :class:`~tempstack.core.protocols.InputSource` over stdin."""

    def __init__(self, stream: IO[Any] | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[Any] | None:
        return self._stream if self._stream is not None else sys.stdin

    def is_pipe(self) -> bool:
        """Anything that is not an interactive terminal counts as a pipe.

        A missing stdin (``None``) is treated as a terminal.
        """
        stream = self.stream
        if stream is None:
            return False
        return not stream.isatty()

    def read_all(self) -> str:
        stream = self.stream
        if stream is None:
            return ""
        raw = getattr(stream, "buffer", None)
        if raw is not None:
            return raw.read().decode(TEXT_ENCODING, TEXT_ERRORS)
        return stream.read()


class StdoutSink:
    """Concrete :class:`~tempstack.core.protocols.OutputSink` over stdout."""

    def __init__(self, stream: IO[Any] | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[Any]:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        if not text:
            return
        stream = self.stream
        try:
            self._write(stream, text)
        except BrokenPipeError as exc:
            raise OutputClosedError("stdout was closed by its reader") from exc
        except OSError as exc:
            raise StorageError(f"Cannot write to stdout: {exc}") from exc

    @staticmethod
    def _write(stream: IO[Any], text: str) -> None:
        raw = getattr(stream, "buffer", None)
        if raw is None:
            stream.write(text)
            stream.flush()
            return
        # Text written earlier must reach the buffer first.
        stream.flush()
        raw.write(text.encode(TEXT_ENCODING, TEXT_ERRORS))
        raw.flush()
