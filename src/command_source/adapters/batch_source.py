from __future__ import annotations

import codecs
import sys
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import TextIO

from command_source.adapters.log_sinks import emit_event
from command_source.domain.commands import CLOSE_ERROR_PREFIX, ERROR_PREFIX, EXIT_COMMAND, FATAL_EXIT_STATUS, PROMPT
from command_source.domain.errors import ResourceReleaseFailure, SourceUnavailable
from command_source.ports.command_source import CommandSource
from command_source.ports.log_sink import LogSink

# Decode policies for script bytes; "replace" substitutes U+FFFD for malformed input.
DECODE_ERROR_POLICIES = frozenset({"strict", "replace"})


class BatchCommandSource(CommandSource):
    """Headless command source backed by a pre-recorded script file.

    The script is opened at construction and read one line per command. Blank
    and whitespace-only lines are skipped. Once the file is exhausted every call
    to :meth:`get_command` returns ``"exit"``.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        encoding: str = "utf-8",
        decode_errors: str = "replace",
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        exit_hook: Callable[[int], object] | None = None,
        log_sink: LogSink | None = None,
    ) -> None:
        if decode_errors not in DECODE_ERROR_POLICIES:
            raise ValueError("decode_errors must be one of: strict, replace")
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {encoding}") from exc
        self._path = Path(path)
        self._stdout = stdout
        self._stderr = stderr
        self._exit_hook = exit_hook
        self._log_sink = log_sink
        self._exhausted = False
        try:
            self._reader: TextIO | None = self._path.open("r", encoding=encoding, errors=decode_errors)
        except OSError as exc:
            # Construction aborts; the caller decides how to report a missing script.
            raise SourceUnavailable(self._path, exc.strerror or str(exc)) from exc
        emit_event(self._log_sink, "INFO", "source.opened", source_kind="batch", path=str(self._path))

    @property
    def path(self) -> Path:
        return self._path

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def get_command(self) -> str:
        # Exhaustion is sticky: every read after end-of-file yields the sentinel.
        if self._exhausted or self._reader is None:
            return EXIT_COMMAND
        for raw in self._reader:
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            print(PROMPT + line, file=self._out)
            return line
        self._exhausted = True
        emit_event(self._log_sink, "INFO", "source.exhausted", source_kind="batch", path=str(self._path))
        return EXIT_COMMAND

    def display_message(self, text: str) -> None:
        print(text, file=self._out)

    def display_error(self, text: str) -> None:
        # Any reported error ends a headless run.
        print(ERROR_PREFIX + text, file=self._err)
        self._err.flush()
        self._fatal_exit(FATAL_EXIT_STATUS)

    def close(self) -> None:
        if self._reader is None:
            return
        try:
            self._release()
        except ResourceReleaseFailure as exc:
            print(CLOSE_ERROR_PREFIX + str(exc), file=self._err)
            emit_event(self._log_sink, "ERROR", "source.close_failed", source_kind="batch", error=str(exc))
            return
        emit_event(self._log_sink, "INFO", "source.closed", source_kind="batch", path=str(self._path))

    def __enter__(self) -> BatchCommandSource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _release(self) -> None:
        reader = self._reader
        # Reference is dropped before closing; a failed release is never retried.
        self._reader = None
        assert reader is not None
        try:
            reader.close()
        except OSError as exc:
            raise ResourceReleaseFailure(str(exc)) from exc

    def _fatal_exit(self, status: int) -> None:
        # Single process-termination point; hosts may inject exit_hook to intercept it.
        hook = self._exit_hook if self._exit_hook is not None else sys.exit
        hook(status)

    @property
    def _out(self) -> TextIO:
        # Resolved per call so later redirection of sys.stdout is honored.
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def _err(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr
