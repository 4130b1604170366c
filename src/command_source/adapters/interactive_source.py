from __future__ import annotations

import sys
from types import TracebackType
from typing import TextIO

from command_source.adapters.log_sinks import emit_event
from command_source.domain.commands import ERROR_PREFIX, PROMPT
from command_source.ports.command_source import CommandSource
from command_source.ports.log_sink import LogSink


class InteractiveCommandSource(CommandSource):
    """Console command source: prompts with ``"> "`` and returns raw input lines."""

    def __init__(
        self,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        log_sink: LogSink | None = None,
    ) -> None:
        self._reader: TextIO | None = stdin if stdin is not None else sys.stdin
        self._stdout = stdout
        self._stderr = stderr
        self._log_sink = log_sink
        emit_event(self._log_sink, "INFO", "source.opened", source_kind="interactive")

    @property
    def closed(self) -> bool:
        return self._reader is None

    def get_command(self) -> str:
        # Prompt stays on the same visual line as the operator's input.
        out = self._out
        out.write(PROMPT)
        out.flush()
        if self._reader is None:
            raise EOFError("command source is closed")
        line = self._reader.readline()
        if not line:
            raise EOFError("end of interactive input")
        # Only the line terminator is removed; blanks and surrounding spaces are returned as typed.
        return line.removesuffix("\n")

    def display_message(self, text: str) -> None:
        print(text, file=self._out)

    def display_error(self, text: str) -> None:
        # Interactive sessions survive reported errors.
        print(ERROR_PREFIX + text, file=self._err)

    def close(self) -> None:
        if self._reader is None:
            return
        # The process-level input stream belongs to the interpreter; only our reference is released.
        self._reader = None
        emit_event(self._log_sink, "INFO", "source.closed", source_kind="interactive")

    def __enter__(self) -> InteractiveCommandSource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def _err(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr
