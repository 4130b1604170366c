from __future__ import annotations

from dataclasses import dataclass

from command_source.adapters.log_sinks import emit_event
from command_source.domain.commands import EXIT_COMMAND
from command_source.domain.errors import ReportedError
from command_source.ports.command_handler import CommandHandler
from command_source.ports.command_source import CommandSource
from command_source.ports.log_sink import LogSink


@dataclass(frozen=True, slots=True)
class EchoCommandHandler(CommandHandler):
    # Demo handler for the bundled CLI: echoes commands back and stops on the sentinel.
    def handle(self, command: str, source: CommandSource) -> bool:
        text = command.strip()
        if text.lower() == EXIT_COMMAND:
            return False
        if not text:
            raise ReportedError("Empty command")
        source.display_message(text)
        return True


def run_session(
    source: CommandSource,
    handler: CommandHandler,
    *,
    log_sink: LogSink | None = None,
) -> int:
    """Drive ``handler`` with commands from ``source`` until it asks to stop.

    Errors raised as :class:`ReportedError` are routed to ``source.display_error``;
    a batch source ends the process there, an interactive one keeps going. End of
    interactive input finishes the session. The source is closed exactly once.
    """
    commands = 0
    try:
        keep_running = True
        while keep_running:
            try:
                command = source.get_command()
            except EOFError:
                break
            commands += 1
            try:
                keep_running = handler.handle(command, source)
            except ReportedError as exc:
                emit_event(log_sink, "WARNING", "session.error_reported", error=str(exc))
                source.display_error(str(exc))
    finally:
        source.close()
    emit_event(log_sink, "INFO", "session.finished", commands=commands)
    return 0
