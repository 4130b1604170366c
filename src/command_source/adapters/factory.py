from __future__ import annotations

from pathlib import Path

from command_source.adapters.batch_source import BatchCommandSource
from command_source.adapters.interactive_source import InteractiveCommandSource
from command_source.adapters.log_sinks import JsonlLogSink, NullLogSink
from command_source.config.models import LoggingConfig, SourceConfig
from command_source.ports.command_source import CommandSource
from command_source.ports.log_sink import LogSink


def build_command_source(config: SourceConfig, *, log_sink: LogSink | None = None) -> CommandSource:
    # Variant is chosen once at startup; both satisfy the same port.
    if config.mode == "headless":
        assert config.script is not None
        return BatchCommandSource(
            Path(config.script),
            encoding=config.encoding,
            decode_errors=config.decode_errors,
            log_sink=log_sink,
        )
    return InteractiveCommandSource(log_sink=log_sink)


def build_log_sink(config: LoggingConfig) -> LogSink:
    if not config.enabled:
        return NullLogSink()
    return JsonlLogSink(Path(config.path))
