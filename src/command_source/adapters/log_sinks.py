from __future__ import annotations

import json
from pathlib import Path

from command_source.domain.logging import LogMessage
from command_source.ports.log_sink import LogSink


class JsonlLogSink(LogSink):
    # File-backed structured log sink: one compact JSON object per line.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


class NullLogSink(LogSink):
    # Discards diagnostics; used when logging is disabled.
    def emit(self, message: LogMessage) -> None:
        _ = message

    def close(self) -> None:
        return None


def emit_event(
    sink: LogSink | None,
    level: str,
    event: str,
    *,
    source_kind: str | None = None,
    **fields: object,
) -> None:
    # Sources treat diagnostics as optional; a missing sink is a no-op.
    if sink is None:
        return
    sink.emit(LogMessage(level=level, event=event, source_kind=source_kind, fields=dict(fields)))


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "event": message.event,
        "source_kind": message.source_kind,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
