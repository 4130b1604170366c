from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


@dataclass(frozen=True, slots=True)
class LogMessage:
    """Diagnostics record for command source lifecycle and session events.

    ``source_kind`` names the variant that produced the event (``"batch"`` or
    ``"interactive"``); session-level events leave it unset.
    """

    level: str
    event: str
    source_kind: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.level!r}")
        if not self.event:
            raise ValueError("LogMessage requires a non-empty event name")
