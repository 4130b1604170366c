from __future__ import annotations

from pathlib import Path


class CommandSourceError(Exception):
    # Base class for command source failures.
    pass


class SourceUnavailable(CommandSourceError):
    # Raised while constructing a batch source whose script cannot be opened.
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ReportedError(CommandSourceError):
    # Application-level error routed to CommandSource.display_error by the session driver.
    pass


class ResourceReleaseFailure(CommandSourceError):
    # Raised internally when releasing a source handle fails; close() always absorbs it.
    pass
