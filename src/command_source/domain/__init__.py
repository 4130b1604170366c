from .commands import CLOSE_ERROR_PREFIX, ERROR_PREFIX, EXIT_COMMAND, FATAL_EXIT_STATUS, PROMPT
from .errors import CommandSourceError, ReportedError, ResourceReleaseFailure, SourceUnavailable
from .logging import LogMessage

__all__ = [
    "CLOSE_ERROR_PREFIX",
    "ERROR_PREFIX",
    "EXIT_COMMAND",
    "FATAL_EXIT_STATUS",
    "PROMPT",
    "CommandSourceError",
    "LogMessage",
    "ReportedError",
    "ResourceReleaseFailure",
    "SourceUnavailable",
]
