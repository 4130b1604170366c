from .adapters import BatchCommandSource, InteractiveCommandSource, build_command_source
from .domain import EXIT_COMMAND, ReportedError, ResourceReleaseFailure, SourceUnavailable
from .ports import CommandHandler, CommandSource

__all__ = [
    "EXIT_COMMAND",
    "BatchCommandSource",
    "CommandHandler",
    "CommandSource",
    "InteractiveCommandSource",
    "ReportedError",
    "ResourceReleaseFailure",
    "SourceUnavailable",
    "build_command_source",
]
