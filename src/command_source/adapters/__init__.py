from .batch_source import BatchCommandSource
from .factory import build_command_source, build_log_sink
from .interactive_source import InteractiveCommandSource
from .log_sinks import JsonlLogSink, NullLogSink

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "BatchCommandSource",
    "InteractiveCommandSource",
    "JsonlLogSink",
    "NullLogSink",
    "build_command_source",
    "build_log_sink",
]
