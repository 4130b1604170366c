from .command_handler import CommandHandler
from .command_source import CommandSource
from .log_sink import LogSink

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "CommandHandler",
    "CommandSource",
    "LogSink",
]
