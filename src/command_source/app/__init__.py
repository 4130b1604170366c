from .cli import apply_logging_override, apply_mode_override, build_parser, parse_args, run
from .session import EchoCommandHandler, run_session

__all__ = [
    "EchoCommandHandler",
    "apply_logging_override",
    "apply_mode_override",
    "build_parser",
    "parse_args",
    "run",
    "run_session",
]
