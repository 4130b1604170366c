from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from command_source.adapters.factory import build_command_source, build_log_sink
from command_source.app.session import EchoCommandHandler, run_session
from command_source.config.loader import ConfigError, load_config
from command_source.config.models import AppConfig, SourceConfig
from command_source.domain.errors import SourceUnavailable
from command_source.ports.command_handler import CommandHandler

USAGE_ERROR = "Invalid mode. Use 'interactive' or 'headless FILE'"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="command-source", description="Line-oriented command source")
    parser.add_argument(
        "--mode",
        nargs="*",
        metavar="MODE",
        help="'interactive' or 'headless FILE'",
    )
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--log-path", help="Write JSONL diagnostics to this path")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_mode_override(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI mode wins over config; validation failures surface as ValueError.
    if args.mode is None:
        return
    if not args.mode:
        raise ValueError(USAGE_ERROR)
    mode = args.mode[0].strip().lower()
    if mode == "interactive" and len(args.mode) == 1:
        config.source = SourceConfig(
            mode="interactive",
            encoding=config.source.encoding,
            decode_errors=config.source.decode_errors,
        )
        return
    if mode == "headless" and len(args.mode) == 2:
        config.source = SourceConfig(
            mode="headless",
            script=args.mode[1],
            encoding=config.source.encoding,
            decode_errors=config.source.decode_errors,
        )
        return
    raise ValueError(USAGE_ERROR)


def apply_logging_override(config: AppConfig, args: argparse.Namespace) -> None:
    if args.log_path is not None:
        config.logging.enabled = True
        config.logging.path = args.log_path


def run(argv: Sequence[str] | None = None, *, handler: CommandHandler | None = None) -> int:
    # Thin bootstrap: resolve config, pick the source variant, hand control to the session loop.
    args = parse_args(argv)
    try:
        config = load_config(Path(args.config)) if args.config else AppConfig()
        apply_mode_override(config, args)
    except ConfigError as exc:
        print(f"Invalid config: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    if args.mode is None and not args.config:
        print(USAGE_ERROR, file=sys.stderr)
        return 1
    apply_logging_override(config, args)

    log_sink = build_log_sink(config.logging)
    try:
        try:
            source = build_command_source(config.source, log_sink=log_sink)
        except SourceUnavailable as exc:
            print(f"Error opening commands file: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            print(str(exc), file=sys.stderr)
            return 1
        return run_session(source, handler or EchoCommandHandler(), log_sink=log_sink)
    finally:
        log_sink.close()
