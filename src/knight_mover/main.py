import argparse
import logging
import sys
from typing import Sequence

import httpx

from knight_mover.cli.runner import MissionReport, run_mission
from knight_mover.config import (
    DEFAULT_BOARD_URL,
    DEFAULT_COMMANDS_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT,
    LOG_FORMAT,
)
from knight_mover.io.serializer import dump_result


def _load_report(args: argparse.Namespace) -> MissionReport:
    with httpx.Client(timeout=args.timeout) as client:
        return run_mission(args.board, args.commands, client=client, timeout=args.timeout)


def run_cli(args: argparse.Namespace) -> int:
    report = _load_report(args)
    print(
        dump_result(
            report.result,
            indent=args.indent,
            board=report.board,
            timeline=report.timeline if args.trace else None,
        )
    )
    return 0 if report.result.succeeded else 1


def run_ui(args: argparse.Namespace) -> int:
    import flet as ft
    from knight_mover.ui.app import KnightViewerApp

    report = _load_report(args)
    print(f"Opening replay viewer ({report.result.status})...")
    app = KnightViewerApp(report)
    ft.app(target=app.main)
    return 0 if report.result.succeeded else 1


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--board",
        default=DEFAULT_BOARD_URL,
        help="URL or file path of the board JSON (default: public sample board)",
    )
    parser.add_argument(
        "--commands",
        default=DEFAULT_COMMANDS_URL,
        help="URL or file path of the commands JSON (default: public sample commands)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Fetch timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level for stderr output (default: {DEFAULT_LOG_LEVEL})",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Knight Mover CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Replay the commands and print the result JSON")
    _add_source_arguments(run_parser)
    run_parser.add_argument("--indent", type=int, default=None, help="Pretty-print the JSON output")
    run_parser.add_argument("--trace", action="store_true", help="Include the step-by-step timeline")
    run_parser.set_defaults(func=run_cli)

    ui_parser = subparsers.add_parser("ui", help="Open the replay viewer")
    _add_source_arguments(ui_parser)
    ui_parser.set_defaults(func=run_ui)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 2

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, stream=sys.stderr)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
