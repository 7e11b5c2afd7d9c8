"""Command line interface for Sortery."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ConfigData, load_config
from .errors import ConfigParseError, SorteryError
from .file_mover import FileMover
from .logger import configure_logging, log_event, next_log_path
from .planner import Planner
from .reporter import render_plan_text, save_plan


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    log_path = args.log_file or next_log_path("sort")
    logger = configure_logging(log_path, level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return _run(args)
    except SorteryError as exc:
        log_event(
            logger,
            level=logging.ERROR,
            action="cli.error",
            message=str(exc),
            extra={"error": type(exc).__name__},
        )
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortery",
        description="Sort files into target/YYYY/MM/ folders, renamed after one of their dates.",
    )
    parser.add_argument("source", type=Path, help="Directory to take files from")
    parser.add_argument("target", type=Path, help="Directory to sort the files into")
    parser.add_argument("--config", type=Path, help="JSON configuration file")
    parser.add_argument("--date-format", help="strftime pattern for the new file names")
    parser.add_argument(
        "--date-type",
        choices=["a", "c", "m"],
        help=(
            "Sort by access (a), creation (c) or modification (m) time. "
            "Creation time needs st_birthtime (macOS, BSD, Windows) "
            "and is unavailable on most Linux systems"
        ),
    )
    parser.add_argument(
        "--preserve-name",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Append the original file name after the date",
    )
    parser.add_argument("--exclude-type", nargs="*", metavar="EXT", help="Extensions to leave alone")
    parser.add_argument(
        "--only-type",
        nargs="*",
        metavar="EXT",
        help="Only sort these extensions (overrides --exclude-type)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Show the plan without moving files")
    parser.add_argument(
        "--avoid-existing",
        action="store_true",
        help="Also number destinations that already exist on disk",
    )
    parser.add_argument("--plan-output", type=Path, help="Write the plan as JSON to this file")
    parser.add_argument("--progress", action="store_true", help="Print progress after each file")
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write JSON log lines to this file (default: a new file under ~/.sortery/logs)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every planned and moved file")
    return parser


def _settings(args: argparse.Namespace) -> ConfigData:
    base = load_config(args.config) if args.config else ConfigData()
    return base.merged(
        date_format=args.date_format,
        date_type=args.date_type,
        preserve_name=args.preserve_name,
        exclude_type=args.exclude_type,
        only_type=args.only_type,
    )


def _print_progress(done: int, total: int, percent: int) -> None:
    print(f"[{done}/{total}] {percent}%", file=sys.stderr)


def _run(args: argparse.Namespace) -> int:
    settings = _settings(args)
    try:
        config = settings.to_sort_config(args.source, args.target, avoid_existing=args.avoid_existing)
    except ValueError as exc:
        raise ConfigParseError(str(exc)) from exc

    plan = Planner().build_plan(config)
    if args.plan_output:
        save_plan(plan, config, args.plan_output)

    progress = _print_progress if args.progress else None
    FileMover().execute(plan, dry_run=args.dry_run, progress=progress)

    print(render_plan_text(plan, dry_run=args.dry_run))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
