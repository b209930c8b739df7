"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from rich.console import Console

from issuetree.cli.parser import build_parser
from issuetree.cli.summary import print_summary
from issuetree.config import ImportConfig, build_config, load_config, split_target
from issuetree.console import configure_logging
from issuetree.engine.engine import ImportEngine
from issuetree.exceptions import ConfigError, IssueTreeError
from issuetree.models.state import ImportResult
from issuetree.providers.base import Tracker
from issuetree.providers.factory import create_tracker

EXIT_OK = 0
EXIT_FATAL = 1


def config_from_args(args: argparse.Namespace) -> ImportConfig:
    """Build the run configuration; explicit flags win over config file values."""
    overrides: dict[str, Any] = {}
    if args.repo is not None:
        overrides["owner"], overrides["repo"] = split_target(args.repo)
    if args.input is not None:
        overrides["input_path"] = Path(args.input)
    if args.project is not None:
        overrides["project_number"] = args.project
    if args.dry_run:
        overrides["dry_run"] = True
    elif args.apply:
        overrides["dry_run"] = False
    if args.no_auto_labels:
        overrides["auto_create_labels"] = False
    if args.verbose:
        overrides["verbose"] = True

    if args.config is not None:
        return load_config(args.config, overrides)
    return build_config(overrides)


async def run_import(
    config: ImportConfig,
    tracker: Tracker | None = None,
    console: Console | None = None,
) -> ImportResult:
    engine = ImportEngine(tracker or create_tracker(config), config)
    result = await engine.run()
    print_summary(result, config, console)
    return result


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FATAL

    configure_logging(verbose=config.verbose)

    try:
        asyncio.run(run_import(config))
    except IssueTreeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FATAL
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FATAL
    return EXIT_OK


__all__ = ["config_from_args", "main", "run_import"]
