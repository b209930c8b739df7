"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("issuetree")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="issuetree",
        description="Create GitHub issues for an Epic / Feature / Story hierarchy and link them together.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--config", default=None, help="Path to a JSON config file")
    parser.add_argument("--input", "-i", default=None, help="Path to the hierarchy JSON (default: hierarchy.json)")
    parser.add_argument("--repo", "-R", default=None, help="Target repository as OWNER/REPO")
    parser.add_argument("--project", "-p", type=int, default=None, help="GitHub Project number (default: 1)")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--dry-run", action="store_true", help="Preview mode (default)")
    mode.add_argument("--apply", action="store_true", help="Apply mode: create labels and issues")

    parser.add_argument(
        "--no-auto-labels",
        action="store_true",
        help="Do not create labels that are missing from the repository",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
