"""Command-line interface for issuetree."""

from __future__ import annotations

from issuetree.cli.app import config_from_args, main, run_import
from issuetree.cli.parser import build_parser
from issuetree.cli.summary import build_summary_table, format_totals, print_summary

__all__ = [
    "build_parser",
    "build_summary_table",
    "config_from_args",
    "format_totals",
    "main",
    "print_summary",
    "run_import",
]
