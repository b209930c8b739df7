"""Tracker factory."""

from __future__ import annotations

from issuetree.config import ImportConfig
from issuetree.providers.base import Tracker
from issuetree.providers.dry_run import DryRunTracker
from issuetree.providers.github.client import GhClient
from issuetree.providers.github.tracker import GitHubTracker


def create_tracker(config: ImportConfig, client: GhClient | None = None) -> Tracker:
    """Return the tracker for *config*.

    In dry-run mode the live tracker is still wrapped so the environment
    checks run against the real ``gh`` binary.
    """
    live = GitHubTracker(client)
    if config.dry_run:
        return DryRunTracker(live)
    return live
