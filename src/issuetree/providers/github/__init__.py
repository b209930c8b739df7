"""GitHub tracker backed by the ``gh`` CLI."""

from issuetree.providers.github.client import CompletedProcess, GhClient
from issuetree.providers.github.tracker import GitHubTracker

__all__ = ["CompletedProcess", "GhClient", "GitHubTracker"]
