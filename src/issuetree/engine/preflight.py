"""Environment checks performed before any mutating call."""

from __future__ import annotations

import logging

from issuetree.config import ImportConfig
from issuetree.console import LogLevel
from issuetree.exceptions import AuthenticationError, GhNotFoundError, ProjectNotFoundError, ProviderError
from issuetree.models.issue import ProjectInfo
from issuetree.providers.base import Tracker

logger = logging.getLogger(__name__)


async def run_preflight(tracker: Tracker, config: ImportConfig) -> ProjectInfo | None:
    """Verify the CLI, the session and (live mode only) the target project.

    Returns:
        The resolved project, or *None* in dry-run mode.

    Raises:
        GhNotFoundError: If the CLI is missing.
        AuthenticationError: If the CLI is not authenticated.
        ProjectNotFoundError: If the project is inaccessible.
    """
    if not await tracker.version_check():
        raise GhNotFoundError("GitHub CLI (gh) is not installed or not on PATH. See https://cli.github.com/")
    logger.info("GitHub CLI found")

    if not await tracker.auth_check():
        raise AuthenticationError("GitHub authentication failed. Run `gh auth login` and retry.")
    logger.info("GitHub CLI authenticated")

    if config.dry_run:
        logger.log(LogLevel.DRY_RUN, "Skipping project check for project %d", config.project_number)
        return None

    try:
        project = await tracker.project_exists(config.project_number, config.owner)
    except ProviderError as exc:
        raise ProjectNotFoundError(
            f"Project {config.project_number} for owner {config.owner!r} is not accessible: {exc}"
        ) from exc
    logger.log(LogLevel.SUCCESS, "Found project %d: %s", project.number, project.title or "(untitled)")
    return project
