"""Reconcile the labels used by a hierarchy with the repository's labels."""

from __future__ import annotations

import asyncio
import logging

from issuetree.config import ImportConfig
from issuetree.console import LogLevel
from issuetree.exceptions import ProviderError
from issuetree.hierarchy.loader import collect_labels
from issuetree.labels.colors import ColorAllocator
from issuetree.models.hierarchy import Epic
from issuetree.models.state import ImportState
from issuetree.providers.base import Tracker

logger = logging.getLogger(__name__)

LABEL_DESCRIPTION = "Auto-created by import script"


class LabelReconciler:
    """Creates the labels a hierarchy needs but the repository lacks.

    Args:
        tracker: Tracker used for listing and creating labels.
        config: Run configuration.
        allocator: Color allocator; a default one is used if omitted.
    """

    def __init__(self, tracker: Tracker, config: ImportConfig, allocator: ColorAllocator | None = None) -> None:
        self._tracker = tracker
        self._config = config
        self._allocator = allocator or ColorAllocator()

    async def reconcile(self, epic: Epic, state: ImportState) -> list[str]:
        """Ensure every label referenced in *epic* exists.

        Returns:
            Names of the labels created, in creation order.
        """
        cfg = self._config
        required = sorted(collect_labels(epic))
        if not required:
            logger.info("No labels referenced by the hierarchy")
            return []

        if not cfg.auto_create_labels:
            logger.info(
                "Label auto-creation disabled; assuming %d label(s) exist: %s", len(required), ", ".join(required)
            )
            return []

        if cfg.dry_run:
            for name in required:
                logger.log(LogLevel.DRY_RUN, "Would check label '%s' and create it if missing", name)
            return []

        try:
            existing = await self._tracker.list_labels(cfg.owner, cfg.repo)
        except ProviderError as exc:
            logger.error("Could not list labels for %s, skipping label creation: %s", cfg.target, exc)
            return []

        state.used_colors.update(color.upper() for color in existing.values() if color)
        missing = [name for name in required if name not in existing]
        if not missing:
            logger.info("All %d label(s) already exist", len(required))
            return []

        logger.info("Creating %d missing label(s)", len(missing))
        created: list[str] = []
        for name in missing:
            color = self._allocator.allocate(state.used_colors)
            try:
                await self._tracker.create_label(cfg.owner, cfg.repo, name, color, LABEL_DESCRIPTION)
            except ProviderError as exc:
                logger.error("Failed to create label '%s': %s", name, exc)
                continue
            logger.log(LogLevel.SUCCESS, "Created label '%s' (#%s)", name, color)
            created.append(name)
            state.labels_created.append(name)
            await asyncio.sleep(cfg.throttle.label_create)
        return created
