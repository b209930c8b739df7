"""Parent → child linking with a tasklist fallback."""

from __future__ import annotations

import asyncio
import logging

from issuetree.config import ImportConfig
from issuetree.console import LogLevel
from issuetree.exceptions import ProviderError
from issuetree.models.state import LinkMethod
from issuetree.providers.base import Tracker
from issuetree.rendering.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)


class ParentLinker:
    """Attaches child issues to their parent.

    The native sub-issue relation is tried first. When it is unavailable
    (permissions, API version, ...) the child is listed in a ``## Sub-Issues``
    checklist in the parent's body instead.
    """

    def __init__(self, tracker: Tracker, config: ImportConfig, renderer: MarkdownRenderer | None = None) -> None:
        self._tracker = tracker
        self._config = config
        self._renderer = renderer or MarkdownRenderer()

    async def link(self, parent_number: int, child_number: int) -> LinkMethod:
        """Link *child_number* under *parent_number*; never raises :class:`ProviderError`."""
        try:
            await self._link_sub_issue(parent_number, child_number)
        except ProviderError as exc:
            logger.warning(
                "Sub-issue link #%d -> #%d failed, falling back to tasklist: %s", parent_number, child_number, exc
            )
        else:
            return LinkMethod.SUB_ISSUE

        try:
            await self._link_tasklist(parent_number, child_number)
        except ProviderError as exc:
            logger.error("Could not link #%d to parent #%d: %s", child_number, parent_number, exc)
            return LinkMethod.FAILED
        return LinkMethod.TASKLIST

    async def _link_sub_issue(self, parent_number: int, child_number: int) -> None:
        cfg = self._config
        child = await self._tracker.get_issue(cfg.owner, cfg.repo, child_number)
        await self._tracker.create_sub_issue_link(cfg.owner, cfg.repo, parent_number, child.id)
        logger.log(LogLevel.SUCCESS, "Linked #%d as sub-issue of #%d", child_number, parent_number)
        await asyncio.sleep(cfg.throttle.sub_issue_link)

    async def _link_tasklist(self, parent_number: int, child_number: int) -> None:
        cfg = self._config
        body = await self._tracker.get_issue_body(cfg.owner, cfg.repo, parent_number)
        updated = self._renderer.append_sub_issue(body, child_number)
        await self._tracker.edit_issue_body(cfg.owner, cfg.repo, parent_number, updated)
        logger.log(LogLevel.SUCCESS, "Listed #%d in the tasklist of #%d", child_number, parent_number)
        await asyncio.sleep(cfg.throttle.tasklist_edit)
