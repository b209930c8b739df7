"""Import engine orchestrating the hierarchy-to-issues pipeline."""

from __future__ import annotations

import asyncio
import logging

from issuetree.config import ImportConfig
from issuetree.console import LogLevel
from issuetree.engine.linker import ParentLinker
from issuetree.engine.preflight import run_preflight
from issuetree.exceptions import ProviderError, UnknownLabelError
from issuetree.hierarchy.loader import count_nodes, load_hierarchy
from issuetree.labels.colors import ColorAllocator
from issuetree.labels.reconciler import LabelReconciler
from issuetree.models.hierarchy import Epic, Feature, Story
from issuetree.models.issue import IssueRef
from issuetree.models.state import ImportResult, ImportState
from issuetree.providers.base import Tracker
from issuetree.rendering.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)


class ImportEngine:
    """Runs one import from start to finish.

    The run has four phases:
    1. Preflight: gh installed, authenticated, project reachable (live only)
    2. Load: parse the hierarchy file
    3. Labels: create the labels the hierarchy needs
    4. Hierarchy: depth-first create → record → add to project → link

    A failed node is skipped together with its descendants; its siblings
    still run.

    Args:
        tracker: Tracker to drive (live or dry-run).
        config: Run configuration.
        renderer: Issue body renderer.
        allocator: Label color allocator.
    """

    def __init__(
        self,
        tracker: Tracker,
        config: ImportConfig,
        renderer: MarkdownRenderer | None = None,
        allocator: ColorAllocator | None = None,
    ) -> None:
        self._tracker = tracker
        self._config = config
        self._renderer = renderer or MarkdownRenderer()
        self._labels = LabelReconciler(tracker, config, allocator)
        self._linker = ParentLinker(tracker, config, self._renderer)

    async def run(self) -> ImportResult:
        """Run the full import.

        Returns:
            ImportResult with the title → issue number map and run tallies.

        Raises:
            PreflightError: If an environment check fails.
            HierarchyLoadError: If the input file cannot be loaded.
        """
        cfg = self._config
        if cfg.dry_run:
            logger.log(LogLevel.DRY_RUN, "No changes will be made to GitHub")

        await run_preflight(self._tracker, cfg)

        epic = load_hierarchy(cfg.input_path)
        features, stories = count_nodes(epic)
        logger.info("Loaded epic '%s' with %d feature(s) and %d story(ies)", epic.title, features, stories)

        state = ImportState()
        await self._labels.reconcile(epic, state)
        await self.process_epic(epic, state)
        return state.to_result(dry_run=cfg.dry_run)

    # ------------------------------------------------------------------
    # Hierarchy walk
    # ------------------------------------------------------------------

    async def process_epic(self, epic: Epic, state: ImportState) -> None:
        logger.info("Processing epic: %s", epic.title)
        ref = await self._create(epic.title, self._renderer.render_epic(epic), epic.labels, state)
        if ref is None:
            logger.error("Epic creation failed; skipping its %d feature(s)", len(epic.features))
            return
        for feature in epic.features:
            await self.process_feature(feature, ref.number, state)

    async def process_feature(self, feature: Feature, parent_number: int, state: ImportState) -> None:
        logger.info("Processing feature: %s", feature.title)
        body = self._renderer.render_feature(feature, parent_number)
        ref = await self._create(feature.title, body, feature.labels, state)
        if ref is None:
            if feature.stories:
                logger.warning("Skipping %d story(ies) of feature '%s'", len(feature.stories), feature.title)
            return
        state.links[ref.number] = await self._linker.link(parent_number, ref.number)
        for story in feature.stories:
            await self.process_story(story, ref.number, state)

    async def process_story(self, story: Story, parent_number: int, state: ImportState) -> None:
        body = self._renderer.render_story(story, parent_number)
        ref = await self._create(story.title, body, story.labels, state)
        if ref is None:
            return
        state.links[ref.number] = await self._linker.link(parent_number, ref.number)

    # ------------------------------------------------------------------
    # Single-issue helpers
    # ------------------------------------------------------------------

    async def _create(self, title: str, body: str, labels: list[str], state: ImportState) -> IssueRef | None:
        """Create, record and attach one issue; return *None* if creation failed."""
        cfg = self._config
        try:
            ref = await self._create_issue(title, body, labels)
        except ProviderError as exc:
            logger.error("Failed to create issue '%s': %s", title, exc)
            state.failed.append(title)
            return None

        state.record(title, ref.number)
        logger.log(LogLevel.SUCCESS, "Created #%d: %s", ref.number, title)
        await self._add_to_project(ref)
        await asyncio.sleep(cfg.throttle.issue_create)
        return ref

    async def _create_issue(self, title: str, body: str, labels: list[str]) -> IssueRef:
        cfg = self._config
        try:
            return await self._tracker.create_issue(cfg.owner, cfg.repo, title, body, labels)
        except UnknownLabelError:
            logger.warning("Unknown label(s) %s on '%s'; retrying without labels", ", ".join(labels), title)
            return await self._tracker.create_issue(cfg.owner, cfg.repo, title, body, [])

    async def _add_to_project(self, ref: IssueRef) -> None:
        cfg = self._config
        try:
            await self._tracker.add_to_project(cfg.project_number, cfg.owner, ref.url)
        except ProviderError as exc:
            logger.warning("Could not add #%d to project %d: %s", ref.number, cfg.project_number, exc)
