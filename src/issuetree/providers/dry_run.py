"""In-memory dry-run tracker."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from issuetree.console import LogLevel
from issuetree.exceptions import ProviderError
from issuetree.models.issue import IssueInfo, IssueRef, ProjectInfo
from issuetree.providers.base import Tracker

logger = logging.getLogger(__name__)

FIRST_SIMULATED_NUMBER = 1001


@dataclass(frozen=True)
class DryRunOperation:
    """Deterministic dry-run operation log entry."""

    sequence: int
    name: str
    payload: dict[str, str]


class DryRunTracker(Tracker):
    """Tracker that simulates every mutation without contacting GitHub.

    Simulated issue numbers start at 1001 and increase by one per
    :meth:`create_issue`, so they follow traversal order. Each simulated
    mutation is appended to :attr:`operations`.

    Args:
        live: Optional real tracker used only for the read-only version and
            auth checks.
    """

    def __init__(self, live: Tracker | None = None, *, first_number: int = FIRST_SIMULATED_NUMBER) -> None:
        self._live = live
        self._next_number = first_number
        self._bodies: dict[int, str] = {}
        self.operations: list[DryRunOperation] = []

    def _record(self, name: str, payload: dict[str, str]) -> None:
        self.operations.append(DryRunOperation(sequence=len(self.operations) + 1, name=name, payload=payload))

    async def version_check(self) -> bool:
        if self._live is None:
            return True
        return await self._live.version_check()

    async def auth_check(self) -> bool:
        if self._live is None:
            return True
        return await self._live.auth_check()

    async def project_exists(self, project_number: int, owner: str) -> ProjectInfo:
        return ProjectInfo(number=project_number, title="dry-run")

    async def list_labels(self, owner: str, repo: str) -> dict[str, str]:
        return {}

    async def create_label(self, owner: str, repo: str, name: str, color: str, description: str) -> None:
        self._record("create_label", {"name": name, "color": color})
        logger.log(LogLevel.DRY_RUN, "Would create label '%s' (#%s)", name, color)

    async def create_issue(self, owner: str, repo: str, title: str, body: str, labels: list[str]) -> IssueRef:
        number = self._next_number
        self._next_number += 1
        self._bodies[number] = body
        self._record("create_issue", {"title": title, "number": str(number), "labels": ",".join(labels)})
        logger.log(LogLevel.DRY_RUN, "Would create issue '%s' -> simulated #%d", title, number)
        return IssueRef(number=number, url=f"https://github.com/{owner}/{repo}/issues/{number}")

    async def get_issue(self, owner: str, repo: str, number: int) -> IssueInfo:
        if number not in self._bodies:
            raise ProviderError(f"Issue not found: #{number}")
        return IssueInfo(id=number, number=number)

    async def get_issue_body(self, owner: str, repo: str, number: int) -> str:
        if number not in self._bodies:
            raise ProviderError(f"Issue not found: #{number}")
        return self._bodies[number]

    async def edit_issue_body(self, owner: str, repo: str, number: int, body: str) -> None:
        self._bodies[number] = body
        self._record("edit_issue_body", {"number": str(number)})
        logger.log(LogLevel.DRY_RUN, "Would update body of #%d", number)

    async def add_to_project(self, project_number: int, owner: str, issue_url: str) -> None:
        self._record("add_to_project", {"project": str(project_number), "url": issue_url})
        logger.log(LogLevel.DRY_RUN, "Would add %s to project %d", issue_url, project_number)

    async def create_sub_issue_link(self, owner: str, repo: str, parent_number: int, child_id: int) -> None:
        self._record("create_sub_issue_link", {"parent": str(parent_number), "child_id": str(child_id)})
        logger.log(LogLevel.DRY_RUN, "Would link #%d as sub-issue of #%d", child_id, parent_number)
