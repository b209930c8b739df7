"""GitHub tracker implementation backed by the ``gh`` CLI."""

from __future__ import annotations

import logging

from issuetree.exceptions import ProviderError, UnknownLabelError
from issuetree.models.issue import IssueInfo, IssueRef, ProjectInfo
from issuetree.providers.base import Tracker
from issuetree.providers.github.client import GhClient
from issuetree.providers.github.mapper import (
    is_unknown_label_error,
    issue_info_from_json,
    labels_from_json,
    parse_issue_url,
    project_info_from_json,
)

logger = logging.getLogger(__name__)

LABEL_LIST_LIMIT = 1000


class GitHubTracker(Tracker):
    """Concrete :class:`Tracker` that shells out to ``gh``.

    Args:
        client: The gh CLI wrapper. A default :class:`GhClient` is used if omitted.
    """

    def __init__(self, client: GhClient | None = None) -> None:
        self._client = client or GhClient()

    # ------------------------------------------------------------------
    # Environment checks
    # ------------------------------------------------------------------

    async def version_check(self) -> bool:
        try:
            result = await self._client.run(["--version"], check=False)
        except ProviderError as exc:
            logger.debug("gh is not runnable: %s", exc)
            return False
        return result.returncode == 0

    async def auth_check(self) -> bool:
        try:
            result = await self._client.run(["auth", "status"], check=False)
        except ProviderError as exc:
            logger.debug("gh auth status failed to run: %s", exc)
            return False
        return result.returncode == 0

    async def project_exists(self, project_number: int, owner: str) -> ProjectInfo:
        data = await self._client.json(
            ["project", "view", str(project_number), "--owner", owner, "--format", "json"]
        )
        return project_info_from_json(data, project_number)

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------

    async def list_labels(self, owner: str, repo: str) -> dict[str, str]:
        data = await self._client.json(
            ["label", "list", "-R", f"{owner}/{repo}", "--limit", str(LABEL_LIST_LIMIT), "--json", "name,color"]
        )
        return labels_from_json(data)

    async def create_label(self, owner: str, repo: str, name: str, color: str, description: str) -> None:
        await self._client.run(
            ["label", "create", name, "-R", f"{owner}/{repo}", "--color", color, "--description", description]
        )

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    async def create_issue(self, owner: str, repo: str, title: str, body: str, labels: list[str]) -> IssueRef:
        args = ["issue", "create", "-R", f"{owner}/{repo}", "--title", title, "--body", body]
        for label in labels:
            args.extend(["--label", label])
        result = await self._client.run(args, check=False)
        if result.returncode != 0:
            if labels and is_unknown_label_error(result.stderr):
                raise UnknownLabelError(f"unknown label on issue {title!r}: {result.stderr.strip()}", labels)
            raise ProviderError(f"failed to create issue {title!r}: {result.stderr.strip()}")
        return parse_issue_url(result.stdout)

    async def get_issue(self, owner: str, repo: str, number: int) -> IssueInfo:
        data = await self._client.api(f"repos/{owner}/{repo}/issues/{number}")
        return issue_info_from_json(data)

    async def get_issue_body(self, owner: str, repo: str, number: int) -> str:
        data = await self._client.json(["issue", "view", str(number), "-R", f"{owner}/{repo}", "--json", "body"])
        if not isinstance(data, dict):
            raise ProviderError(f"issue #{number} returned no data")
        return data.get("body") or ""

    async def edit_issue_body(self, owner: str, repo: str, number: int, body: str) -> None:
        await self._client.run(["issue", "edit", str(number), "-R", f"{owner}/{repo}", "--body", body])

    # ------------------------------------------------------------------
    # Project board and relations
    # ------------------------------------------------------------------

    async def add_to_project(self, project_number: int, owner: str, issue_url: str) -> None:
        await self._client.run(["project", "item-add", str(project_number), "--owner", owner, "--url", issue_url])

    async def create_sub_issue_link(self, owner: str, repo: str, parent_number: int, child_id: int) -> None:
        await self._client.api(
            f"repos/{owner}/{repo}/issues/{parent_number}/sub_issues",
            method="POST",
            fields={"sub_issue_id": child_id},
        )
