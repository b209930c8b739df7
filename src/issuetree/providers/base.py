"""Abstract base class for the issue tracker the import drives.

The :class:`~issuetree.engine.engine.ImportEngine` only talks to this
interface, so the live GitHub implementation and the dry-run simulator are
interchangeable.

All methods are ``async``; implementations wrapping the synchronous ``gh``
CLI use ``asyncio.create_subprocess_exec``. Apart from the two boolean
checks, every method signals failure by raising
:class:`~issuetree.exceptions.ProviderError`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from issuetree.models.issue import IssueInfo, IssueRef, ProjectInfo


class Tracker(ABC):
    """Abstract issue tracker."""

    # ------------------------------------------------------------------
    # Environment checks
    # ------------------------------------------------------------------

    @abstractmethod
    async def version_check(self) -> bool:
        """Return *True* if the tracker CLI is reachable and runs successfully."""

    @abstractmethod
    async def auth_check(self) -> bool:
        """Return *True* if the tracker CLI reports an authenticated session."""

    @abstractmethod
    async def project_exists(self, project_number: int, owner: str) -> ProjectInfo:
        """Fetch the project board.

        Raises:
            ProviderError: If the project cannot be accessed.
        """

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------

    @abstractmethod
    async def list_labels(self, owner: str, repo: str) -> dict[str, str]:
        """Return existing labels as ``{name: color}``."""

    @abstractmethod
    async def create_label(self, owner: str, repo: str, name: str, color: str, description: str) -> None:
        """Create a repository label."""

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    @abstractmethod
    async def create_issue(self, owner: str, repo: str, title: str, body: str, labels: list[str]) -> IssueRef:
        """Create an issue.

        Raises:
            UnknownLabelError: If one of *labels* does not exist.
            ProviderError: On any other failure.
        """

    @abstractmethod
    async def get_issue(self, owner: str, repo: str, number: int) -> IssueInfo:
        """Resolve an issue number to its durable id."""

    @abstractmethod
    async def get_issue_body(self, owner: str, repo: str, number: int) -> str:
        """Return the current body of an issue."""

    @abstractmethod
    async def edit_issue_body(self, owner: str, repo: str, number: int, body: str) -> None:
        """Replace the body of an issue."""

    # ------------------------------------------------------------------
    # Project board and relations
    # ------------------------------------------------------------------

    @abstractmethod
    async def add_to_project(self, project_number: int, owner: str, issue_url: str) -> None:
        """Add an issue to a project board."""

    @abstractmethod
    async def create_sub_issue_link(self, owner: str, repo: str, parent_number: int, child_id: int) -> None:
        """Create a native parent → child sub-issue relationship.

        Args:
            owner: Repository owner.
            repo: Repository name.
            parent_number: Parent issue number.
            child_id: Durable id of the child (see :meth:`get_issue`).
        """
