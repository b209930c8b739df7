"""Lightweight references to objects on the tracker side."""

from __future__ import annotations

from pydantic import BaseModel


class IssueRef(BaseModel):
    """A freshly created issue."""

    number: int
    url: str


class IssueInfo(BaseModel):
    """Identifiers of an existing issue.

    ``id`` is the durable REST id that the sub-issues endpoint expects,
    not the repository-scoped ``number``.
    """

    id: int
    number: int


class ProjectInfo(BaseModel):
    """Minimal view of a GitHub Projects (v2) board."""

    number: int
    title: str = ""
    url: str = ""
