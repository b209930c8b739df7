"""Per-run import state and the result handed to the reporter."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class LinkMethod(StrEnum):
    """How a child issue ended up attached to its parent."""

    SUB_ISSUE = "sub-issue"
    TASKLIST = "tasklist"
    FAILED = "failed"


class ImportState(BaseModel):
    """Mutable state threaded through a single run.

    Attributes:
        issue_map: Issue title → created issue number (last writer wins on
            duplicate titles).
        used_colors: Uppercase hex label colors already taken in the repository.
        failed: Titles whose issue creation failed.
        labels_created: Labels created during this run.
        links: Link outcome per child issue number.
    """

    issue_map: dict[str, int] = Field(default_factory=dict)
    used_colors: set[str] = Field(default_factory=set)
    failed: list[str] = Field(default_factory=list)
    labels_created: list[str] = Field(default_factory=list)
    links: dict[int, LinkMethod] = Field(default_factory=dict)

    def record(self, title: str, number: int) -> None:
        self.issue_map[title] = number

    def to_result(self, *, dry_run: bool) -> ImportResult:
        return ImportResult(
            issue_map=dict(self.issue_map),
            failed=list(self.failed),
            labels_created=list(self.labels_created),
            links=dict(self.links),
            dry_run=dry_run,
        )


class ImportResult(BaseModel):
    """Value returned by :meth:`ImportEngine.run`."""

    issue_map: dict[str, int] = Field(default_factory=dict)
    failed: list[str] = Field(default_factory=list)
    labels_created: list[str] = Field(default_factory=list)
    links: dict[int, LinkMethod] = Field(default_factory=dict)
    dry_run: bool = False

    model_config = {"frozen": True}

    def link_counts(self) -> dict[LinkMethod, int]:
        counts = dict.fromkeys(LinkMethod, 0)
        for method in self.links.values():
            counts[method] += 1
        return counts
