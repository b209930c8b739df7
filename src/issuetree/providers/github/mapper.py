"""Mapping functions between ``gh`` CLI output and domain models."""

from __future__ import annotations

import re
from typing import Any

from issuetree.exceptions import ProviderError
from issuetree.models.issue import IssueInfo, IssueRef, ProjectInfo

# `gh issue create` prints the new issue URL on stdout
_ISSUE_URL_RE = re.compile(r"https://[^\s]+/issues/(\d+)")


def parse_issue_url(output: str) -> IssueRef:
    """Extract the created issue URL and number from ``gh issue create`` output.

    Raises:
        ProviderError: If no issue URL is present.
    """
    m = _ISSUE_URL_RE.search(output)
    if not m:
        raise ProviderError(f"Could not parse issue URL from output: {output.strip()!r}")
    return IssueRef(number=int(m.group(1)), url=m.group(0))


def is_unknown_label_error(stderr: str) -> bool:
    """Check whether ``gh issue create`` failed because a label does not exist.

    gh exposes no structured error code for this case, so the decision rests
    on the error text.
    """
    msg = stderr.lower()
    return "could not add label" in msg or ("label" in msg and "not found" in msg)


def normalize_color(color: str) -> str:
    """Normalize a label color to uppercase hex without a leading ``#``."""
    return color.strip().lstrip("#").upper()


def labels_from_json(data: Any) -> dict[str, str]:
    """Map ``gh label list --json name,color`` output to ``{name: COLOR}``."""
    if not data:
        return {}
    return {entry["name"]: normalize_color(entry.get("color", "")) for entry in data if entry.get("name")}


def issue_info_from_json(data: Any) -> IssueInfo:
    if not isinstance(data, dict) or "id" not in data or "number" not in data:
        raise ProviderError("Issue response is missing id/number")
    return IssueInfo(id=int(data["id"]), number=int(data["number"]))


def project_info_from_json(data: Any, project_number: int) -> ProjectInfo:
    if not isinstance(data, dict):
        raise ProviderError(f"Project {project_number} returned no data")
    return ProjectInfo(
        number=int(data.get("number", project_number)),
        title=str(data.get("title", "")),
        url=str(data.get("url", "")),
    )
