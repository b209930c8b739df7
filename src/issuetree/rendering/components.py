"""Reusable rendering components for issue body generation."""

from __future__ import annotations

ACCEPTANCE_CRITERIA_HEADER = "## Acceptance Criteria"
SUB_ISSUES_HEADER = "## Sub-Issues"


def checklist(items: list[str]) -> str:
    """Render unchecked task-list lines, one per item, in order.

    Args:
        items: Checklist entries.

    Returns:
        Markdown task list, or an empty string if *items* is empty.
    """
    return "\n".join(f"- [ ] {item}" for item in items)


def parent_reference(parent_number: int) -> str:
    """Render the parent back-reference line placed at the top of child bodies."""
    return f"Parent Issue: #{parent_number}"


def issue_ref(number: int) -> str:
    return f"#{number}"
