"""Markdown body renderer for GitHub-compatible issue bodies."""

from __future__ import annotations

from issuetree.models.hierarchy import Epic, Feature, Story
from issuetree.rendering.components import (
    ACCEPTANCE_CRITERIA_HEADER,
    SUB_ISSUES_HEADER,
    checklist,
    issue_ref,
    parent_reference,
)


class MarkdownRenderer:
    """Renders issue bodies as GitHub-flavoured Markdown."""

    def render_epic(self, epic: Epic) -> str:
        """Render the body for an epic issue (no parent)."""
        return epic.body

    def render_feature(self, feature: Feature, parent_number: int) -> str:
        """Render the body for a feature issue.

        Args:
            feature: The feature model.
            parent_number: Issue number of the parent epic.

        Returns:
            Rendered body string.
        """
        return self.with_parent(feature.body, parent_number)

    def render_story(self, story: Story, parent_number: int) -> str:
        """Render the body for a story issue.

        The acceptance criteria, if any, are appended as an unchecked task
        list under an ``## Acceptance Criteria`` heading.

        Args:
            story: The story model.
            parent_number: Issue number of the parent feature.

        Returns:
            Rendered body string.
        """
        return self.with_parent(self.story_body(story), parent_number)

    def story_body(self, story: Story) -> str:
        """Story body plus its acceptance-criteria section, without the parent line."""
        if not story.acceptance_criteria:
            return story.body
        return f"{story.body}\n\n{ACCEPTANCE_CRITERIA_HEADER}\n\n{checklist(story.acceptance_criteria)}"

    def with_parent(self, body: str, parent_number: int) -> str:
        return f"{parent_reference(parent_number)}\n\n{body}"

    def append_sub_issue(self, body: str, child_number: int) -> str:
        """Append a ``- [ ] #child`` line under the ``## Sub-Issues`` section.

        The section header is added at the end of *body* when missing. Existing
        entries are not inspected, so the same child may be listed twice.

        Args:
            body: Current parent issue body (may be empty).
            child_number: Issue number of the child to list.

        Returns:
            The updated body.
        """
        updated = body.rstrip()
        if SUB_ISSUES_HEADER not in updated:
            updated = f"{updated}\n\n{SUB_ISSUES_HEADER}\n" if updated else f"{SUB_ISSUES_HEADER}\n"
        else:
            updated = f"{updated}\n"
        return f"{updated}{checklist([issue_ref(child_number)])}\n"
