"""Domain models for issuetree.

Re-exports all public model classes for convenient access::

    from issuetree.models import Epic, Feature, Story, ImportState
"""

from issuetree.models.hierarchy import Epic, Feature, HierarchyDocument, Story
from issuetree.models.issue import IssueInfo, IssueRef, ProjectInfo
from issuetree.models.state import ImportResult, ImportState, LinkMethod

__all__ = [
    "Epic",
    "Feature",
    "HierarchyDocument",
    "ImportResult",
    "ImportState",
    "IssueInfo",
    "IssueRef",
    "LinkMethod",
    "ProjectInfo",
    "Story",
]
