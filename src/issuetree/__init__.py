"""Public API surface for issuetree."""

__version__ = "0.3.0"

from issuetree.config import ImportConfig, ThrottleConfig, load_config
from issuetree.engine import ImportEngine, ParentLinker
from issuetree.exceptions import (
    AuthenticationError,
    ConfigError,
    GhNotFoundError,
    HierarchyLoadError,
    IssueTreeError,
    PreflightError,
    ProjectNotFoundError,
    ProviderError,
    UnknownLabelError,
)
from issuetree.hierarchy import collect_labels, load_hierarchy
from issuetree.labels import ColorAllocator, LabelReconciler
from issuetree.models import Epic, Feature, ImportResult, ImportState, LinkMethod, Story
from issuetree.providers import DryRunTracker, Tracker, create_tracker

__all__ = [
    "AuthenticationError",
    "ColorAllocator",
    "ConfigError",
    "DryRunTracker",
    "Epic",
    "Feature",
    "GhNotFoundError",
    "HierarchyLoadError",
    "ImportConfig",
    "ImportEngine",
    "ImportResult",
    "ImportState",
    "IssueTreeError",
    "LabelReconciler",
    "LinkMethod",
    "ParentLinker",
    "PreflightError",
    "ProjectNotFoundError",
    "ProviderError",
    "Story",
    "ThrottleConfig",
    "Tracker",
    "UnknownLabelError",
    "collect_labels",
    "create_tracker",
    "load_config",
    "load_hierarchy",
]
