"""Load the Epic hierarchy from a JSON file on disk."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from issuetree.exceptions import HierarchyLoadError
from issuetree.models.hierarchy import Epic, HierarchyDocument


def load_hierarchy(path: Path) -> Epic:
    """Load and parse the hierarchy JSON document into a validated :class:`Epic`.

    Args:
        path: Path to a JSON file with a top-level ``epic`` object.

    Returns:
        The validated root epic.

    Raises:
        HierarchyLoadError: If the file is missing, unreadable, contains invalid
            JSON, or does not match the expected shape.
    """
    if not path.exists():
        raise HierarchyLoadError(f"missing input file: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise HierarchyLoadError(f"invalid JSON input: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise HierarchyLoadError(f"input file is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise HierarchyLoadError(f"failed to read input file: {exc}") from exc

    try:
        return HierarchyDocument.model_validate(raw).epic
    except ValidationError as exc:
        raise HierarchyLoadError(f"hierarchy validation failed: {exc}") from exc


def collect_labels(epic: Epic) -> set[str]:
    """Return every label referenced anywhere in the tree (case-sensitive)."""
    labels = set(epic.labels)
    for feature in epic.features:
        labels.update(feature.labels)
        for story in feature.stories:
            labels.update(story.labels)
    return labels


def count_nodes(epic: Epic) -> tuple[int, int]:
    """Return ``(features, stories)`` counts for *epic*."""
    stories = sum(len(feature.stories) for feature in epic.features)
    return len(epic.features), stories
