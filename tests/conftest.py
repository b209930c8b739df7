"""Shared test fixtures for issuetree tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from issuetree.config import ImportConfig, ThrottleConfig
from issuetree.models.hierarchy import Epic, Feature, Story
from tests.fakes.tracker import FakeTracker

NO_DELAY = ThrottleConfig(issue_create=0, label_create=0, sub_issue_link=0, tasklist_edit=0)


@pytest.fixture
def sample_epic() -> Epic:
    """Epic with two features; the first has two stories, the second one."""
    return Epic(
        title="Checkout revamp",
        body="Rebuild the checkout flow.",
        labels=["epic", "checkout"],
        features=[
            Feature(
                title="Payment form",
                body="New payment form.",
                labels=["feature", "checkout"],
                stories=[
                    Story(
                        title="Card input",
                        body="Accept card numbers.",
                        labels=["story", "frontend"],
                        acceptance_criteria=["Validates Luhn", "Masks digits"],
                    ),
                    Story(title="Wallet buttons", body="Apple/Google Pay.", labels=["story"]),
                ],
            ),
            Feature(
                title="Receipts",
                body="Email receipts.",
                labels=["feature"],
                stories=[Story(title="Receipt email", body="Send email.", labels=["story", "backend"])],
            ),
        ],
    )


@pytest.fixture
def hierarchy_file(tmp_path: Path, sample_epic: Epic) -> Path:
    """Write the sample epic in the on-disk JSON shape (camelCase criteria)."""
    path = tmp_path / "hierarchy.json"
    payload: dict[str, Any] = {"epic": sample_epic.model_dump(mode="json", by_alias=True)}
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def make_config(hierarchy_file: Path):
    """Factory for an ImportConfig pointing at the sample hierarchy with no throttling."""

    def _make(**overrides: Any) -> ImportConfig:
        values: dict[str, Any] = {
            "owner": "acme",
            "repo": "shop",
            "project_number": 7,
            "input_path": hierarchy_file,
            "dry_run": False,
            "throttle": NO_DELAY,
        }
        values.update(overrides)
        return ImportConfig(**values)

    return _make


@pytest.fixture
def live_config(make_config) -> ImportConfig:
    return make_config()


@pytest.fixture
def tracker() -> FakeTracker:
    return FakeTracker()
