from __future__ import annotations

import logging
import random

import pytest

from issuetree.labels.colors import PRESET_COLORS, ColorAllocator
from issuetree.labels.reconciler import LABEL_DESCRIPTION, LabelReconciler
from issuetree.models.hierarchy import Epic
from issuetree.models.state import ImportState
from tests.fakes.tracker import FakeTracker

ALL_LABELS = ["backend", "checkout", "epic", "feature", "frontend", "story"]


def _reconciler(tracker: FakeTracker, config) -> LabelReconciler:
    return LabelReconciler(tracker, config, ColorAllocator(random.Random(0)))


@pytest.mark.asyncio
async def test_creates_missing_labels_in_sorted_order(make_config, sample_epic: Epic) -> None:
    tracker = FakeTracker(existing_labels={"epic": "b60205", "story": "0E8A16"})
    state = ImportState()

    created = await _reconciler(tracker, make_config()).reconcile(sample_epic, state)

    assert created == ["backend", "checkout", "feature", "frontend"]
    assert state.labels_created == created
    assert list(tracker.created_labels) == created


@pytest.mark.asyncio
async def test_new_colors_avoid_existing_ones(make_config, sample_epic: Epic) -> None:
    tracker = FakeTracker(existing_labels={"epic": PRESET_COLORS[0].lower(), "story": PRESET_COLORS[2]})
    state = ImportState()

    await _reconciler(tracker, make_config()).reconcile(sample_epic, state)

    colors = list(tracker.created_labels.values())
    assert colors == [PRESET_COLORS[1], PRESET_COLORS[3], PRESET_COLORS[4], PRESET_COLORS[5]]
    assert {PRESET_COLORS[0], PRESET_COLORS[2]}.isdisjoint(colors)
    assert set(colors) <= state.used_colors


@pytest.mark.asyncio
async def test_all_labels_present_creates_nothing(make_config, sample_epic: Epic) -> None:
    tracker = FakeTracker(existing_labels={name: "FFFFFF" for name in ALL_LABELS})

    created = await _reconciler(tracker, make_config()).reconcile(sample_epic, ImportState())

    assert created == []
    assert "create_label" not in tracker.calls


@pytest.mark.asyncio
async def test_label_creation_failure_is_not_fatal(make_config, sample_epic: Epic) -> None:
    tracker = FakeTracker(fail_labels={"checkout"})
    state = ImportState()

    created = await _reconciler(tracker, make_config()).reconcile(sample_epic, state)

    assert "checkout" not in created
    assert created == ["backend", "epic", "feature", "frontend", "story"]
    assert tracker.calls.count("create_label") == len(ALL_LABELS)


@pytest.mark.asyncio
async def test_list_failure_skips_creation(make_config, sample_epic: Epic, caplog) -> None:
    tracker = FakeTracker(fail_list_labels=True)

    with caplog.at_level(logging.ERROR):
        created = await _reconciler(tracker, make_config()).reconcile(sample_epic, ImportState())

    assert created == []
    assert "create_label" not in tracker.calls
    assert "Could not list labels" in caplog.text


@pytest.mark.asyncio
async def test_disabled_auto_create_makes_no_calls(make_config, sample_epic: Epic) -> None:
    tracker = FakeTracker()

    created = await _reconciler(tracker, make_config(auto_create_labels=False)).reconcile(sample_epic, ImportState())

    assert created == []
    assert tracker.calls == []


@pytest.mark.asyncio
async def test_dry_run_reports_without_calls(make_config, sample_epic: Epic, caplog) -> None:
    tracker = FakeTracker()

    with caplog.at_level(logging.INFO):
        created = await _reconciler(tracker, make_config(dry_run=True)).reconcile(sample_epic, ImportState())

    assert created == []
    assert tracker.calls == []
    assert sum("Would check label" in r.getMessage() for r in caplog.records) == len(ALL_LABELS)


@pytest.mark.asyncio
async def test_no_labels_in_hierarchy(make_config) -> None:
    tracker = FakeTracker()
    epic = Epic(title="E", body="")

    assert await _reconciler(tracker, make_config()).reconcile(epic, ImportState()) == []
    assert tracker.calls == []


def test_description_text() -> None:
    assert LABEL_DESCRIPTION == "Auto-created by import script"
