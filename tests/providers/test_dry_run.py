import pytest

from issuetree.exceptions import ProviderError
from issuetree.providers.dry_run import FIRST_SIMULATED_NUMBER, DryRunTracker
from tests.fakes.tracker import FakeTracker


@pytest.mark.asyncio
async def test_simulated_numbers_start_at_1001_and_increase() -> None:
    tracker = DryRunTracker()

    first = await tracker.create_issue("acme", "shop", "A", "body", [])
    second = await tracker.create_issue("acme", "shop", "B", "body", ["x"])

    assert FIRST_SIMULATED_NUMBER == 1001
    assert (first.number, second.number) == (1001, 1002)
    assert first.url == "https://github.com/acme/shop/issues/1001"


@pytest.mark.asyncio
async def test_counter_is_per_instance() -> None:
    await DryRunTracker().create_issue("acme", "shop", "A", "", [])

    ref = await DryRunTracker().create_issue("acme", "shop", "A", "", [])

    assert ref.number == 1001


@pytest.mark.asyncio
async def test_operations_are_logged_with_monotonic_sequence() -> None:
    tracker = DryRunTracker()

    await tracker.create_label("acme", "shop", "bug", "B60205", "d")
    parent = await tracker.create_issue("acme", "shop", "Parent", "", [])
    child = await tracker.create_issue("acme", "shop", "Child", "", [])
    await tracker.add_to_project(7, "acme", child.url)
    info = await tracker.get_issue("acme", "shop", child.number)
    await tracker.create_sub_issue_link("acme", "shop", parent.number, info.id)

    assert [op.sequence for op in tracker.operations] == [1, 2, 3, 4, 5]
    assert [op.name for op in tracker.operations] == [
        "create_label",
        "create_issue",
        "create_issue",
        "add_to_project",
        "create_sub_issue_link",
    ]
    assert tracker.operations[-1].payload == {"parent": "1001", "child_id": "1002"}


@pytest.mark.asyncio
async def test_body_round_trip_supports_tasklist_fallback() -> None:
    tracker = DryRunTracker()
    ref = await tracker.create_issue("acme", "shop", "Parent", "original", [])

    await tracker.edit_issue_body("acme", "shop", ref.number, "updated")

    assert await tracker.get_issue_body("acme", "shop", ref.number) == "updated"


@pytest.mark.asyncio
async def test_unknown_issue_raises() -> None:
    tracker = DryRunTracker()

    with pytest.raises(ProviderError):
        await tracker.get_issue("acme", "shop", 1)
    with pytest.raises(ProviderError):
        await tracker.get_issue_body("acme", "shop", 1)


@pytest.mark.asyncio
async def test_environment_checks_delegate_to_live_tracker() -> None:
    live = FakeTracker(auth_ok=False)
    tracker = DryRunTracker(live)

    assert await tracker.version_check() is True
    assert await tracker.auth_check() is False
    assert live.calls == ["version_check", "auth_check"]


@pytest.mark.asyncio
async def test_reads_never_touch_live_tracker() -> None:
    live = FakeTracker()
    tracker = DryRunTracker(live)

    project = await tracker.project_exists(7, "acme")
    labels = await tracker.list_labels("acme", "shop")

    assert project.number == 7
    assert labels == {}
    assert live.calls == []
