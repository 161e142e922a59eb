"""Tests for the replay-latest observable."""

from __future__ import annotations

import asyncio
from contextlib import aclosing

import pytest

from core.state import MutableStateFlow, StateFlow


def test_new_subscriber_receives_current_value_synchronously() -> None:
    flow = MutableStateFlow("initial")
    received: list[str] = []

    flow.subscribe(received.append)

    assert received == ["initial"]


def test_updates_are_broadcast_to_all_subscribers() -> None:
    flow = MutableStateFlow(0)
    a: list[int] = []
    b: list[int] = []
    flow.subscribe(a.append)
    flow.subscribe(b.append)

    flow.value = 1
    flow.value = 2

    assert a == [0, 1, 2]
    assert b == [0, 1, 2]


def test_late_subscriber_only_gets_latest() -> None:
    flow = MutableStateFlow("loading")
    flow.value = "done"
    received: list[str] = []

    flow.subscribe(received.append)

    assert received == ["done"]


def test_unsubscribe_stops_delivery() -> None:
    flow = MutableStateFlow(0)
    received: list[int] = []
    unsubscribe = flow.subscribe(received.append)

    unsubscribe()
    unsubscribe()
    flow.value = 1

    assert received == [0]
    assert flow.subscriber_count == 0


def test_failing_listener_does_not_block_others() -> None:
    flow = MutableStateFlow(0)
    received: list[int] = []

    def boom(value: int) -> None:
        if value:
            raise ValueError("listener failed")

    flow.subscribe(boom)
    flow.subscribe(received.append)
    flow.value = 1

    assert received == [0, 1]
    assert flow.value == 1


def test_read_only_view_tracks_source() -> None:
    flow = MutableStateFlow(0)
    view = flow.as_state_flow()

    assert isinstance(view, StateFlow)
    assert not hasattr(view, "as_state_flow")
    with pytest.raises(AttributeError):
        view.value = 5  # type: ignore[misc]

    flow.value = 3
    assert view.value == 3


@pytest.mark.asyncio
async def test_watch_yields_current_then_updates() -> None:
    flow = MutableStateFlow("a")
    seen: list[str] = []

    async def consume() -> None:
        async with aclosing(flow.as_state_flow().watch()) as values:
            async for value in values:
                seen.append(value)
                if value == "c":
                    return

    task = asyncio.create_task(consume())
    await asyncio.sleep(0)
    flow.value = "b"
    flow.value = "c"
    await asyncio.wait_for(task, timeout=1)

    assert seen == ["a", "b", "c"]
    assert flow.subscriber_count == 0
