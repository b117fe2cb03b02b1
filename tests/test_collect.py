"""Tests for concurrent bid collection."""

from __future__ import annotations

import asyncio

import pytest

from parley.bidding.base import Bid, BidContext
from parley.bidding.collect import collect_bids
from tests.helpers import speakers_only


class RecordingStrategy:
    """Strategy double that yields control and records every context it sees."""

    def __init__(self):
        self.contexts: list[BidContext] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def calculate_bid(self, context: BidContext) -> Bid:
        self.contexts.append(context)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0)
        self.in_flight -= 1
        return Bid(participant_id=context.participant_id, strength=0.5, reason="recorded")


@pytest.mark.asyncio
async def test_one_bid_per_participant_in_order(strategy, pair_coalition):
    """Bids come back in the order participants were given."""
    bids = await collect_bids(
        strategy, speakers_only("carol", "dave"), ["carol", "alice", "bob"], [pair_coalition]
    )

    assert [bid.participant_id for bid in bids] == ["carol", "alice", "bob"]
    assert bids[1].metadata["coalition_id"] == 0
    assert bids[0].reason.startswith("Coalition bidding (opposing")


@pytest.mark.asyncio
async def test_bids_run_concurrently():
    """All calculations are in flight together."""
    strategy = RecordingStrategy()
    await collect_bids(strategy, speakers_only(), ["a", "b", "c"])
    assert strategy.max_in_flight == 3


@pytest.mark.asyncio
async def test_shared_snapshot():
    """Every participant bids against the same snapshot and coalition list."""
    strategy = RecordingStrategy()
    state = speakers_only("a", "b")
    await collect_bids(strategy, state, ["a", "b"], coalitions=None)

    assert all(ctx.dialogue_state is state for ctx in strategy.contexts)
    assert all(ctx.coalitions is None for ctx in strategy.contexts)


@pytest.mark.asyncio
async def test_no_participants(strategy):
    """An empty round returns no bids."""
    assert await collect_bids(strategy, speakers_only(), []) == []
