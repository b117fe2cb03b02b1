"""Concurrent bid collection for one bidding round."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from parley.bidding.base import Bid, BidContext

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from parley.bidding.base import BiddingStrategy
    from parley.dialogue import DialogueState
    from parley.social.coalition import Coalition


async def collect_bids(
    strategy: BiddingStrategy,
    dialogue_state: DialogueState,
    participant_ids: Iterable[str],
    coalitions: Sequence[Coalition] | None = None,
) -> list[Bid]:
    """Gather one bid per participant against the same snapshot.

    Bids are awaited concurrently and returned in participant order.
    Choosing a speaker from them is left to the caller.
    """
    frozen = tuple(coalitions) if coalitions is not None else None
    contexts = [
        BidContext(participant_id=pid, dialogue_state=dialogue_state, coalitions=frozen)
        for pid in participant_ids
    ]
    return list(await asyncio.gather(*(strategy.calculate_bid(ctx) for ctx in contexts)))
