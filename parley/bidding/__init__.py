"""Turn bidding strategies for multi-party dialogue."""

from __future__ import annotations

from parley.bidding.base import Bid, BidContext, BiddingStrategy, clamp01
from parley.bidding.coalition import (
    CoalitionBiddingStrategy,
    coalition_factor,
    find_active_coalition,
    find_strongest_opposition,
    opposition_factor,
)
from parley.bidding.collect import collect_bids

__all__ = [
    "Bid",
    "BidContext",
    "BiddingStrategy",
    "CoalitionBiddingStrategy",
    "clamp01",
    "coalition_factor",
    "collect_bids",
    "find_active_coalition",
    "find_strongest_opposition",
    "opposition_factor",
]
