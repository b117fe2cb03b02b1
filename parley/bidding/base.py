"""Bid types and the protocol every bidding strategy implements."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from parley.dialogue import DialogueState
    from parley.social.coalition import Coalition


def clamp01(value: float) -> float:
    """Clamp a value into [0.0, 1.0]."""
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class Bid:
    """A participant's bid for the next turn.

    Higher strength means a stronger desire to speak. Metadata carries
    strategy-specific details and is None when there is nothing to report.
    """

    participant_id: str
    strength: float
    reason: str
    metadata: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class BidContext:
    """Everything a strategy may look at when bidding.

    `coalitions` is optional; None is treated the same as no coalitions.
    Its order only matters as the index reported in bid metadata.
    """

    participant_id: str
    dialogue_state: DialogueState
    coalitions: tuple[Coalition, ...] | None = None
    extra: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.coalitions is not None:
            object.__setattr__(self, "coalitions", tuple(self.coalitions))


@runtime_checkable
class BiddingStrategy(Protocol):
    """Protocol that any bidding strategy must implement.

    Bids are awaitable so a scheduler can collect them concurrently,
    even though current strategies never suspend.
    """

    async def calculate_bid(self, context: BidContext) -> Bid:
        """Given the dialogue snapshot, how strongly does the participant want the floor?"""
        ...
