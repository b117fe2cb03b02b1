"""Coalition-aware bidding strategy.

Members of a coalition take turns speaking for it; participants outside
every coalition push back harder the more an opposing coalition has been
dominating the conversation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from parley.bidding.base import Bid, BidContext, clamp01

if TYPE_CHECKING:
    from collections.abc import Sequence

    from parley.config import BiddingConfig
    from parley.dialogue import DialogueState
    from parley.social.coalition import Coalition

logger = logging.getLogger(__name__)

OPPOSITION_WINDOW = 5


def find_active_coalition(
    coalitions: Sequence[Coalition], participant_id: str
) -> tuple[int, Coalition] | None:
    """First coalition (in list order) the participant belongs to.

    A participant listed in several coalitions only ever bids for the first.
    """
    for index, coalition in enumerate(coalitions):
        if participant_id in coalition.members:
            return index, coalition
    return None


def find_strongest_opposition(
    coalitions: Sequence[Coalition], participant_id: str
) -> tuple[int, Coalition] | None:
    """Strongest coalition the participant is not in. Ties keep the earliest."""
    strongest: tuple[int, Coalition] | None = None
    for index, coalition in enumerate(coalitions):
        if participant_id in coalition.members:
            continue
        if strongest is None or coalition.strength > strongest[1].strength:
            strongest = (index, coalition)
    return strongest


def coalition_factor(
    coalition: Coalition, participant_id: str, dialogue_state: DialogueState
) -> float:
    """Rotate the floor among coalition members.

    Looks at the last len(members) messages. Nobody from the coalition has
    spoken: the first member leads. The participant spoke last: back off.
    Others spoke but not the participant: step up. Otherwise: unchanged.

    Returns:
        Factor in [0.0, 1.0] scaled from the coalition strength
    """
    factor = coalition.strength

    recent_speakers = [
        message.participant_id
        for message in dialogue_state.recent(coalition.size)
        if message.participant_id in coalition.members
    ]

    if not recent_speakers:
        return factor if coalition.members[0] == participant_id else factor * 0.5

    if recent_speakers[-1] == participant_id:
        return factor * 0.3

    if participant_id not in recent_speakers:
        return min(1.0, factor * 1.2)

    return factor


def opposition_factor(
    opposing: Coalition, participant_id: str, dialogue_state: DialogueState
) -> float:
    """Adjustment for a participant facing an opposing coalition.

    Returns:
        0.3 if the opposition wrote 3+ of the last five messages, 0.1 for
        one or two, -0.1 if it has been silent
    """
    opposing_messages = sum(
        1
        for message in dialogue_state.recent(OPPOSITION_WINDOW)
        if message.participant_id in opposing.members
    )

    if opposing_messages >= 3:
        return 0.3
    if opposing_messages >= 1:
        return 0.1
    return -0.1


class CoalitionBiddingStrategy:
    """Bidding strategy that leverages coalitions between participants.

    The two parameters are clamped to [0, 1] once, at construction, and are
    the only state the strategy holds. Bids for different participants can
    therefore be computed concurrently against the same snapshot.
    """

    def __init__(self, base_strength: float = 0.5, coalition_boost: float = 0.3):
        """Initialize the strategy.

        Args:
            base_strength: Base bid strength (0.0-1.0)
            coalition_boost: How much coalition membership boosts bids (0.0-1.0)
        """
        self._base_strength = clamp01(base_strength)
        self._coalition_boost = clamp01(coalition_boost)

    @classmethod
    def from_config(cls, config: BiddingConfig) -> CoalitionBiddingStrategy:
        """Build a strategy from configuration defaults."""
        return cls(base_strength=config.base_strength, coalition_boost=config.coalition_boost)

    @property
    def base_strength(self) -> float:
        return self._base_strength

    @property
    def coalition_boost(self) -> float:
        return self._coalition_boost

    async def calculate_bid(self, context: BidContext) -> Bid:
        """Calculate a bid based on coalition membership and dynamics.

        Args:
            context: Bid context; a missing coalition list means no coalitions

        Returns:
            Bid with strength in [0.0, 1.0]
        """
        participant_id = context.participant_id
        coalitions = context.coalitions or ()

        active = find_active_coalition(coalitions, participant_id)
        if active is not None:
            index, coalition = active
            factor = coalition_factor(coalition, participant_id, context.dialogue_state)
            strength = clamp01(self._base_strength + factor * self._coalition_boost)
            logger.debug(
                f"{participant_id}: member of coalition {index} ('{coalition.topic}'), "
                f"factor={factor:.2f} strength={strength:.2f}"
            )
            return Bid(
                participant_id=participant_id,
                strength=strength,
                reason=f'Coalition bidding (member of "{coalition.topic}" coalition)',
                metadata={
                    "coalition_id": index,
                    "coalition_strength": coalition.strength,
                    "coalition_factor": factor,
                },
            )

        opposing = find_strongest_opposition(coalitions, participant_id)
        if opposing is not None:
            index, coalition = opposing
            factor = opposition_factor(coalition, participant_id, context.dialogue_state)
            strength = clamp01(self._base_strength + factor)
            logger.debug(
                f"{participant_id}: opposing coalition {index} ('{coalition.topic}'), "
                f"factor={factor:+.2f} strength={strength:.2f}"
            )
            return Bid(
                participant_id=participant_id,
                strength=strength,
                reason=f'Coalition bidding (opposing "{coalition.topic}" coalition)',
                metadata={
                    "opposing_coalition_id": index,
                    "opposing_coalition_strength": coalition.strength,
                    "opposition_factor": factor,
                },
            )

        logger.debug(f"{participant_id}: no coalitions, strength={self._base_strength:.2f}")
        return Bid(
            participant_id=participant_id,
            strength=self._base_strength,
            reason="Coalition bidding (no active coalition)",
        )
