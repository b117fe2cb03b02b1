"""Coalition formation decision logic.

Determines when a participant should form a coalition, with whom and
around what topic, based on agreement patterns in recent dialogue.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from parley.social.lexical import FALLBACK_TOPIC, detect_agreement, extract_potential_topic

if TYPE_CHECKING:
    from collections.abc import Sequence

    from parley.dialogue import DialogueState

logger = logging.getLogger(__name__)

MIN_MESSAGES = 3
AGREEMENT_WINDOW = 10
MIN_AGREEMENTS = 2
MAX_ADDITIONAL_ALLIES = 2


@dataclass(frozen=True)
class FormationDecision:
    """Outcome of a coalition formation check."""

    should_form: bool = False
    topic: str = ""
    allies: tuple[str, ...] = ()
    strength: float = 0.0


@dataclass
class _Agreement:
    """Running tally for one unordered pair of participants."""

    count: int = 0
    topics: dict[str, None] = field(default_factory=dict)  # ordered set


Pair = tuple[str, str]


def _accumulate_agreements(dialogue_state: DialogueState) -> dict[Pair, _Agreement]:
    """Tally agreements between adjacent messages in the recent window.

    Keys are sorted participant pairs; dict insertion order records the
    order in which each pair was first seen.
    """
    agreements: dict[Pair, _Agreement] = {}
    recent = dialogue_state.recent(AGREEMENT_WINDOW)

    for first, second in zip(recent, recent[1:]):
        if first.participant_id == second.participant_id:
            continue
        if not detect_agreement(first.content, second.content):
            continue

        pair: Pair = tuple(sorted((first.participant_id, second.participant_id)))  # type: ignore[assignment]
        data = agreements.setdefault(pair, _Agreement())
        data.count += 1
        topic = extract_potential_topic(first.content, second.content)
        data.topics.setdefault(topic, None)
        logger.debug(f"Agreement {pair[0]}<->{pair[1]} on '{topic}' (count={data.count})")

    return agreements


def _other(pair: Pair, participant_id: str) -> str:
    return pair[1] if pair[0] == participant_id else pair[0]


def find_additional_allies(
    agreements: dict[Pair, _Agreement],
    participant_id: str,
    primary_ally: str,
    topic: str,
    potential_allies: Sequence[str] = (),
) -> list[str]:
    """Find further allies agreeing with the participant or primary ally.

    Args:
        agreements: Pair tallies from the agreement scan
        participant_id: Participant considering the coalition
        primary_ally: Ally with the most agreements
        topic: Coalition topic; only pairs that agreed on it count
        potential_allies: Allowed allies (empty = unrestricted)

    Returns:
        At most two extra ally IDs, in discovery order
    """
    additional: list[str] = []

    for pair, data in agreements.items():
        if data.count < 1 or topic not in data.topics:
            continue
        if participant_id not in pair and primary_ally not in pair:
            continue

        candidate = pair[1] if pair[0] in (participant_id, primary_ally) else pair[0]
        if candidate in (participant_id, primary_ally) or candidate in additional:
            continue
        if potential_allies and candidate not in potential_allies:
            continue

        additional.append(candidate)

    # Max four members including the participant
    return additional[:MAX_ADDITIONAL_ALLIES]


def should_form_coalition(
    dialogue_state: DialogueState,
    participant_id: str,
    potential_allies: Sequence[str] | None = None,
) -> FormationDecision:
    """Decide whether a participant should form a new coalition.

    Scans the last ten messages for adjacent agreeing exchanges, picks the
    participant's most frequent agreement partner and recommends a
    coalition once they have agreed at least twice.

    Args:
        dialogue_state: Current dialogue snapshot
        participant_id: Participant considering a coalition
        potential_allies: Restrict allies to these IDs (None or empty = anyone)

    Returns:
        FormationDecision; the default (negative) decision when there is
        too little history or agreement
    """
    allowed = tuple(potential_allies or ())

    if len(dialogue_state.messages) < MIN_MESSAGES:
        return FormationDecision()

    agreements = _accumulate_agreements(dialogue_state)
    if not agreements:
        return FormationDecision()

    best_ally = ""
    best_count = 0
    best_topics: dict[str, None] = {}

    for pair, data in agreements.items():
        if participant_id not in pair or data.count <= best_count:
            continue
        ally = _other(pair, participant_id)
        if allowed and ally not in allowed:
            continue
        best_ally = ally
        best_count = data.count
        best_topics = data.topics

    if not best_ally or best_count < MIN_AGREEMENTS:
        return FormationDecision()

    strength = min(0.8, 0.4 + best_count * 0.1)
    topic = next(iter(best_topics), FALLBACK_TOPIC)
    additional = find_additional_allies(agreements, participant_id, best_ally, topic, allowed)

    logger.info(
        f"Coalition recommended for {participant_id}: allies={[best_ally, *additional]} "
        f"topic='{topic}' strength={strength:.2f}"
    )

    return FormationDecision(
        should_form=True,
        topic=topic,
        allies=(best_ally, *additional),
        strength=strength,
    )
