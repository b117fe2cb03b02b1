"""Shared builders for parley test suites."""

from __future__ import annotations

from parley.dialogue import DialogueState, Message


def make_dialogue(*turns: tuple[str, str], topic: str = "") -> DialogueState:
    """Build a dialogue from (participant_id, content) turns with sequential timestamps."""
    return DialogueState(
        messages=[
            Message(participant_id=pid, content=content, timestamp=float(i))
            for i, (pid, content) in enumerate(turns)
        ],
        topic=topic,
    )


def speakers_only(*participant_ids: str) -> DialogueState:
    """Build a dialogue where only the authors matter."""
    return make_dialogue(*((pid, "moving on now") for pid in participant_ids))
