"""Dialogue snapshot types: messages and the state handed to bidders."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Message:
    """A single dialogue message. Immutable after creation."""

    participant_id: str
    content: str
    timestamp: float = 0.0


@dataclass(frozen=True)
class DialogueState:
    """Read-only snapshot of a dialogue.

    Messages are stored in chronological order (insertion order). The
    workflow that owns the dialogue appends to its own history and hands
    out a fresh snapshot per bidding round.
    """

    messages: tuple[Message, ...] = field(default_factory=tuple)
    topic: str = ""

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "messages", tuple(self.messages))

    def recent(self, count: int) -> tuple[Message, ...]:
        """Last `count` messages (all of them if fewer exist)."""
        if count <= 0:
            return ()
        return self.messages[-count:]

    def speakers(self) -> list[str]:
        """Distinct participant IDs in order of first appearance."""
        seen: dict[str, None] = {}
        for message in self.messages:
            seen.setdefault(message.participant_id, None)
        return list(seen)
