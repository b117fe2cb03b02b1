"""Coalition value type.

A Coalition is an informal alliance of dialogue participants around a
topic. Coalitions are created and expired by the host application; the
bidding and formation code only ever reads them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from parley.errors import ValidationError

if TYPE_CHECKING:
    from parley.social.formation import FormationDecision


@dataclass(frozen=True)
class Coalition:
    """A group of participants backing a shared position.

    Attributes:
        members: Participant IDs, in order. The first member acts as the
            initial spokesperson when no member has spoken recently.
        topic: Topic or focus of the coalition
        strength: Strength of the coalition (0.0-1.0)
        formed: Timestamp when the coalition was formed
        expires: Timestamp after which the coalition lapses (None = never)
    """

    members: tuple[str, ...]
    topic: str
    strength: float
    formed: float = 0.0
    expires: float | None = None

    def __post_init__(self) -> None:
        members = tuple(self.members)
        if not members:
            raise ValidationError("Coalition must have at least one member")
        if len(set(members)) != len(members):
            raise ValidationError(f"Coalition members must be unique: {list(members)}")
        if not 0.0 <= self.strength <= 1.0:
            raise ValidationError(f"Coalition strength must be in [0, 1], got {self.strength}")
        object.__setattr__(self, "members", members)

    @property
    def size(self) -> int:
        """Number of members in the coalition."""
        return len(self.members)

    def __contains__(self, participant_id: object) -> bool:
        return participant_id in self.members

    def is_expired(self, now: float) -> bool:
        """Whether the coalition has lapsed at time `now`."""
        return self.expires is not None and now >= self.expires

    @classmethod
    def from_decision(
        cls,
        decision: FormationDecision,
        participant_id: str,
        formed: float,
        expires: float | None = None,
    ) -> Coalition:
        """Build the coalition a positive formation decision describes.

        The deciding participant is listed first, followed by the allies in
        the order the detector returned them.

        Args:
            decision: Result of should_form_coalition
            participant_id: Participant the decision was computed for
            formed: Formation timestamp
            expires: Optional expiry timestamp

        Returns:
            New Coalition instance

        Raises:
            ValidationError: If the decision does not recommend forming
        """
        if not decision.should_form:
            raise ValidationError(
                f"Cannot build a coalition for {participant_id}: decision is negative"
            )

        return cls(
            members=(participant_id, *decision.allies),
            topic=decision.topic,
            strength=decision.strength,
            formed=formed,
            expires=expires,
        )
