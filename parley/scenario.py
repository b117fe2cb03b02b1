"""Dialogue scenarios with YAML support.

A scenario bundles a dialogue history with the coalitions active at the
time, so bids and formation decisions can be inspected offline:

    topic: remote work
    now: 120
    participants: [alice, bob, carol]
    messages:
      - {participant: alice, content: "Remote work improves focus", timestamp: 1}
      - {participant: bob, content: "I agree, focus matters", timestamp: 2}
    coalitions:
      - {members: [alice, bob], topic: focus, strength: 0.6, formed: 2}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from parley.dialogue import DialogueState, Message
from parley.errors import ScenarioError, ValidationError
from parley.social.coalition import Coalition

logger = logging.getLogger(__name__)


def _as_list(data: dict, key: str, source: str) -> list:
    """Fetch an optional list-valued key; missing or null means empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ScenarioError(source, f"{key} must be a list")
    return value


@dataclass
class Scenario:
    """A dialogue snapshot plus the coalitions registered alongside it."""

    dialogue: DialogueState
    coalitions: list[Coalition] = field(default_factory=list)
    participants: list[str] = field(default_factory=list)
    now: float | None = None

    @classmethod
    def from_yaml(cls, path: str) -> Scenario:
        """Load a scenario from a YAML (or JSON) file.

        Args:
            path: Path to the scenario file

        Returns:
            Scenario instance

        Raises:
            ImportError: If pyyaml is not installed
            ScenarioError: If the file is missing, unparsable or malformed
        """
        try:
            import yaml  # type: ignore[import-untyped]
        except ImportError as err:
            raise ImportError(
                "pyyaml is required for YAML loading. Install with: pip install pyyaml"
            ) from err

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except UnicodeDecodeError as err:
            raise ScenarioError(path, "not valid UTF-8") from err
        except OSError as err:
            raise ScenarioError(path, str(err)) from err
        except yaml.YAMLError as err:
            raise ScenarioError(path, f"not valid YAML ({err})") from err

        return cls.from_dict(data, source=path)

    @classmethod
    def from_dict(cls, data: Any, source: str = "<dict>") -> Scenario:
        """Build a Scenario from a dictionary.

        Raises:
            ScenarioError: If required keys are missing or values are invalid
        """
        if not isinstance(data, dict):
            raise ScenarioError(source, "top level must be a mapping")

        try:
            messages = [
                Message(
                    participant_id=str(entry["participant"]),
                    content=str(entry["content"]),
                    timestamp=float(entry.get("timestamp", index)),
                )
                for index, entry in enumerate(_as_list(data, "messages", source))
            ]
            coalitions = [
                Coalition(
                    members=tuple(str(m) for m in entry["members"]),
                    topic=str(entry.get("topic", "")),
                    strength=float(entry["strength"]),
                    formed=float(entry.get("formed", 0.0)),
                    expires=None if entry.get("expires") is None else float(entry["expires"]),
                )
                for entry in _as_list(data, "coalitions", source)
            ]
            participants = [str(p) for p in _as_list(data, "participants", source)]
            now = data.get("now")
            now = None if now is None else float(now)
        except KeyError as err:
            raise ScenarioError(source, f"missing key {err}") from err
        except (TypeError, ValueError, AttributeError) as err:
            raise ScenarioError(source, str(err)) from err
        except ValidationError as err:
            raise ScenarioError(source, str(err)) from err

        dialogue = DialogueState(messages=messages, topic=str(data.get("topic", "")))

        return cls(
            dialogue=dialogue,
            coalitions=coalitions,
            participants=participants or dialogue.speakers(),
            now=now,
        )

    def active_coalitions(self) -> list[Coalition]:
        """Coalitions that have not expired as of `now` (all if `now` is unset)."""
        if self.now is None:
            return list(self.coalitions)

        active = []
        for coalition in self.coalitions:
            if coalition.is_expired(self.now):
                logger.info(
                    f"Skipping expired coalition '{coalition.topic}' "
                    f"(expired {coalition.expires}, now {self.now})"
                )
                continue
            active.append(coalition)
        return active
