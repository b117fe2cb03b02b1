"""Structured error hierarchy for parley."""


class ParleyError(Exception):
    """Base for all parley errors."""

    pass


class ValidationError(ParleyError):
    """Input validation at boundary failed."""

    pass


class ScenarioError(ParleyError):
    """Scenario file could not be read or is malformed."""

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"Invalid scenario {source}: {detail}")
