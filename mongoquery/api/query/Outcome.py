"""Normalized driver result."""

from dataclasses import dataclass
from typing import Any, Literal

OutcomeStatus = Literal["success", "empty", "unacknowledged", "malformed"]


@dataclass(frozen=True)
class Outcome:
    """Classification of a raw driver response.

    ``success`` and ``empty`` carry the payload the public method returns;
    ``unacknowledged`` and ``malformed`` carry the reason used in failure messages.
    """

    status: OutcomeStatus
    payload: Any = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status in ("success", "empty")

    @classmethod
    def success(cls, payload: Any) -> "Outcome":
        return cls("success", payload)

    @classmethod
    def empty(cls, payload: Any = None) -> "Outcome":
        return cls("empty", payload)

    @classmethod
    def unacknowledged(cls) -> "Outcome":
        return cls("unacknowledged", reason="Unacknowledged")

    @classmethod
    def malformed(cls, reason: str = "Unexpected result") -> "Outcome":
        return cls("malformed", reason=reason)
