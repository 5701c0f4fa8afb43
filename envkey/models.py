"""Data models for the envkey update flow."""

from dataclasses import dataclass
from enum import Enum


class Outcome(str, Enum):
    """How an upsert ended."""

    ADDED = "added"
    UPDATED = "updated"
    CANCELLED = "cancelled"


@dataclass
class UpsertResult:
    """Result of a single add-or-update run."""

    outcome: Outcome
    key: str
    attempts: int = 0

    @property
    def written(self) -> bool:
        return self.outcome in (Outcome.ADDED, Outcome.UPDATED)
