"""Cleaning outcome dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from reclaim.models.target import Target


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    PARTIAL = "partial"
    FAILED = "failed"


@dataclass(slots=True)
class CleanOutcome:
    """Result of cleaning one target.

    ``PARTIAL`` is only produced for recreatable directories whose contents
    could not be fully cleared but which were re-created afterwards.
    ``clear_failed`` and ``recreate_failed`` record which step went wrong so
    the two can be counted separately.
    """

    target: Target
    status: OutcomeStatus
    message: str = ""
    errors: list[str] = field(default_factory=list)
    clear_failed: bool = False
    recreate_failed: bool = False

    @property
    def ok(self) -> bool:
        return self.status in (OutcomeStatus.SUCCESS, OutcomeStatus.SKIPPED)
