"""Summary of a complete measure-and-clean run."""

from __future__ import annotations

from dataclasses import dataclass, field

from reclaim.models.clean_result import CleanOutcome, OutcomeStatus
from reclaim.models.scan_result import ScanResult
from reclaim.models.target import Catalog


@dataclass(slots=True)
class RunReport:
    """Everything a single run produced. Discarded when the run ends."""

    catalog: Catalog
    scan: ScanResult
    outcomes: list[CleanOutcome] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def total_bytes(self) -> int:
        return self.scan.total_bytes

    @property
    def failures(self) -> list[CleanOutcome]:
        return [o for o in self.outcomes if o.status is OutcomeStatus.FAILED]

    @property
    def partials(self) -> list[CleanOutcome]:
        return [o for o in self.outcomes if o.status is OutcomeStatus.PARTIAL]

    @property
    def clear_failures(self) -> int:
        return sum(1 for o in self.outcomes if o.clear_failed)

    @property
    def recreate_failures(self) -> int:
        return sum(1 for o in self.outcomes if o.recreate_failed)
