"""Measure-then-clean orchestration engine."""

from __future__ import annotations

import logging
import time
from typing import Callable

from reclaim.core import accountant, cleaner
from reclaim.core.catalog import build_catalog
from reclaim.core.locations import Locations
from reclaim.models.clean_result import CleanOutcome
from reclaim.models.run_report import RunReport
from reclaim.models.target import Catalog

log = logging.getLogger(__name__)

ProgressCallback = Callable[[str, str], None]  # (target label, status)
OutcomeCallback = Callable[[CleanOutcome], None]


class ReclaimEngine:
    """Runs the accounting pass and then the cleanup pass over one catalog."""

    def __init__(self, locations: Locations | None = None) -> None:
        self.locations = locations or Locations.from_environ()

    def build_catalog(self) -> Catalog:
        return build_catalog(self.locations)

    def run(
        self,
        on_progress: ProgressCallback | None = None,
        on_outcome: OutcomeCallback | None = None,
    ) -> RunReport:
        """Build the catalog, measure it, then clean it.

        The accounting pass finishes over the whole catalog before anything
        is deleted.

        Args:
            on_progress: Optional callback for per-target status updates
                ("measuring", "cleaning", "done", "error").
            on_outcome: Optional callback fired after each target is cleaned.

        Returns:
            The run report with the measured total and every outcome.
        """
        start = time.monotonic()
        catalog = self.build_catalog()
        scan = accountant.scan_catalog(catalog, on_progress=on_progress)
        outcomes = cleaner.clean(catalog, on_progress=on_progress, on_outcome=on_outcome)
        report = RunReport(
            catalog=catalog,
            scan=scan,
            outcomes=outcomes,
            elapsed=time.monotonic() - start,
        )
        log.info(
            "Run finished: %d targets, %d failed, %d partial",
            len(catalog), len(report.failures), len(report.partials),
        )
        return report
