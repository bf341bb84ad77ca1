"""Reclaim data models."""

from reclaim.models.target import Catalog, Target, TargetKind
from reclaim.models.scan_result import ScanResult, TargetSize
from reclaim.models.clean_result import CleanOutcome, OutcomeStatus
from reclaim.models.run_report import RunReport

__all__ = [
    "Catalog",
    "CleanOutcome",
    "OutcomeStatus",
    "RunReport",
    "ScanResult",
    "Target",
    "TargetKind",
    "TargetSize",
]
