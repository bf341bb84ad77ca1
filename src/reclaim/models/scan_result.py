"""Scan result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

from reclaim.models.target import Target


@dataclass(slots=True)
class TargetSize:
    """Measured size of a single target."""

    target: Target
    size_bytes: int = 0
    file_count: int = 0
    exists: bool = False


@dataclass(slots=True)
class ScanResult:
    """Result of the accounting pass over a whole catalog."""

    entries: list[TargetSize] = field(default_factory=list)
    total_bytes: int = 0
    warnings: list[str] = field(default_factory=list)
