"""Read-only accounting pass: how many bytes the catalog holds."""

from __future__ import annotations

import logging
import os
from typing import Callable

from reclaim.models.scan_result import ScanResult, TargetSize
from reclaim.models.target import Catalog, Target, TargetKind
from reclaim.utils import dir_info

log = logging.getLogger(__name__)


def measure_target(target: Target, warnings: list[str] | None = None) -> TargetSize:
    """Measure a single target. MUST NOT modify anything.

    Missing paths measure zero. Unreadable entries are skipped and, when
    *warnings* is given, described there.
    """

    def _on_error(path: str, exc: OSError) -> None:
        log.warning("Cannot measure %s: %s", path, exc)
        if warnings is not None:
            warnings.append(f"{path}: {exc}")

    path = target.path
    try:
        if path.is_symlink() or path.is_junction():
            return TargetSize(target=target, exists=True)
        if not path.exists():
            return TargetSize(target=target)
        if target.kind is TargetKind.SINGLE_FILE or not path.is_dir():
            if not path.is_file():
                return TargetSize(target=target, exists=True)
            return TargetSize(target=target, size_bytes=path.stat().st_size, file_count=1, exists=True)
    except OSError as e:
        _on_error(os.fspath(path), e)
        return TargetSize(target=target)

    size, count = dir_info(path, on_error=_on_error)
    return TargetSize(target=target, size_bytes=size, file_count=count, exists=True)


def scan_catalog(
    catalog: Catalog,
    on_progress: Callable[[str, str], None] | None = None,
) -> ScanResult:
    """Measure every target in catalog order and sum the sizes."""
    result = ScanResult()
    for target in catalog:
        if on_progress:
            on_progress(target.display_name, "measuring")
        entry = measure_target(target, result.warnings)
        result.entries.append(entry)
        result.total_bytes += entry.size_bytes
        if entry.size_bytes:
            log.debug("%s: %d bytes in %d files", target.path, entry.size_bytes, entry.file_count)
    log.info("Accounting pass: %d bytes across %d targets", result.total_bytes, len(catalog))
    return result


def measure_total(catalog: Catalog) -> int:
    """Total size in bytes of everything reachable from the catalog."""
    return scan_catalog(catalog).total_bytes
