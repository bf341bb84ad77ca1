"""The fixed list of locations Reclaim operates on."""

from __future__ import annotations

import logging
from pathlib import Path

from reclaim.core.locations import Locations
from reclaim.models.target import Catalog, Target, TargetKind

log = logging.getLogger(__name__)

FIREFOX_CACHE_DIR = "cache2"

# (vendor label, path below LOCALAPPDATA) of each browser's default-profile HTTP cache
_BROWSER_CACHES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Google Chrome", ("Google", "Chrome", "User Data", "Default", "Cache")),
    ("Microsoft Edge", ("Microsoft", "Edge", "User Data", "Default", "Cache")),
    ("Brave", ("BraveSoftware", "Brave-Browser", "User Data", "Default", "Cache")),
    ("Opera", ("Opera Software", "Opera Stable", "Cache")),
)


def _recreate(path: Path, label: str) -> Target:
    return Target(path=path, kind=TargetKind.RECREATE_DIRECTORY, label=label)


def static_recreatable_targets(loc: Locations) -> list[Target]:
    """Directories whose contents are cleared and which are re-created empty."""
    targets = [
        _recreate(loc.system_root / "Prefetch", "Prefetch cache"),
        _recreate(loc.system_root / "Temp", "System temp"),
        _recreate(loc.temp, "User temp"),
        _recreate(loc.local_app_data / "Temp", "Local temp"),
    ]
    for vendor, parts in _BROWSER_CACHES:
        targets.append(_recreate(loc.local_app_data.joinpath(*parts), f"{vendor} cache"))
    targets += [
        _recreate(loc.system_root / "SoftwareDistribution" / "Download", "Windows Update downloads"),
        _recreate(loc.program_data / "Microsoft" / "Windows" / "WER", "Windows Error Reporting"),
        _recreate(
            loc.system_root.joinpath(
                "ServiceProfiles", "NetworkService", "AppData", "Local",
                "Microsoft", "Windows", "DeliveryOptimization", "Cache",
            ),
            "Delivery Optimization cache",
        ),
        _recreate(loc.system_root / "Logs" / "CBS", "Component servicing logs"),
        _recreate(loc.local_app_data / "Microsoft" / "Windows" / "Explorer", "Explorer thumbnail cache"),
    ]
    return targets


def firefox_profiles_root(loc: Locations) -> Path:
    return loc.local_app_data / "Mozilla" / "Firefox" / "Profiles"


def discover_profile_caches(profiles_root: Path) -> list[Target]:
    """One ``cache2`` target per profile directory under *profiles_root*.

    A missing or unreadable root yields no targets. Order follows the
    directory listing and is not stable across platforms.
    """
    targets: list[Target] = []
    try:
        children = list(profiles_root.iterdir())
    except OSError:
        log.debug("Cannot read browser profiles: %s", profiles_root)
        return targets

    for child in children:
        try:
            if not child.is_dir():
                continue
        except OSError:
            log.debug("Cannot access: %s", child)
            continue
        targets.append(_recreate(child / FIREFOX_CACHE_DIR, f"Firefox cache ({child.name})"))
    return targets


def removable_targets(loc: Locations) -> list[Target]:
    """Paths deleted outright and never re-created."""
    return [
        Target(loc.system_drive / "Windows.old", TargetKind.REMOVE_ONLY, "Previous Windows installation"),
        Target(loc.system_root / "Minidump", TargetKind.REMOVE_ONLY, "Crash minidumps"),
    ]


def memory_dump_target(loc: Locations) -> Target:
    return Target(loc.system_root / "MEMORY.DMP", TargetKind.SINGLE_FILE, "Kernel memory dump")


def build_catalog(loc: Locations) -> Catalog:
    """Build the ordered target list for one run.

    Static recreatable directories come first, then the discovered browser
    profile caches, then the remove-only paths and finally the memory dump.
    Nothing is checked for existence here.
    """
    catalog = (
        *static_recreatable_targets(loc),
        *discover_profile_caches(firefox_profiles_root(loc)),
        *removable_targets(loc),
        memory_dump_target(loc),
    )
    log.debug("Catalog built with %d targets", len(catalog))
    return catalog
