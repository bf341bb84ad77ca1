"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from reclaim.core.locations import Locations
from reclaim.models.target import Target, TargetKind


def fake_locations(base: Path) -> Locations:
    """Lay out every location beneath *base*, mirroring a Windows drive."""
    user_profile = base / "Users" / "user"
    local_app_data = user_profile / "AppData" / "Local"
    return Locations(
        system_root=base / "Windows",
        system_drive=base,
        user_profile=user_profile,
        local_app_data=local_app_data,
        temp=local_app_data / "Temp",
        program_data=base / "ProgramData",
    )


def _write_file(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def write_file():
    """Helper that writes *size* bytes to a path, creating parent directories."""
    return _write_file


@pytest.fixture
def locations(tmp_path):
    """Locations rooted in an empty fake drive."""
    drive = tmp_path / "drive"
    drive.mkdir()
    return fake_locations(drive)


@pytest.fixture
def populated_dir(tmp_path):
    """A recreatable directory holding 3 files (5,000,000 bytes) in nested folders."""
    root = tmp_path / "cache"
    _write_file(root / "a.bin", 2_000_000)
    _write_file(root / "sub" / "b.bin", 2_000_000)
    _write_file(root / "sub" / "deeper" / ".hidden", 1_000_000)
    return Target(root, TargetKind.RECREATE_DIRECTORY, "Populated cache")
