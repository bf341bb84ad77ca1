"""Resolution of the Windows base locations the catalog is built from."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

log = logging.getLogger(__name__)

_DEFAULT_SYSTEM_ROOT = r"C:\Windows"
_DEFAULT_SYSTEM_DRIVE = "C:"


@dataclass(frozen=True, slots=True)
class Locations:
    """Absolute paths of the symbolic platform locations.

    Treated as opaque by the catalog; tests build one directly on top of
    a temporary directory.
    """

    system_root: Path
    system_drive: Path
    user_profile: Path
    local_app_data: Path
    temp: Path
    program_data: Path

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> Locations:
        """Resolve locations from environment variables, with Windows defaults."""
        env = os.environ if environ is None else environ

        system_root = Path(env.get("SYSTEMROOT") or _DEFAULT_SYSTEM_ROOT)
        system_drive = _drive_root(env.get("SYSTEMDRIVE") or _DEFAULT_SYSTEM_DRIVE)
        user_profile = Path(env.get("USERPROFILE") or Path.home())
        local_app_data = Path(env.get("LOCALAPPDATA") or user_profile / "AppData" / "Local")
        temp = Path(env.get("TEMP") or env.get("TMP") or tempfile.gettempdir())
        program_data = Path(env.get("PROGRAMDATA") or system_drive / "ProgramData")

        locations = cls(
            system_root=system_root,
            system_drive=system_drive,
            user_profile=user_profile,
            local_app_data=local_app_data,
            temp=temp,
            program_data=program_data,
        )
        log.debug("Resolved locations: %s", locations)
        return locations


def _drive_root(drive: str) -> Path:
    """Turn ``C:`` into ``C:\\`` so joins are not drive-relative."""
    if drive.endswith(":"):
        return Path(drive + os.sep)
    return Path(drive)
