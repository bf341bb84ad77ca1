"""Cleanup target definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class TargetKind(str, Enum):
    """How the cleaner treats a target path."""

    RECREATE_DIRECTORY = "recreate_directory"
    """Contents deleted, directory re-created empty."""

    REMOVE_ONLY = "remove_only"
    """Deleted wholesale and never re-created."""

    SINGLE_FILE = "single_file"
    """A single file, deleted if present."""


@dataclass(frozen=True, slots=True)
class Target:
    """One filesystem location the cleaner acts on."""

    path: Path
    kind: TargetKind
    label: str = ""

    @property
    def display_name(self) -> str:
        return self.label or str(self.path)


Catalog = tuple[Target, ...]
