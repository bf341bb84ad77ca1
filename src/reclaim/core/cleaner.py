"""Mutating cleanup pass, one handler per target kind."""

from __future__ import annotations

import logging
import os
import shutil
import stat
from pathlib import Path
from typing import Callable

from reclaim.models.clean_result import CleanOutcome, OutcomeStatus
from reclaim.models.target import Catalog, Target, TargetKind
from reclaim.utils import make_writable_and_retry

log = logging.getLogger(__name__)


def _lexists(path: Path) -> bool:
    return path.exists() or path.is_symlink()


def _unlink(path: Path) -> None:
    """Unlink a file, clearing the read-only attribute if that blocks it."""
    try:
        path.unlink()
    except PermissionError:
        if path.is_symlink():
            raise
        os.chmod(path, stat.S_IWRITE | stat.S_IREAD)
        path.unlink()


def _remove_path(path: Path) -> None:
    """Delete a file, link or whole directory tree. Links are never followed."""
    if path.is_dir() and not path.is_symlink() and not path.is_junction():
        shutil.rmtree(path, onexc=make_writable_and_retry)
    else:
        _unlink(path)


def _clear_contents(path: Path) -> list[str]:
    """Remove every direct child of *path*, returning one error per failure."""
    errors: list[str] = []
    if not path.is_dir() or path.is_symlink() or path.is_junction():
        try:
            _remove_path(path)
        except OSError as e:
            errors.append(f"{path}: {e}")
        except Exception as e:
            log.exception("Unexpected error removing %s", path)
            errors.append(f"{path}: {e}")
        return errors

    try:
        with os.scandir(path) as it:
            children = [Path(entry.path) for entry in it]
    except OSError as e:
        return [f"{path}: {e}"]

    for child in children:
        try:
            _remove_path(child)
        except OSError as e:
            errors.append(f"{child}: {e}")
        except Exception as e:
            log.exception("Unexpected error removing %s", child)
            errors.append(f"{child}: {e}")
    return errors


def _clean_recreate_directory(target: Target) -> CleanOutcome:
    path = target.path
    errors: list[str] = []
    existed = _lexists(path)

    if existed:
        errors = _clear_contents(path)

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        clear_failed = bool(errors)
        errors.append(f"{path}: {e}")
        return CleanOutcome(
            target=target,
            status=OutcomeStatus.FAILED,
            message="Could not re-create directory",
            errors=errors,
            clear_failed=clear_failed,
            recreate_failed=True,
        )

    if errors:
        return CleanOutcome(
            target=target,
            status=OutcomeStatus.PARTIAL,
            message=f"Re-created, {len(errors)} item(s) could not be removed",
            errors=errors,
            clear_failed=True,
        )
    return CleanOutcome(
        target=target,
        status=OutcomeStatus.SUCCESS,
        message="Cleared and re-created" if existed else "Created",
    )


def _clean_remove_only(target: Target) -> CleanOutcome:
    path = target.path
    if not _lexists(path):
        return CleanOutcome(target=target, status=OutcomeStatus.SKIPPED, message="Not present")
    try:
        _remove_path(path)
    except Exception as e:
        if not isinstance(e, OSError):
            log.exception("Unexpected error removing %s", path)
        return CleanOutcome(
            target=target,
            status=OutcomeStatus.FAILED,
            message="Could not remove",
            errors=[f"{path}: {e}"],
        )
    return CleanOutcome(target=target, status=OutcomeStatus.SUCCESS, message="Removed")


def _clean_single_file(target: Target) -> CleanOutcome:
    path = target.path
    if not _lexists(path):
        return CleanOutcome(target=target, status=OutcomeStatus.SKIPPED, message="Not present")
    try:
        _unlink(path)
    except OSError as e:
        return CleanOutcome(
            target=target,
            status=OutcomeStatus.FAILED,
            message="Could not delete file",
            errors=[f"{path}: {e}"],
        )
    return CleanOutcome(target=target, status=OutcomeStatus.SUCCESS, message="Deleted")


HANDLERS: dict[TargetKind, Callable[[Target], CleanOutcome]] = {
    TargetKind.RECREATE_DIRECTORY: _clean_recreate_directory,
    TargetKind.REMOVE_ONLY: _clean_remove_only,
    TargetKind.SINGLE_FILE: _clean_single_file,
}


def clean_target(target: Target) -> CleanOutcome:
    """Clean one target. Never raises; failures become the outcome."""
    try:
        outcome = HANDLERS[target.kind](target)
    except Exception:
        log.exception("Unexpected error while cleaning %s", target.path)
        outcome = CleanOutcome(
            target=target,
            status=OutcomeStatus.FAILED,
            message="Crashed during cleaning",
            errors=[f"{target.path}: unexpected error"],
        )

    match outcome.status:
        case OutcomeStatus.SUCCESS:
            log.info("%s: %s", target.path, outcome.message)
        case OutcomeStatus.SKIPPED:
            log.debug("%s: %s", target.path, outcome.message)
        case _:
            log.warning("%s: %s (%s)", target.path, outcome.message, "; ".join(outcome.errors))
    return outcome


def clean(
    catalog: Catalog,
    on_progress: Callable[[str, str], None] | None = None,
    on_outcome: Callable[[CleanOutcome], None] | None = None,
) -> list[CleanOutcome]:
    """Clean every target in catalog order, continuing past failures."""
    outcomes: list[CleanOutcome] = []
    for target in catalog:
        if on_progress:
            on_progress(target.display_name, "cleaning")
        outcome = clean_target(target)
        outcomes.append(outcome)
        if on_outcome:
            on_outcome(outcome)
        if on_progress:
            on_progress(target.display_name, "done" if outcome.ok else "error")
    return outcomes
