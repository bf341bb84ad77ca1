"""Shared utility functions."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Callable


_GIB = 1 << 30

ErrorCallback = Callable[[str, OSError], None]


def dir_info(path: Path | str, on_error: ErrorCallback | None = None) -> tuple[int, int]:
    """Calculate total size and file count of a directory tree.

    Walks with ``os.scandir`` so hidden and system files are included.
    Symbolic links and junctions are neither followed nor counted.
    Entries that cannot be stat'ed and directories that cannot be listed
    contribute nothing; they are reported through *on_error* and the walk
    carries on.

    Returns:
        (total_bytes, file_count) tuple.
    """
    total = 0
    count = 0
    stack: list[Path | str] = [path]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        if entry.is_symlink() or entry.is_junction():
                            continue
                        if entry.is_file(follow_symlinks=False):
                            total += entry.stat(follow_symlinks=False).st_size
                            count += 1
                        elif entry.is_dir(follow_symlinks=False):
                            stack.append(entry.path)
                    except OSError as e:
                        if on_error:
                            on_error(entry.path, e)
        except OSError as e:
            if on_error:
                on_error(os.fspath(current), e)
    return total, count


_RETRYABLE = (os.unlink, os.remove, os.rmdir)


def make_writable_and_retry(func: Callable, path: str, exc: BaseException) -> None:
    """``shutil.rmtree`` error hook that clears the read-only bit and retries once.

    Only single-argument removals are retried. Failures to open or list a
    directory are re-raised unchanged.
    """
    if isinstance(exc, FileNotFoundError):
        return
    if not isinstance(exc, PermissionError) or func not in _RETRYABLE:
        raise exc
    mode = stat.S_IWRITE | stat.S_IREAD
    if os.path.isdir(path) and not os.path.islink(path):
        mode |= stat.S_IEXEC
    os.chmod(path, mode)
    func(path)


def bytes_to_gb(size_bytes: int) -> float:
    """Convert a byte count to gigabytes (2**30), rounded to 2 decimals."""
    return round(size_bytes / _GIB, 2)


def format_gb(size_bytes: int) -> str:
    """Format a byte count as a 2-decimal gigabyte figure, e.g. ``'1.40'``."""
    return f"{bytes_to_gb(size_bytes):.2f}"


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a human-readable string."""
    if size_bytes < 0:
        return f"-{bytes_to_human(-size_bytes)}"
    if size_bytes == 0:
        return "0 B"

    units = ("B", "KB", "MB", "GB", "TB")
    value = float(size_bytes)
    for unit in units[:-1]:
        if abs(value) < 1024:
            return f"{value:.1f} {unit}" if unit != "B" else f"{int(value)} B"
        value /= 1024
    return f"{value:.1f} {units[-1]}"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
