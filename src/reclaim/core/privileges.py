"""Administrator detection and elevated relaunch."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys

log = logging.getLogger(__name__)

# Timeout for the pkexec subprocess (seconds).
_PKEXEC_TIMEOUT = 3600

# ShellExecuteW returns a value greater than 32 on success.
_SHELL_EXECUTE_OK = 32


class PrivilegeError(Exception):
    """Raised when privilege escalation fails."""


def is_windows() -> bool:
    return sys.platform == "win32"


def is_admin() -> bool:
    """Check if the current process has administrator rights."""
    if is_windows():
        import ctypes

        try:
            return bool(ctypes.windll.shell32.IsUserAnAdmin())
        except OSError:
            log.debug("IsUserAnAdmin failed", exc_info=True)
            return False
    return os.geteuid() == 0


def find_reclaim_executable() -> str | None:
    """Find the reclaim CLI executable on PATH."""
    return shutil.which("reclaim")


def pkexec_available() -> bool:
    """Check if pkexec is available on the system."""
    return shutil.which("pkexec") is not None


def relaunch_elevated(args: list[str]) -> int:
    """Run reclaim again with administrator rights.

    On Windows the UAC prompt is raised through ``ShellExecuteW`` with the
    ``runas`` verb; the elevated copy runs in its own console, so this
    returns 0 as soon as it has been started. Elsewhere ``pkexec`` is used
    and the child's exit code is returned.

    Raises:
        PrivilegeError: If elevation is refused, dismissed or unavailable.
    """
    if is_windows():
        return _relaunch_runas(args)
    return _relaunch_pkexec(args)


def _relaunch_runas(args: list[str]) -> int:
    import ctypes

    params = subprocess.list2cmdline(["-m", "reclaim", *args])
    log.debug("ShellExecuteW runas %s %s", sys.executable, params)
    rc = ctypes.windll.shell32.ShellExecuteW(None, "runas", sys.executable, params, None, 1)
    if rc <= _SHELL_EXECUTE_OK:
        raise PrivilegeError(f"Elevation was refused or failed (ShellExecute code {rc})")
    return 0


def _relaunch_pkexec(args: list[str]) -> int:
    if not pkexec_available():
        raise PrivilegeError("Administrator rights required and pkexec is not available")

    reclaim_exe = find_reclaim_executable()
    if reclaim_exe is None:
        raise PrivilegeError("Could not find the 'reclaim' executable on PATH")

    try:
        proc = subprocess.run(["pkexec", reclaim_exe, *args], timeout=_PKEXEC_TIMEOUT)
    except subprocess.TimeoutExpired:
        raise PrivilegeError("Elevated run timed out after 1 hour")

    if proc.returncode == 126:
        raise PrivilegeError("Authentication dismissed by user")
    if proc.returncode == 127:
        raise PrivilegeError("Authentication denied")
    return proc.returncode
