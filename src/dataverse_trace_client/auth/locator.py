"""Strategies for finding the Azure CLI executable.

Two search behaviours exist:
- Windows: ask PowerShell's command resolution (`Get-Command`) for the path
- Linux/macOS: walk the `PATH` directories in order
"""

from __future__ import annotations

import logging
import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class ExecutableLocator(ABC):
    """Find an executable by file name."""

    @abstractmethod
    def locate(self, executable: str) -> str | None:
        """Return the full path of `executable`, or None if it is not found."""


class PowerShellLocator(ExecutableLocator):
    """Resolve the executable through `Get-Command` in PowerShell."""

    def __init__(self, shell: str = "pwsh.exe") -> None:
        self._shell = shell

    def locate(self, executable: str) -> str | None:
        command = f"Get-Command {executable} | Select-Object -ExpandProperty Source"
        try:
            completed = subprocess.run(
                [self._shell, "-Command", command],
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError:
            # A missing shell counts as "not found" rather than a crash.
            logger.exception(
                "Failed to query command resolution",
                extra={"shell": self._shell, "executable": executable},
            )
            return None

        output = (completed.stdout or "").strip()
        if not output:
            logger.debug("Executable not resolved", extra={"executable": executable})
            return None
        return output


class PathScanLocator(ExecutableLocator):
    """Scan each `PATH` directory, in listed order, for the executable."""

    def __init__(self, path: str | None = None) -> None:
        # None means "read PATH at lookup time".
        self._path = path

    def locate(self, executable: str) -> str | None:
        search_path = self._path if self._path is not None else os.environ.get("PATH", "")
        for directory in search_path.split(":"):
            if not directory:
                continue
            candidate = Path(directory, executable)
            if candidate.exists():
                logger.debug("Found executable", extra={"path": str(candidate)})
                return str(candidate)
        return None


def select_locator(
    platform_name: str | None = None, *, shell: str = "pwsh.exe"
) -> ExecutableLocator:
    """Pick the locator for the running platform.

    `platform_name` takes the values of `os.name`; it defaults to the current one.
    `shell` is the PowerShell binary used for the Windows lookup.
    """

    name = platform_name if platform_name is not None else os.name
    if name == "nt":
        return PowerShellLocator(shell)
    return PathScanLocator()
