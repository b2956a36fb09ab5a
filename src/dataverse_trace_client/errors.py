"""Exception types raised by the trace client."""

from __future__ import annotations


class DataverseTraceError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(DataverseTraceError):
    """Raised when the local configuration cannot be used."""


class ExecutableNotFoundError(ConfigurationError):
    """Raised when the Azure CLI executable cannot be located."""

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__("Azure CLI executable not found")
