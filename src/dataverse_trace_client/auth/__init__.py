"""Token acquisition via the Azure CLI."""

from dataverse_trace_client.auth.locator import (
    ExecutableLocator,
    PathScanLocator,
    PowerShellLocator,
    select_locator,
)
from dataverse_trace_client.auth.token import (
    AzureCliTokenProvider,
    StaticTokenProvider,
    TokenProvider,
)

__all__ = [
    "AzureCliTokenProvider",
    "ExecutableLocator",
    "PathScanLocator",
    "PowerShellLocator",
    "StaticTokenProvider",
    "TokenProvider",
    "select_locator",
]
