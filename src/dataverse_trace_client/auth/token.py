"""Bearer token providers."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from dataverse_trace_client.auth.locator import ExecutableLocator
from dataverse_trace_client.errors import ExecutableNotFoundError

logger = logging.getLogger(__name__)


class TokenProvider(ABC):
    """Produce a bearer token for a resource URL."""

    @abstractmethod
    def get_token(self, resource: str) -> str:
        """Return an access token scoped to `resource`."""


class StaticTokenProvider(TokenProvider):
    """Return a token supplied up front (e.g. on the command line)."""

    def __init__(self, token: str) -> None:
        self._token = token

    def get_token(self, resource: str) -> str:
        logger.debug("Using supplied access token", extra={"resource": resource})
        return self._token.strip()


class AzureCliTokenProvider(TokenProvider):
    """Obtain a token by shelling out to `az account get-access-token`.

    The token is whatever the CLI prints on stdout, trimmed. A failing CLI
    that prints nothing yields an empty string; the API will then reject the
    calls that use it.
    """

    def __init__(
        self,
        locator: ExecutableLocator,
        *,
        executable: str = "az",
        shell: str = "pwsh",
    ) -> None:
        self._locator = locator
        self._executable = executable
        self._shell = shell

    def build_command(self, executable_name: str, resource: str) -> list[str]:
        return [
            self._shell,
            "-Command",
            f"{executable_name} account get-access-token --resource={resource} "
            "--query accessToken --output tsv",
        ]

    def get_token(self, resource: str) -> str:
        """Locate the CLI and request a token for `resource`.

        Raises:
            ExecutableNotFoundError: If the CLI cannot be located.
            OSError: If the shell cannot be launched.
        """
        located = self._locator.locate(self._executable)
        if not located:
            raise ExecutableNotFoundError(self._executable)

        executable_path = Path(located)
        logger.info(
            "Requesting access token from Azure CLI",
            extra={"executable": str(executable_path), "resource": resource},
        )
        completed = subprocess.run(
            self.build_command(executable_path.name, resource),
            cwd=str(executable_path.parent),
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
        if completed.returncode != 0:
            logger.warning(
                "Azure CLI exited with a non-zero status",
                extra={"returncode": completed.returncode},
            )
        return (completed.stdout or "").strip()
