"""CLI entrypoint for the trace client."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from dataverse_trace_client import __version__
from dataverse_trace_client.auth.locator import select_locator
from dataverse_trace_client.auth.token import (
    AzureCliTokenProvider,
    StaticTokenProvider,
    TokenProvider,
)
from dataverse_trace_client.config import ClientSettings, TelemetryConfig, load_config
from dataverse_trace_client.dataverse.client import DataverseClient
from dataverse_trace_client.errors import ConfigurationError
from dataverse_trace_client.logging import configure_logging
from dataverse_trace_client.workflow import TraceWorkflow

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dataverse-trace",
        description="Post a chain of correlated telemetry calls to a Dataverse environment",
    )
    parser.add_argument(
        "--version", action="version", version=f"dataverse-trace-client {__version__}"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the JSON config file (defaults to DATAVERSE_CONFIG_PATH or config.json)",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Dataverse environment URL; overrides environmentUrl from the config file",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="OAuth access token to use instead of asking the Azure CLI",
    )
    return parser


def _load_telemetry_config(settings: ClientSettings, args: argparse.Namespace) -> TelemetryConfig:
    config_path = Path(args.config) if args.config else settings.config_path
    config = load_config(config_path)
    if args.url:
        config = config.model_copy(update={"environment_url": args.url})
    if not config.environment_url:
        raise ConfigurationError(f"environmentUrl is missing from {config_path}")
    return config


def _token_provider(settings: ClientSettings, args: argparse.Namespace) -> TokenProvider:
    if args.token:
        return StaticTokenProvider(args.token)
    return AzureCliTokenProvider(
        select_locator(shell=settings.lookup_shell),
        executable=settings.cli_executable,
        shell=settings.cli_shell,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = ClientSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        config = _load_telemetry_config(settings, args)
    except (OSError, ValidationError, ConfigurationError) as e:
        logger.error("Configuration error", extra={"error": str(e)})
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    try:
        token = _token_provider(settings, args).get_token(config.environment_url)
        with DataverseClient(
            environment_url=config.environment_url,
            token=token,
            api_version=settings.api_version,
            timeout=settings.request_timeout,
        ) as client:
            chain = TraceWorkflow(client=client, token=token).run(config)
        logger.info(
            "Workflow finished",
            extra={
                "trace_parent": chain.grandchild,
                "entity_created": chain.entity_response is not None,
            },
        )
        return 0

    except ConfigurationError as e:
        logger.error("Configuration error", extra={"error": str(e)})
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    except Exception:
        logger.exception("Workflow failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
