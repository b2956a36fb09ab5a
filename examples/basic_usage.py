#!/usr/bin/env python3
"""Programmatic trace chain example.

This demonstrates using the client components directly:

* load settings from `.env` and the environment from `config.json`
* obtain a token from the Azure CLI
* post the parent/child/grandchild telemetry calls and print the chain

The Custom API name is passed as an argument (not read from `config.json`).
"""

from __future__ import annotations

import argparse
from typing import Sequence

from dataverse_trace_client.auth import AzureCliTokenProvider, select_locator
from dataverse_trace_client.config import ClientSettings, load_config
from dataverse_trace_client.dataverse import DataverseClient
from dataverse_trace_client.logging import configure_logging
from dataverse_trace_client.workflow import TraceWorkflow


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the telemetry chain (programmatic example).")
    parser.add_argument("--api", required=True, help="Custom API name, e.g. contoso_Log")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = ClientSettings()
    configure_logging(settings.log_level)

    config = load_config(settings.config_path).model_copy(
        update={"custom_api_name": args.api, "entity_name": ""}
    )
    token = AzureCliTokenProvider(select_locator()).get_token(config.environment_url)

    with DataverseClient(environment_url=config.environment_url, token=token) as client:
        chain = TraceWorkflow(client=client, token=token, echo=lambda _line: None).run(config)

    print(f"parent:     {chain.parent}")
    print(f"child:      {chain.child}")
    print(f"grandchild: {chain.grandchild}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
