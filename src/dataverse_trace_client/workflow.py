"""The trace-parent propagation workflow.

Calls are made in a fixed order:

1. parent: telemetry posted to the Custom API
2. child: telemetry posted with `?tag=<parent>`
3. grandchild: telemetry carrying the child's value in its `TraceParent` field
4. entity: a sample row created with `?tag=<grandchild>`

Each step is skipped when a value it needs is empty.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from dataverse_trace_client.config import TelemetryConfig
from dataverse_trace_client.dataverse.client import DataverseClient
from dataverse_trace_client.models import EntityRecord, TraceChain

logger = logging.getLogger(__name__)

SOURCE = "Sample"
LEVEL = "Information"


class TraceWorkflow:
    """Run the telemetry call chain against one Dataverse environment."""

    def __init__(
        self,
        *,
        client: DataverseClient,
        token: str,
        echo: Callable[[str], None] = print,
    ) -> None:
        self._client = client
        self._token = token
        self._echo = echo

    def run(self, config: TelemetryConfig) -> TraceChain:
        if not self._token:
            logger.warning("Access token is empty; skipping all API calls")
            return TraceChain()

        parent = child = grandchild = None
        if config.custom_api_name:
            parent, child, grandchild = self._post_telemetry_chain(config.custom_api_name)
        else:
            logger.info("No custom API configured; skipping telemetry calls")

        entity_response = None
        if config.entity_name and grandchild:
            entity_response = self._create_entity(config.entity_name, grandchild)
        elif config.entity_name:
            logger.info(
                "No trace parent available; skipping entity creation",
                extra={"entity_name": config.entity_name},
            )

        return TraceChain(
            parent=parent,
            child=child,
            grandchild=grandchild,
            entity_response=entity_response,
        )

    def _post_telemetry_chain(self, api_name: str) -> tuple[str, str, str]:
        self._echo(f"Custom API Name: {api_name}")

        parent = self._client.post_telemetry(api_name, SOURCE, "1", LEVEL, "Some data")
        self._echo(f"TraceParent: {parent}")

        child = self._client.post_telemetry(
            api_name, SOURCE, "2", LEVEL, "Some more data", tag=parent
        )
        self._echo(f"TraceParent (Child - Via Tag): {child}")

        grandchild = self._client.post_telemetry(
            api_name, SOURCE, "3", LEVEL, "Some further data", trace_parent=child
        )
        self._echo(f"TraceParent (Grandchild via Custom API Message): {grandchild}")

        return parent, child, grandchild

    def _create_entity(self, entity_name: str, trace_parent: str) -> str:
        self._echo(f"Entity Name: {entity_name}")
        record = EntityRecord(name=f"Test {entity_name}", description="Sample data")
        response = self._client.create_entity(entity_name, record, tag=trace_parent)
        self._echo(response)
        return response
