"""Dataverse Web API client.

This intentionally wraps `requests` to keep HTTP calls out of the workflow and make
tests easy.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from dataverse_trace_client.models import EntityRecord, TelemetryEvent

logger = logging.getLogger(__name__)

TRACE_PARENT_FIELD = "TraceParent"


def _parse_json_object(text: str) -> dict[str, Any] | None:
    """Parse `text` as a JSON object, returning None when it is not one."""

    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed


def interpret_response(body: str) -> str:
    """Extract the trace parent from a response body.

    Only bodies starting with `{` are parsed. When the parsed object carries a
    string or scalar `TraceParent` that value is returned as text (numbers and
    booleans rendered as JSON); every other body (malformed JSON, a null or
    structured `TraceParent` included) is returned unchanged.
    """

    if not body.startswith("{"):
        return body

    parsed = _parse_json_object(body)
    if parsed is None:
        logger.debug("Response looked like JSON but did not parse; using raw text")
        return body

    trace_parent = parsed.get(TRACE_PARENT_FIELD)
    if isinstance(trace_parent, str):
        return trace_parent
    if isinstance(trace_parent, (bool, int, float)):
        return json.dumps(trace_parent)
    return body


class DataverseClient:
    """Small wrapper around a `requests.Session` for the calls the workflow makes."""

    def __init__(
        self,
        *,
        environment_url: str,
        token: str,
        api_version: str = "9.0",
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._environment_url = environment_url
        self._api_version = api_version
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
                "User-Agent": "dataverse-trace-client",
            }
        )

    @property
    def environment_url(self) -> str:
        return self._environment_url

    def api_url(self, name: str) -> str:
        """Return the Web API URL for a Custom API or entity set."""

        # environmentUrl is expected to end with a slash already.
        return f"{self._environment_url}api/data/v{self._api_version}/{name}"

    def post_json(self, url: str, body: dict[str, Any], *, tag: str | None = None) -> str:
        """POST `body` to `url` and return the interpreted response.

        Raises:
            requests.RequestException: On malformed URLs, connection failures or
                non-2xx responses.
        """
        params = {"tag": tag} if tag is not None else None
        logger.info("POST request", extra={"url": url, "tag": tag})

        with self._session.post(
            url,
            data=json.dumps(body),
            params=params,
            timeout=self._timeout,
        ) as resp:
            resp.raise_for_status()
            # Bodies are always UTF-8; undecodable bytes become U+FFFD.
            text = resp.content.decode("utf-8", errors="replace")

        logger.debug(
            "POST response received",
            extra={"url": url, "status_code": resp.status_code, "length": len(text)},
        )
        return interpret_response(text)

    def post_telemetry(
        self,
        name: str,
        source: str,
        stage: str,
        level: str,
        message: str,
        trace_parent: str | None = None,
        *,
        tag: str | None = None,
    ) -> str:
        """Post a telemetry event to the Custom API `name`."""

        event = TelemetryEvent(
            source=source,
            stage=stage,
            level=level,
            message=message,
            trace_parent=trace_parent,
        )
        return self.post_json(self.api_url(name), event.to_payload(), tag=tag)

    def create_entity(
        self, entity_name: str, record: EntityRecord, *, tag: str | None = None
    ) -> str:
        """Create a row in the entity set `entity_name`."""

        return self.post_json(self.api_url(entity_name), record.to_payload(), tag=tag)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> DataverseClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
