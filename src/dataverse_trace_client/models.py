"""Request bodies and workflow results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TelemetryEvent(BaseModel):
    """Body posted to the logging Custom API.

    `TraceParent` is left out of the payload when it is not set.
    """

    source: str = Field(alias="Source")
    stage: str = Field(alias="Stage")
    level: str = Field(alias="Level")
    message: str = Field(alias="Message")
    trace_parent: str | None = Field(default=None, alias="TraceParent")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class EntityRecord(BaseModel):
    """Body posted when creating a sample entity row."""

    name: str
    description: str

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


@dataclass(frozen=True, slots=True)
class TraceChain:
    """Values returned by one run of the trace workflow.

    Each field is None when its step was skipped.
    """

    parent: str | None = None
    child: str | None = None
    grandchild: str | None = None
    entity_response: str | None = None
