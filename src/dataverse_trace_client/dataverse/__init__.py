"""Dataverse Web API access."""

from dataverse_trace_client.dataverse.client import DataverseClient, interpret_response

__all__ = ["DataverseClient", "interpret_response"]
