"""Dataverse trace client.

Provides a small, local-first CLI and library that:
- loads `config.json` describing a Dataverse environment
- obtains a bearer token from the Azure CLI
- posts a chain of telemetry calls, threading the returned `TraceParent`
"""

__version__ = "0.1.0"

from dataverse_trace_client.config import ClientSettings, TelemetryConfig, load_config

__all__ = ["__version__", "ClientSettings", "TelemetryConfig", "load_config"]
