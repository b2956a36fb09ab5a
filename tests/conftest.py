"""Test configuration and fixtures."""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from dataverse_trace_client.logging import JsonFormatter

ENV_VARS = (
    "LOG_LEVEL",
    "DATAVERSE_CONFIG_PATH",
    "AZURE_CLI_EXECUTABLE",
    "AZURE_CLI_SHELL",
    "AZURE_CLI_LOOKUP_SHELL",
    "DATAVERSE_API_VERSION",
    "DATAVERSE_REQUEST_TIMEOUT",
)


def make_response(
    body: str,
    status_code: int = 200,
    url: str = "https://example.test/",
    content_type: str = "application/json",
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = "OK" if status_code < 400 else "Error"
    resp.headers["Content-Type"] = content_type
    resp.raw = io.BytesIO(body.encode("utf-8"))
    resp.url = url
    return resp


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run in an empty directory with none of the client's variables set."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_session() -> Callable[..., Mock]:
    """Build a session whose POSTs answer with the given bodies, in order."""

    def _factory(
        *bodies: str, status_code: int = 200, content_type: str = "application/json"
    ) -> Mock:
        session = Mock(spec=requests.Session)
        session.headers = {}
        session.post.side_effect = [
            make_response(b, status_code=status_code, content_type=content_type) for b in bodies
        ]
        return session

    return _factory


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Drop handlers installed by `configure_logging` once a test finishes."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, JsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def response_factory() -> Callable[..., requests.Response]:
    """Expose `make_response` for tests that need the response object itself."""
    return make_response
