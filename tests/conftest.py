"""Pytest configuration for column_extractor tests.

This module provides:
- Isolated ``DATA_DIR``/``LOGS_DIR`` so test runs leave the project tree clean
- Fixtures for in-memory ``.xlsx`` payloads
- HTTP clients backed by ``httpx.MockTransport`` (no real network)
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Iterator

import httpx
import pytest

# Must happen before column_extractor.config is imported
_TEST_ROOT = tempfile.mkdtemp(prefix="column_extractor_tests_")
os.environ.setdefault("DATA_DIR", os.path.join(_TEST_ROOT, "data"))
os.environ.setdefault("LOGS_DIR", os.path.join(_TEST_ROOT, "logs"))

from tests.workbooks import build_xlsx  # noqa: E402


@pytest.fixture
def fruit_xlsx() -> bytes:
    """Sheet with values in A and occurrence counts in B."""
    return build_xlsx({"Fruits": [["Apple", 5], ["banana", 1], ["Apple", 5]]})


def _handler(content: bytes, status: int) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, content=content)

    return handler


@pytest.fixture
def serve() -> Iterator[Callable[..., httpx.Client]]:
    """Build sync clients whose every request gets ``content`` back with ``status``."""
    clients: list[httpx.Client] = []

    def _serve(content: bytes = b"", status: int = 200) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(_handler(content, status)))
        clients.append(client)
        return client

    yield _serve

    for client in clients:
        client.close()


@pytest.fixture
def serve_async() -> Callable[..., httpx.AsyncClient]:
    """Async counterpart of :func:`serve`; callers close the client."""

    def _serve(content: bytes = b"", status: int = 200) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(_handler(content, status)))

    return _serve
