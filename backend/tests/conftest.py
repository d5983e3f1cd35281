"""
Snippetbox: Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── test_client: HTTPX AsyncClient wired to the app through ASGITransport
    └── occupied_port: a localhost port with a live listener already on it
"""

import os
import socket

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Requests are routed straight into the ASGI app; no server or socket is
    involved.

    Usage:
        async def test_home(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from snippetbox.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def occupied_port():
    """
    Provides a port on 127.0.0.1 that is already bound and listening.

    Yields the port number; the blocking socket is closed after the test.
    """
    blocker = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    blocker.bind(("127.0.0.1", 0))
    blocker.listen(1)
    try:
        yield blocker.getsockname()[1]
    finally:
        blocker.close()
