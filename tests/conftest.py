"""Pytest configuration and fixtures

Provides a test client bound to the application and a loguru capture
fixture for asserting on log output.
"""

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from hello_api.main import app


@pytest.fixture
def client():
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def log_messages():
    """
    Collect every message loguru emits while the test runs.

    Returns:
        List of formatted log messages
    """
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
