"""Shared fixtures for Word Counter HTTP integration tests."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add src to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from word_counter.config import WordCounterSettings
from word_counter.http_server import create_app


@pytest.fixture
def settings():
    """Settings for an in-process test server."""
    return WordCounterSettings(_env_file=None, environment="production")


@pytest.fixture
def client(settings):
    """TestClient running the app, including its lifespan."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def upload():
    """Callable that POSTs a file to the word count endpoint."""

    def _upload(client, data: bytes, filename: str, content_type: str = "text/plain"):
        return client.post(
            "/wordcount/file",
            files={"file": (filename, data, content_type)},
        )

    return _upload
