"""Pytest configuration and fixtures for the transcript server tests."""

import os
import sys
import logging
import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient

# Add src/ and tests/ to path
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.join(ROOT_DIR, 'src'))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Set test environment variables before importing app
os.environ["ENVIRONMENT"] = "test"
os.environ["API_DEBUG"] = "true"

from transcript_server.app import create_app
from transcript_server.config import APIConfig, get_api_config
from transcript_server.core.models import CaptionSegment
from mocks.fake_fetcher import FakeTranscriptFetcher


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests going through the HTTP application")


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Environment changes must be visible to every test."""
    get_api_config.cache_clear()
    yield
    get_api_config.cache_clear()


@pytest.fixture
def sample_segments():
    """Two segments at 1s and 2m05s."""
    return [
        CaptionSegment(text="Hello", offset_ms=1000, duration_ms=1500),
        CaptionSegment(text="world", offset_ms=125000, duration_ms=2000),
    ]


@pytest.fixture
def polish_segments():
    return [
        CaptionSegment(text="Dzień dobry", offset_ms=0, duration_ms=1800),
        CaptionSegment(text="świecie", offset_ms=1800, duration_ms=900),
    ]


@pytest.fixture
def fake_fetcher():
    """Fetcher with no transcripts; tests register responses per language."""
    return FakeTranscriptFetcher()


@pytest.fixture
def mock_logger():
    return Mock(spec=logging.Logger)


@pytest.fixture
def full_config():
    return APIConfig(variant="full", cors_origins=["http://localhost:3000"])


@pytest.fixture
def minimal_config():
    return APIConfig(variant="minimal", cors_origins=["http://localhost:3000"])


@pytest.fixture
def app(full_config, fake_fetcher):
    """Full-variant application backed by the fake fetcher."""
    return create_app(config=full_config, fetcher=fake_fetcher)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def minimal_app(minimal_config, fake_fetcher):
    return create_app(config=minimal_config, fetcher=fake_fetcher)


@pytest.fixture
def minimal_client(minimal_app):
    return TestClient(minimal_app)
