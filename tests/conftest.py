"""
Pytest configuration and fixtures for all tests.
"""

import os
import pytest

# Set up test environment variables before importing any modules
os.environ.setdefault('ENVIRONMENT', 'test')
os.environ.setdefault('LOG_LEVEL', 'INFO')
os.environ.setdefault('MAX_REQUEST_SIZE', '1M')
os.environ.setdefault('CORS_ALLOWED_ORIGINS', 'http://localhost:3000')

from fastapi.testclient import TestClient


@pytest.fixture
def client():
    """FastAPI test client for the reference application."""
    from edgeutils.app import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
