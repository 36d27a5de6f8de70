"""Shared pytest fixtures.

Environment variables are set before any app import so Settings picks them up.
"""
import os

os.environ["APP_ENV"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import structlog
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    # Not used as a context manager, so the lifespan (and setup_logging)
    # does not run and log capture keeps working.
    return TestClient(app)
