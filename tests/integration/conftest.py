"""Shared fixtures for integration tests against a live controller."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from dotenv import load_dotenv

from pythermia.config import SessionConfig
from pythermia.session import HeatpumpSession

# Load .env file before running tests
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

THERMIA_HOST = os.getenv("THERMIA_HOST")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Skip integration tests when no controller is configured."""
    if THERMIA_HOST:
        return
    skip = pytest.mark.skip(reason="THERMIA_HOST not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="module")
def config() -> SessionConfig:
    """Session configuration from THERMIA_* environment variables."""
    return SessionConfig.from_env()


@pytest.fixture
def session(config: SessionConfig) -> Generator[HeatpumpSession, None, None]:
    """Open session to the configured controller."""
    with HeatpumpSession.from_config(config) as session:
        yield session
