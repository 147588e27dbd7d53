"""Shared pytest fixtures for scoring tests."""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from tourscore.config import reset_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def client() -> Iterator[TestClient]:
    from tourscore.api.app import app

    with TestClient(app) as test_client:
        yield test_client
