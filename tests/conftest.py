"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from main import create_app
from realstate.schemas import RealState, RealStatePayload


ELM_STREET = {
    "registration": 987654321,
    "address": "456 Elm St",
    "size": 200,
    "price": 250000.5,
    "state": "CA",
}


@pytest.fixture
def elm_street_json():
    return dict(ELM_STREET)


@pytest.fixture
def elm_street_payload():
    return RealStatePayload(**ELM_STREET)


@pytest.fixture
def elm_street():
    return RealState(id=1, **ELM_STREET)


@pytest.fixture
def mock_service():
    """Service double; every operation is an AsyncMock."""
    return AsyncMock()


@pytest.fixture
def client(mock_service):
    app = create_app(Settings(), service=mock_service)
    with TestClient(app) as test_client:
        yield test_client
