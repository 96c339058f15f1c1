"""Pytest configuration and shared fixtures."""

from typing import List

import httpx
import pytest
from fastapi.testclient import TestClient

from leadform.config import Settings, get_settings
from leadform.main import app


INTAKE_URL = "http://testserver/api/registro"


@pytest.fixture
def valid_values() -> dict:
    """A submission that passes every field rule."""
    return {
        "nombre": "Ana",
        "cedula": "12345678",
        "telefono": "3001234567",
        "email": "ana@x.com",
        "monto": "50000",
    }


@pytest.fixture
def client():
    """Test client against the real app; settings overrides are undone afterwards."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def override_settings():
    """Swap the settings the endpoints see for the duration of a test."""

    def _override(**kwargs) -> Settings:
        settings = Settings(**kwargs)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    yield _override
    app.dependency_overrides.clear()


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it receives."""

    def __init__(self, status_code: int = 200, body=None):
        self.requests: List[httpx.Request] = []
        self.status_code = status_code
        self.body = {"ok": True} if body is None else body
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def intake_url() -> str:
    return INTAKE_URL


@pytest.fixture
def make_transport():
    """Build a recording transport answering with the given status and body."""
    return RecordingTransport
