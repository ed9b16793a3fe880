# test/conftest.py
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from Proxy.config import settings
from Proxy.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def backend_base(monkeypatch) -> str:
    base = "http://leave-backend.test"
    monkeypatch.setattr(settings, "LEAVE_API_BASE", base)
    return base


@pytest.fixture
def backend_response():
    """Factory for a fake requests.Response coming back from the leave backend."""
    def _make(status_code: int, body) -> Mock:
        resp = Mock()
        resp.status_code = status_code
        resp.json.return_value = body
        return resp
    return _make
