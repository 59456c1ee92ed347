"""Root conftest.py — shared fixtures for the entire test suite."""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# ---------------------------------------------------------------------------
# Make project modules importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# ---------------------------------------------------------------------------
# Common fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_response():
    """Factory returning mock httpx responses with a text body."""
    def _make(body, status_code: int = 200):
        resp = MagicMock()
        resp.status_code = status_code
        resp.text = body if isinstance(body, str) else json.dumps(body)
        return resp
    return _make


@pytest.fixture
def sample_shipment_list():
    """Realistic shipments.php list response."""
    return {
        "status": "success",
        "page": 1,
        "per_page": 20,
        "total": 2,
        "shipments": [
            {
                "id": 101, "order_id": "ORD-1001", "carrier": "fedex",
                "status": "created", "tracking_number": "794612345678",
            },
            {
                "id": 102, "order_id": "ORD-1002", "carrier": "ups",
                "status": "delivered", "tracking_number": "1Z999AA10123456784",
            },
        ],
    }


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set all Shipi env vars to safe test values."""
    monkeypatch.setenv("SHIPI_BASE_URL", "https://test.shipi.example.com/")
    monkeypatch.setenv("SHIPI_INTEGRATION_KEY", "test-key-123")
    monkeypatch.setenv("SHIPI_TIMEOUT", "12.5")
    monkeypatch.setenv("SHIPI_LOG_LEVEL", "debug")
