"""Shared fixtures for Shipi tool tests.

Tool modules bind ``shipi_get`` / ``shipi_post`` from ``shipi_tools.config``
at import time, so the fixtures patch those names on each tool module and
capture the inner tool functions with a FastMCP stand-in.
"""

from unittest.mock import AsyncMock, patch

import pytest

from shipi_tools import account, address, carrier, pickup, rates, shipment, tracking
from shipi_tools import config as _shipi_config

GET_MODULES = [shipment, tracking, address, carrier, account]
POST_MODULES = [shipment, rates, pickup, address]


# ── Helpers ───────────────────────────────────────────────────────────────


class _ToolCollector:
    """Minimal stand-in for FastMCP that captures tool functions."""

    def __init__(self):
        self.tools: dict[str, callable] = {}

    def tool(self, **kwargs):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn
        return decorator


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture
def tool_collector():
    """Return a fresh _ToolCollector instance."""
    return _ToolCollector()


@pytest.fixture
def mock_shipi_get():
    """Patch ``shipi_get`` in all tool modules that use it."""
    m = AsyncMock(return_value={"status": "success"})
    patches = [patch.object(mod, "shipi_get", m) for mod in GET_MODULES]
    for p in patches:
        p.start()
    yield m
    for p in patches:
        p.stop()


@pytest.fixture
def mock_shipi_post():
    """Patch ``shipi_post`` in all tool modules that use it."""
    m = AsyncMock(return_value={"status": "success"})
    patches = [patch.object(mod, "shipi_post", m) for mod in POST_MODULES]
    for p in patches:
        p.start()
    yield m
    for p in patches:
        p.stop()


@pytest.fixture
def default_key(monkeypatch):
    """Set the process-wide default integration key."""
    monkeypatch.setattr(_shipi_config, "SHIPI_INTEGRATION_KEY", "env-key")
    return "env-key"


@pytest.fixture
def no_default_key(monkeypatch):
    monkeypatch.setattr(_shipi_config, "SHIPI_INTEGRATION_KEY", "")


@pytest.fixture
def shipi_config():
    """Return the shipi_tools.config module."""
    return _shipi_config


@pytest.fixture
def jane_shipper():
    return {
        "name": "Jane",
        "address1": "1 Main",
        "city": "NYC",
        "state": "NY",
        "postal": "10001",
        "country": "US",
    }


@pytest.fixture
def bob_recipient():
    return {
        "name": "Bob",
        "company": "Acme",
        "address1": "500 Market St",
        "address2": "Suite 2",
        "city": "San Francisco",
        "state": "CA",
        "postal": "94105",
        "country": "US",
        "phone": "4155550100",
        "email": "bob@example.com",
    }


# ── Pre-registered tool sets ─────────────────────────────────────────────


@pytest.fixture
def shipment_tools(tool_collector, mock_shipi_get, mock_shipi_post):
    shipment.register(tool_collector)
    return tool_collector.tools


@pytest.fixture
def rates_tools(tool_collector, mock_shipi_post):
    rates.register(tool_collector)
    return tool_collector.tools


@pytest.fixture
def pickup_tools(tool_collector, mock_shipi_post):
    pickup.register(tool_collector)
    return tool_collector.tools


@pytest.fixture
def tracking_tools(tool_collector, mock_shipi_get):
    tracking.register(tool_collector)
    return tool_collector.tools


@pytest.fixture
def address_tools(tool_collector, mock_shipi_get, mock_shipi_post):
    address.register(tool_collector)
    return tool_collector.tools


@pytest.fixture
def carrier_tools(tool_collector, mock_shipi_get):
    carrier.register(tool_collector)
    return tool_collector.tools


@pytest.fixture
def account_tools(tool_collector, mock_shipi_get):
    account.register(tool_collector)
    return tool_collector.tools
