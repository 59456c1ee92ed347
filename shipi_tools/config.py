"""Shared configuration and HTTP helpers for Shipi tools."""

import json
import logging
import os
from pathlib import Path

import httpx
from dotenv import load_dotenv

from shipi_shared.constants import ERROR_INVALID_JSON, ERROR_REQUEST_FAILED, RAW_EXCERPT_LIMIT

load_dotenv()

SHIPI_BASE_URL = os.getenv("SHIPI_BASE_URL", "").rstrip("/") or "https://app.myshipi.com"
SHIPI_INTEGRATION_KEY = os.getenv("SHIPI_INTEGRATION_KEY", "")
SHIPI_TIMEOUT = float(os.getenv("SHIPI_TIMEOUT")) if os.getenv("SHIPI_TIMEOUT") else None
SHIPI_LOG_DIR = Path(os.getenv("SHIPI_LOG_DIR", "") or Path.home() / ".shipi" / "logs")
SHIPI_LOG_LEVEL = os.getenv("SHIPI_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("shipi.http")

GET_HEADERS = {"Accept": "application/json"}
POST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def resolve_key(integration_key: str | None = None) -> str:
    """Per-call key wins over the process-wide default."""
    return integration_key or SHIPI_INTEGRATION_KEY


def to_text(data) -> str:
    """Serialize a backend result (or structured error) as tool output."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def network_error(exc: Exception) -> dict:
    return {"status": "error", "message": ERROR_REQUEST_FAILED.format(reason=exc)}


def protocol_error(text: str) -> dict:
    return {
        "status": "error",
        "message": ERROR_INVALID_JSON,
        "raw": text[:RAW_EXCERPT_LIMIT],
    }


def _query_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: dict, key: str) -> dict:
    """Query string params, dropping ``None`` and empty-string values."""
    query = {}
    if key:
        query["integration_key"] = key
    for name, value in params.items():
        if value is None or value == "":
            continue
        query[name] = _query_value(value)
    return query


def build_body(body: dict, key: str) -> dict:
    """JSON body with top-level ``None`` values dropped and the key attached."""
    payload = {name: value for name, value in body.items() if value is not None}
    if key and not payload.get("integration_key"):
        payload["integration_key"] = key
    return payload


def _parse(endpoint: str, resp: httpx.Response) -> dict:
    text = resp.text
    try:
        return json.loads(text)
    except ValueError:
        logger.warning("Non-JSON response from %s (HTTP %s)", endpoint, resp.status_code)
        return protocol_error(text)


async def shipi_get(endpoint: str, params: dict | None = None) -> dict:
    """Helper for GET requests to the Shipi API."""
    params = dict(params or {})
    key = resolve_key(params.pop("integration_key", None))
    logger.info("GET %s", endpoint)
    try:
        async with httpx.AsyncClient(timeout=SHIPI_TIMEOUT, follow_redirects=True) as client:
            resp = await client.get(
                f"{SHIPI_BASE_URL}/{endpoint}",
                headers=GET_HEADERS,
                params=build_query(params, key),
            )
    except httpx.HTTPError as exc:
        logger.warning("GET %s failed: %s", endpoint, exc)
        return network_error(exc)
    return _parse(endpoint, resp)


async def shipi_post(endpoint: str, body: dict) -> dict:
    """Helper for POST requests to the Shipi API."""
    key = resolve_key(body.get("integration_key"))
    logger.info("POST %s", endpoint)
    try:
        async with httpx.AsyncClient(timeout=SHIPI_TIMEOUT, follow_redirects=True) as client:
            resp = await client.post(
                f"{SHIPI_BASE_URL}/{endpoint}",
                headers=POST_HEADERS,
                json=build_body(body, key),
            )
    except httpx.HTTPError as exc:
        logger.warning("POST %s failed: %s", endpoint, exc)
        return network_error(exc)
    return _parse(endpoint, resp)
