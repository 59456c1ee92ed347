"""Shared constants for the Shipi MCP server."""

# Structured error messages returned as tool output
ERROR_REQUEST_FAILED = "Request failed: {reason}"
ERROR_INVALID_JSON = "Invalid JSON response"

# Characters of a non-JSON body kept for diagnostics
RAW_EXCERPT_LIMIT = 500

SERVER_NAME = "shipi-shipping"
SERVER_VERSION = "1.0.2"
