"""Shipi MCP tools package — registers all tools with the MCP server."""

from mcp.server.fastmcp import FastMCP

from . import shipment, rates, pickup, tracking, address, carrier, account


def register_all(mcp: FastMCP) -> None:
    """Register every tool module with the given MCP server instance."""
    shipment.register(mcp)
    rates.register(mcp)
    pickup.register(mcp)
    tracking.register(mcp)
    address.register(mcp)
    carrier.register(mcp)
    account.register(mcp)
