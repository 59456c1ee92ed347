"""Carrier tools — configured carrier accounts."""

from mcp.server.fastmcp import FastMCP

from .config import shipi_get, to_text

CARRIERS_ENDPOINT = "api/v1/carriers.php"


def register(mcp: FastMCP) -> None:

    @mcp.tool()
    async def list_carriers(integration_key: str | None = None) -> str:
        """
        List all configured shipping carrier accounts. Shows carrier type, primary status, and shipper address. Credentials are never exposed.

        Args:
            integration_key: Shipi integration key
        """
        data = await shipi_get(CARRIERS_ENDPOINT, {
            "action": "list",
            "integration_key": integration_key,
        })
        return to_text(data)

    @mcp.tool()
    async def get_carrier(id: int, integration_key: str | None = None) -> str:
        """
        Get details of a specific carrier account by ID. Returns carrier type and shipper address info.

        Args:
            id: Carrier account ID
            integration_key: Shipi integration key
        """
        data = await shipi_get(CARRIERS_ENDPOINT, {
            "action": "get",
            "id": id,
            "integration_key": integration_key,
        })
        return to_text(data)
