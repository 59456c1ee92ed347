"""Tracking and label tools — tracking URLs and printable labels."""

from mcp.server.fastmcp import FastMCP

from .config import shipi_get, resolve_key, to_text

TRACKING_ENDPOINT = "api/v1/tracking_url.php"
LABELS_ENDPOINT = "label_api/fetch_labels.php"


def register(mcp: FastMCP) -> None:

    @mcp.tool()
    async def track_shipment(tracking_number: str, carrier: str = "") -> str:
        """
        Get a tracking URL for a shipment. Supports auto-detection of carrier from tracking number format.

        Args:
            tracking_number: Tracking number
            carrier: Carrier code: fedex, ups, dhl, usps, etc. (auto-detected if omitted)
        """
        data = await shipi_get(TRACKING_ENDPOINT, {
            "tracking_number": tracking_number,
            "carrier": carrier or "",
        })
        return to_text(data)

    @mcp.tool()
    async def fetch_labels(
        integration_key: str | None = None,
        page: int = 1,
        limit: int = 50,
        printed: str = "all",
    ) -> str:
        """
        Fetch shipping labels for printing. Filter by printed/unprinted status. Returns label URLs.

        Args:
            integration_key: Shipi integration key
            page: Page number
            limit: Items per page (max 100)
            printed: Filter: 'printed', 'not_printed', or 'all'
        """
        data = await shipi_get(LABELS_ENDPOINT, {
            "integration_key": resolve_key(integration_key),
            "page": page,
            "limit": limit,
            "printed": printed,
        })
        return to_text(data)
