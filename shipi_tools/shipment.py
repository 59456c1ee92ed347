"""Shipment tools — list, get, search, create and cancel shipments."""

from mcp.server.fastmcp import FastMCP

from .config import shipi_get, shipi_post, resolve_key, to_text
from .models import Address, Product
from .translate import build_label_meta

SHIPMENTS_ENDPOINT = "api/v1/shipments.php"
CREATE_ENDPOINT = "label_api/create_shipment.php"
CANCEL_ENDPOINT = "cancel_api/delete_shipment.php"


def register(mcp: FastMCP) -> None:

    @mcp.tool()
    async def list_shipments(
        integration_key: str | None = None,
        page: int = 1,
        per_page: int = 20,
        status: str | None = None,
        carrier: str | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
    ) -> str:
        """
        List shipments with pagination and filters. Filter by status (new/created/delivered), carrier, or date range.

        Args:
            integration_key: Shipi integration key (uses env default if omitted)
            page: Page number
            per_page: Items per page (max 100)
            status: Filter by status: new, created, delivered, cancelled
            carrier: Filter by carrier: fedex, ups, dhl, usps, etc.
            date_from: Start date (YYYY-MM-DD)
            date_to: End date (YYYY-MM-DD)
        """
        data = await shipi_get(SHIPMENTS_ENDPOINT, {
            "action": "list",
            "integration_key": integration_key,
            "page": page,
            "per_page": per_page,
            "status": status,
            "carrier": carrier,
            "date_from": date_from,
            "date_to": date_to,
        })
        return to_text(data)

    @mcp.tool()
    async def get_shipment(
        integration_key: str | None = None,
        id: str | None = None,
        order_id: str | None = None,
    ) -> str:
        """
        Get detailed information about a specific shipment by ID or order ID. Includes shipper, recipient, products, tracking, and label URLs.

        Args:
            integration_key: Shipi integration key
            id: Shipment ID
            order_id: Order ID
        """
        data = await shipi_get(SHIPMENTS_ENDPOINT, {
            "action": "get",
            "integration_key": integration_key,
            "id": id,
            "order_id": order_id,
        })
        return to_text(data)

    @mcp.tool()
    async def search_shipments(
        q: str,
        integration_key: str | None = None,
        limit: int = 20,
    ) -> str:
        """
        Search shipments by order ID or tracking number. Returns matching shipments.

        Args:
            q: Search query (order ID or tracking number)
            integration_key: Shipi integration key
            limit: Max results (max 50)
        """
        data = await shipi_get(SHIPMENTS_ENDPOINT, {
            "action": "search",
            "integration_key": integration_key,
            "q": q,
            "limit": limit,
        })
        return to_text(data)

    @mcp.tool()
    async def create_shipment(
        carrier_id: int,
        shipper: Address,
        recipient: Address,
        products: list[Product],
        integration_key: str | None = None,
        service_code: str = "",
    ) -> str:
        """
        Create a shipping label. Requires carrier account, shipper/recipient addresses, and product details. Returns tracking number and label URL.

        Args:
            carrier_id: Shipping account ID (get from list_carriers)
            shipper: Shipper (from) address
            recipient: Recipient (to) address
            products: Products/packages to ship
            integration_key: Shipi integration key
            service_code: Carrier service code (leave empty for default)
        """
        meta = build_label_meta(carrier_id, service_code, shipper, recipient, products)
        data = await shipi_post(CREATE_ENDPOINT, {
            "integrated_key": resolve_key(integration_key),
            "integration_key": integration_key,
            "meta": meta,
        })
        return to_text(data)

    @mcp.tool()
    async def cancel_shipment(
        shipment_id: int,
        integration_key: str | None = None,
    ) -> str:
        """
        Cancel a shipment and void its label. Requires the shipment ID (del_ref).

        Args:
            shipment_id: Shipment ID to cancel
            integration_key: Shipi integration key
        """
        data = await shipi_post(CANCEL_ENDPOINT, {
            "integrated_key": resolve_key(integration_key),
            "integration_key": integration_key,
            "del_ref": shipment_id,
        })
        return to_text(data)
