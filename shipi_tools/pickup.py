"""Pickup tools — schedule a carrier pickup."""

from mcp.server.fastmcp import FastMCP

from .config import shipi_post, resolve_key, to_text
from .translate import LABEL_FORMAT

PICKUP_ENDPOINT = "pickup_api/create_pickup.php"


def register(mcp: FastMCP) -> None:

    @mcp.tool()
    async def schedule_pickup(
        order_id: str,
        carrier_type: str,
        integration_key: str | None = None,
        pickup_date: str | None = None,
        pickup_time: str | None = None,
    ) -> str:
        """
        Schedule a carrier pickup for a shipment. The carrier will come to the shipper address to collect the package.

        Args:
            order_id: Order ID for the shipment
            carrier_type: Carrier type: fedex, ups, dhl, etc.
            integration_key: Shipi integration key
            pickup_date: Requested pickup date (YYYY-MM-DD)
            pickup_time: Preferred pickup time
        """
        meta = {}
        if pickup_date:
            meta["pickup_date"] = pickup_date
        if pickup_time:
            meta["pickup_time"] = pickup_time

        data = await shipi_post(PICKUP_ENDPOINT, {
            "integrated_key": resolve_key(integration_key),
            "integration_key": integration_key,
            "order_id": order_id,
            "carrier_type": carrier_type,
            "label": LABEL_FORMAT,
            "meta": meta,
        })
        return to_text(data)
