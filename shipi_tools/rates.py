"""Rate tools — live rate comparison across configured carriers."""

from mcp.server.fastmcp import FastMCP

from .config import shipi_post, resolve_key, to_text
from .models import Product, RateAddress
from .translate import to_backend_products

RATES_ENDPOINT = "rates_api/shipi_rates.php"


def register(mcp: FastMCP) -> None:

    @mcp.tool()
    async def get_shipping_rates(
        receiver_address: RateAddress,
        products: list[Product],
        integration_key: str | None = None,
        account_id: int | None = None,
    ) -> str:
        """
        Get live shipping rates from all configured carriers. Provide recipient address and package details to compare prices across FedEx, UPS, DHL, USPS, etc.

        Args:
            receiver_address: Recipient address for rate calculation
            products: Packages to get rates for
            integration_key: Shipi integration key
            account_id: Specific shipping account ID (optional, gets rates from all if omitted)
        """
        data = await shipi_post(RATES_ENDPOINT, {
            "integration_key": resolve_key(integration_key),
            "receiver_address": receiver_address.model_dump(),
            "products": to_backend_products(products),
            "account_id": account_id,
        })
        return to_text(data)
