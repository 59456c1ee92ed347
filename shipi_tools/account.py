"""Account tools — account details and shipping statistics."""

from mcp.server.fastmcp import FastMCP

from .config import shipi_get, to_text

ACCOUNT_ENDPOINT = "api/v1/account.php"
STATS_ENDPOINT = "api/v1/stats.php"


def register(mcp: FastMCP) -> None:

    @mcp.tool()
    async def get_account_info(integration_key: str | None = None) -> str:
        """
        Get Shipi account information including user details, store info, billing/balance, plan, and feature flags.

        Args:
            integration_key: Shipi integration key
        """
        return to_text(await shipi_get(ACCOUNT_ENDPOINT, {"integration_key": integration_key}))

    @mcp.tool()
    async def get_shipping_stats(
        integration_key: str | None = None,
        period: str = "month",
        date_from: str | None = None,
        date_to: str | None = None,
    ) -> str:
        """
        Get shipping statistics and analytics. View shipment counts, cost breakdowns, carrier usage, tracking status, and daily trends.

        Args:
            integration_key: Shipi integration key
            period: Period: today, week, month, year, all
            date_from: Custom start date (YYYY-MM-DD)
            date_to: Custom end date (YYYY-MM-DD)
        """
        data = await shipi_get(STATS_ENDPOINT, {
            "integration_key": integration_key,
            "period": period,
            "date_from": date_from,
            "date_to": date_to,
        })
        return to_text(data)
