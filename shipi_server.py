"""MCP Server for multi-carrier shipping management — Shipi API.

This server provides tools for:
─── Shipments ───
 1. list_shipments      — list shipments with pagination and filters
 2. get_shipment        — shipment details by ID or order ID
 3. search_shipments    — search by order ID or tracking number
 4. create_shipment     — create a shipping label
 5. cancel_shipment     — cancel a shipment and void its label

─── Rates / Pickup ───
 6. get_shipping_rates  — live rates from configured carriers
 7. schedule_pickup     — schedule a carrier pickup

─── Tracking / Labels ───
 8. track_shipment      — tracking URL for a tracking number
 9. fetch_labels        — printable labels, printed/unprinted filter

─── Address Book ───
10. list_addresses
11. get_address
12. add_address
13. edit_address
14. delete_address

─── Carriers ───
15. list_carriers
16. get_carrier

─── Account ───
17. get_account_info    — user, store, balance, plan
18. get_shipping_stats  — counts, costs, carrier usage, trends

Run the server:
    python shipi_server.py
"""

import logging

from mcp.server.fastmcp import FastMCP

from shipi_shared.constants import SERVER_NAME, SERVER_VERSION
from shipi_shared.logging_setup import setup_logger
from shipi_tools import register_all
from shipi_tools.config import SHIPI_BASE_URL, SHIPI_LOG_DIR, SHIPI_LOG_LEVEL

# ── MCP Server ──────────────────────────────────
mcp = FastMCP(SERVER_NAME)

# ── Register all tools ──────────────────────────
register_all(mcp)


def main() -> None:
    logger = setup_logger(
        "shipi",
        SHIPI_LOG_DIR,
        "shipi.log",
        level=getattr(logging, SHIPI_LOG_LEVEL, logging.INFO),
    )
    logger.info("Shipi MCP Server %s running (stdio transport) against %s", SERVER_VERSION, SHIPI_BASE_URL)
    try:
        mcp.run(transport="stdio")
    except Exception as exc:
        logger.error("Fatal error: %s", exc)
        raise SystemExit(1) from exc


# ── Run ─────────────────────────────────────────
if __name__ == "__main__":
    main()
