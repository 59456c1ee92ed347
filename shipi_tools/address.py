"""Address book tools — list, get, add, edit and delete saved addresses."""

from mcp.server.fastmcp import FastMCP

from .config import shipi_get, shipi_post, to_text

ADDRESSES_ENDPOINT = "api/v1/addresses.php"


def register(mcp: FastMCP) -> None:

    @mcp.tool()
    async def list_addresses(
        integration_key: str | None = None,
        type: str | None = None,
    ) -> str:
        """
        List all saved addresses from the address book. Filter by type (shipper/receiver).

        Args:
            integration_key: Shipi integration key
            type: Filter by type: 'shipper' or 'receiver'
        """
        data = await shipi_get(ADDRESSES_ENDPOINT, {
            "action": "list",
            "integration_key": integration_key,
            "type": type,
        })
        return to_text(data)

    @mcp.tool()
    async def get_address(id: int, integration_key: str | None = None) -> str:
        """
        Get a specific address by ID from the address book.

        Args:
            id: Address ID
            integration_key: Shipi integration key
        """
        data = await shipi_get(ADDRESSES_ENDPOINT, {
            "action": "get",
            "id": id,
            "integration_key": integration_key,
        })
        return to_text(data)

    @mcp.tool()
    async def add_address(
        name: str,
        address1: str,
        city: str,
        country: str,
        postal: str,
        integration_key: str | None = None,
        type: str = "shipper",
        company: str = "",
        mobile: str = "",
        email: str = "",
        address2: str = "",
        state: str = "",
        tax_id: str = "",
    ) -> str:
        """
        Add a new address to the address book. Used for saving shipper or receiver addresses for reuse.

        Args:
            name: Contact name
            address1: Street address line 1
            city: City
            country: Country code (US, CA, IN, etc.)
            postal: Postal/ZIP code
            integration_key: Shipi integration key
            type: Address type: 'shipper' or 'receiver'
            company: Company name
            mobile: Phone number
            email: Email address
            address2: Street address line 2
            state: State/province
            tax_id: Tax ID / GSTIN / VAT number
        """
        data = await shipi_post(ADDRESSES_ENDPOINT, {
            "action": "add",
            "integration_key": integration_key,
            "type": type,
            "name": name,
            "company": company,
            "mobile": mobile,
            "email": email,
            "address1": address1,
            "address2": address2,
            "city": city,
            "state": state,
            "country": country,
            "postal": postal,
            "tax_id": tax_id,
        })
        return to_text(data)

    @mcp.tool()
    async def edit_address(
        id: int,
        integration_key: str | None = None,
        type: str | None = None,
        name: str | None = None,
        company: str | None = None,
        mobile: str | None = None,
        email: str | None = None,
        address1: str | None = None,
        address2: str | None = None,
        city: str | None = None,
        state: str | None = None,
        country: str | None = None,
        postal: str | None = None,
    ) -> str:
        """
        Update an existing address in the address book. Only changed fields need to be provided.

        Args:
            id: Address ID to update
            integration_key: Shipi integration key
            type: Address type: 'shipper' or 'receiver'
            name: Contact name
            company: Company name
            mobile: Phone number
            email: Email address
            address1: Street address line 1
            address2: Street address line 2
            city: City
            state: State/province
            country: Country code
            postal: Postal/ZIP code
        """
        data = await shipi_post(ADDRESSES_ENDPOINT, {
            "action": "edit",
            "integration_key": integration_key,
            "id": id,
            "type": type,
            "name": name,
            "company": company,
            "mobile": mobile,
            "email": email,
            "address1": address1,
            "address2": address2,
            "city": city,
            "state": state,
            "country": country,
            "postal": postal,
        })
        return to_text(data)

    @mcp.tool()
    async def delete_address(id: int, integration_key: str | None = None) -> str:
        """
        Delete an address from the address book by ID.

        Args:
            id: Address ID to delete
            integration_key: Shipi integration key
        """
        data = await shipi_post(ADDRESSES_ENDPOINT, {
            "action": "delete",
            "id": id,
            "integration_key": integration_key,
        })
        return to_text(data)
