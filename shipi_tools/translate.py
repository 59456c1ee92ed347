"""Field-mapping tables that turn tool arguments into Shipi request shapes."""

from .models import Address, Product

ADDRESS_FIELDS = (
    "name",
    "company",
    "address1",
    "address2",
    "city",
    "state",
    "postal",
    "country",
    "phone",
    "email",
)

SHIPPER_PREFIX = "s_"
RECIPIENT_PREFIX = "t_"

# (tool field, backend field, fallback for falsy values)
PRODUCT_FIELDS = (
    ("name", "prod_name", "Package"),
    ("weight", "prod_weight", None),
    ("quantity", "prod_quantity", 1),
    ("price", "prod_price", 0),
    ("length", "prod_depth", 1),
    ("width", "prod_width", 1),
    ("height", "prod_height", 1),
)

# Label format requested from create_shipment.php / create_pickup.php
LABEL_FORMAT = "d"


def flatten_address(address: Address, prefix: str) -> dict:
    """Flatten an address into ``<prefix><field>`` keys."""
    return {f"{prefix}{field}": getattr(address, field) or "" for field in ADDRESS_FIELDS}


def to_backend_product(product: Product) -> dict:
    row = {}
    for field, backend_field, fallback in PRODUCT_FIELDS:
        value = getattr(product, field)
        row[backend_field] = value if fallback is None else (value or fallback)
    return row


def to_backend_products(products: list[Product]) -> list[dict]:
    return [to_backend_product(p) for p in products]


def build_label_meta(
    carrier_id: int,
    service_code: str,
    shipper: Address,
    recipient: Address,
    products: list[Product],
) -> dict:
    """Build the ``meta`` object expected by create_shipment.php."""
    meta = {"label": LABEL_FORMAT}
    meta.update(flatten_address(shipper, SHIPPER_PREFIX))
    meta.update(flatten_address(recipient, RECIPIENT_PREFIX))
    meta["service_code"] = service_code or ""
    meta["carrier_id"] = carrier_id
    meta["products"] = to_backend_products(products)
    return meta
