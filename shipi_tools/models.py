"""Pydantic models shared across Shipi tools."""

from pydantic import BaseModel, Field

Number = int | float


class Address(BaseModel):
    """Shipper or recipient address for label creation."""
    name: str = Field(description="Contact name")
    company: str = Field(default="", description="Company name")
    address1: str = Field(description="Street address line 1")
    address2: str = Field(default="", description="Street address line 2")
    city: str = Field(description="City")
    state: str = Field(description="State/province code")
    postal: str = Field(description="Postal/ZIP code")
    country: str = Field(description="Country code (US, CA, IN, etc.)")
    phone: str = Field(default="", description="Phone number")
    email: str = Field(default="", description="Email address")


class RateAddress(BaseModel):
    """Recipient address used for rate calculation."""
    name: str = Field(default="", description="Recipient name")
    address1: str = Field(description="Street address")
    address2: str = Field(default="", description="Street address line 2")
    city: str = Field(description="City")
    state: str = Field(description="State/province code")
    postal: str = Field(description="Postal/ZIP code")
    country: str = Field(description="Country code (US, CA, IN, etc.)")


class Product(BaseModel):
    """A product or package to ship."""
    name: str = Field(default="Package", description="Product name")
    weight: Number = Field(description="Weight in lbs/kg")
    quantity: Number = Field(default=1, description="Quantity")
    price: Number = Field(default=0, description="Declared value per unit")
    length: Number = Field(default=1, description="Length")
    width: Number = Field(default=1, description="Width")
    height: Number = Field(default=1, description="Height")
