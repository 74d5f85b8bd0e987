"""Product domain models."""

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Product data transfer object."""

    id: str = Field(..., description="Unique product ID")
    name: str = Field(..., description="Product name (e.g., 'Blue Razz')")
    category: str = Field(..., description="Catalog category (e.g., 'fruities', 'devices')")
    price: float | None = Field(default=None, ge=0, description="Unit price")
    is_active: bool = Field(default=True, description="Whether the product is sold")
