"""Size entity model."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class Size(BaseModel):
    """Order-size tier with a flat price and a flavor limit."""

    id: str = Field(..., description="Size ID")
    name: str = Field(..., min_length=1, description="Display name")
    price: Decimal = Field(..., ge=0, description="Flat price of one sized item")
    max_flavors: int = Field(1, ge=1, description="Products that can share one item")
    description: str | None = Field(None, description="Size description")

    class Config:
        """Pydantic config."""

        from_attributes = True
        frozen = True

    @property
    def allows_multiple_flavors(self) -> bool:
        return self.max_flavors > 1
