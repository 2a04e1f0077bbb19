"""Product entity model."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.domain.value_objects import PriceUnit


class Ingredient(BaseModel):
    """Optional or default topping of a product."""

    id: str = Field(..., description="Ingredient ID")
    name: str = Field(..., min_length=1, description="Ingredient name")
    price: Decimal = Field(Decimal("0"), ge=0, description="Shown next to the ingredient; not charged")
    default: bool = Field(False, description="Included unless the customer removes it")

    class Config:
        """Pydantic config."""

        from_attributes = True


class Product(BaseModel):
    """Menu product of one business."""

    id: str = Field(..., description="Product ID")
    business_id: str = Field(..., description="Owning business ID")
    name: str = Field(..., min_length=1, max_length=200, description="Product name")
    description: str | None = Field(None, max_length=1000, description="Product description")
    price: Decimal = Field(..., ge=0, description="Price per unit when sold without a size")
    price_unit: PriceUnit = Field(PriceUnit.UNIT, description="Unit the price refers to")
    image_url: str | None = Field(None, description="Product photo URL")
    in_stock: bool = Field(True, description="Available for ordering")
    category: str | None = Field(None, description="Menu category")
    allows_multiple_flavors: bool = Field(False, description="Can be combined with other flavors")
    ingredients: list[Ingredient] = Field(default_factory=list, description="Ingredient toggles")

    class Config:
        """Pydantic config."""

        from_attributes = True

    def default_ingredient_ids(self) -> frozenset[str]:
        return frozenset(ing.id for ing in self.ingredients if ing.default)
