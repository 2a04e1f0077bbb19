"""Order and delivery entity models."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.domain.value_objects import DeliveryStatus, OrderStatus, PaymentMethod


class Order(BaseModel):
    """Submitted order as stored by the backend."""

    id: str = Field(..., description="Order ID")
    business_id: str = Field(..., description="Business ID")
    customer_name: str = Field(..., description="Customer name")
    customer_phone: str = Field(..., description="Customer phone")
    customer_address: str = Field(..., description="Delivery address")
    customer_complement: str | None = Field(None, description="Address complement")
    payment_method: PaymentMethod = Field(PaymentMethod.CASH, description="Payment method")
    total: Decimal = Field(..., ge=0, description="Order total including delivery")
    status: OrderStatus = Field(OrderStatus.PENDING, description="Lifecycle status")
    created_at: datetime | None = Field(None, description="Creation timestamp")

    class Config:
        """Pydantic config."""

        from_attributes = True

    @property
    def is_active(self) -> bool:
        return self.status not in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)


class GeoPoint(BaseModel):
    """Driver position reported by the device."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    class Config:
        """Pydantic config."""

        frozen = True


class Delivery(BaseModel):
    """Assignment of one order to one driver."""

    id: str | None = Field(None, description="Delivery ID (auto-generated)")
    order_id: str = Field(..., description="Order ID")
    driver_id: str = Field(..., description="Driver ID")
    status: DeliveryStatus = Field(DeliveryStatus.ASSIGNED, description="Lifecycle status")
    fee: Decimal = Field(Decimal("0"), ge=0, description="Fee paid to the driver")
    confirmed_at: GeoPoint | None = Field(None, description="Where the driver confirmed the delivery")
    created_at: datetime | None = Field(None, description="Creation timestamp")

    class Config:
        """Pydantic config."""

        from_attributes = True

    @property
    def is_active(self) -> bool:
        return self.status not in (DeliveryStatus.COMPLETED, DeliveryStatus.CANCELLED)
