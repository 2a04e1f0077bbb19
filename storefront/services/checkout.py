"""Order draft handed to the messaging step at checkout."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from storefront.core.exceptions import EmptyCartException, ValidationException
from storefront.core.order_math import calc_change, calc_total_price, quantize_money, to_money
from storefront.domain.cart import CartState, item_price
from storefront.domain.value_objects import OrderStatus, PaymentMethod


class CustomerInfo(BaseModel):
    """Contact and payment details collected by the checkout form."""

    name: str = Field(..., min_length=2, max_length=100)
    phone: str = Field(..., min_length=8, max_length=20)
    address: str = Field(..., min_length=5, max_length=300)
    complement: str | None = Field(None, max_length=200)
    payment_method: PaymentMethod = PaymentMethod.CASH
    change_for: Decimal | None = Field(None, gt=0, description="Cash amount the customer pays with")

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        digits = "".join(ch for ch in v if ch.isdigit())
        if len(digits) < 8:
            raise ValueError("Phone number must contain at least 8 digits")
        return digits

    @model_validator(mode="after")
    def change_only_for_cash(self) -> CustomerInfo:
        if self.change_for is not None and self.payment_method != PaymentMethod.CASH:
            raise ValueError("Change can only be requested for cash payments")
        return self


class OrderLine(BaseModel):
    description: str
    flavors: list[str]
    quantity: int
    line_total: Decimal
    notes: str = ""


class OrderDraft(BaseModel):
    business_id: str
    lines: list[OrderLine]
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal
    customer: CustomerInfo
    change: Decimal | None = None
    status: OrderStatus = OrderStatus.PENDING


def describe_line(item) -> str:
    if item.size is not None:
        base = f"{item.products[0].name} {item.size.name}"
        if len(item.products) > 1:
            base += f" - {len(item.products)} flavors"
        return base
    return item.products[0].name


def build_order_draft(
    state: CartState, customer: CustomerInfo, delivery_fee: Decimal, decimals: int = 2
) -> OrderDraft:
    """Amounts are rounded to ``decimals`` places; the total is the sum of the rounded parts."""
    if state.is_empty:
        raise EmptyCartException()
    if state.business_id is None:
        raise ValidationException("Cart is not bound to a business")

    lines = [
        OrderLine(
            description=describe_line(item),
            flavors=[flavor.name for flavor in item.flavors] or [p.name for p in item.products],
            quantity=item.quantity,
            line_total=quantize_money(item_price(item), decimals),
            notes=item.notes,
        )
        for item in state.items
    ]
    subtotal = quantize_money(state.total, decimals)
    fee = quantize_money(to_money(delivery_fee), decimals)
    total = calc_total_price(subtotal, fee)
    if customer.change_for is not None and customer.change_for < total:
        raise ValidationException(f"Change for {customer.change_for} does not cover the total {total}")
    change = calc_change(total, customer.change_for)

    return OrderDraft(
        business_id=state.business_id,
        lines=lines,
        subtotal=subtotal,
        delivery_fee=fee,
        total=total,
        customer=customer,
        change=change if change is None else quantize_money(change, decimals),
    )
