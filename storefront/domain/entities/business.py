"""Business entity model."""
from __future__ import annotations

import re
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from storefront.domain.value_objects import Weekday

_HHMM = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class OpeningWindow(BaseModel):
    """Opening and closing time of one day, both "HH:MM"."""

    open: str = Field(..., description="Opening time (HH:MM)")
    close: str = Field(..., description="Closing time (HH:MM)")

    class Config:
        """Pydantic config."""

        frozen = True

    @field_validator("open", "close")
    @classmethod
    def validate_hhmm(cls, v: str) -> str:
        v = v.strip()
        if not _HHMM.match(v):
            raise ValueError(f"Time must be HH:MM, got {v!r}")
        return v

    @staticmethod
    def _to_minutes(value: str) -> int:
        hours, minutes = value.split(":")
        return int(hours) * 60 + int(minutes)

    @property
    def open_minutes(self) -> int:
        return self._to_minutes(self.open)

    @property
    def close_minutes(self) -> int:
        return self._to_minutes(self.close)


class Business(BaseModel):
    """Tenant storefront whose catalog a cart is bound to."""

    id: str = Field(..., description="Business ID")
    name: str = Field(..., min_length=2, max_length=100, description="Business name")
    whatsapp: str | None = Field(None, description="WhatsApp number receiving orders")
    address: str | None = Field(None, description="Business address")
    delivery_fee: Decimal | None = Field(None, ge=0, description="Overrides the default delivery fee")
    hours: dict[Weekday, OpeningWindow | None] = Field(
        default_factory=dict, description="Opening window per weekday, None when closed"
    )

    class Config:
        """Pydantic config."""

        from_attributes = True

    @model_validator(mode="after")
    def fill_missing_days(self) -> Business:
        for day in Weekday:
            self.hours.setdefault(day, None)
        return self

    @property
    def has_hours(self) -> bool:
        return any(window is not None for window in self.hours.values())

    @classmethod
    def from_db_row(cls, row: dict) -> Business:
        """Create Business from a backend row.

        The backend stores hours as a JSON object keyed by weekday name with
        ``{"open": ..., "close": ...}`` or null values.
        """
        data = dict(row)
        data["hours"] = data.pop("business_hours", None) or data.get("hours") or {}
        if "whatsapp_number" in data:
            data["whatsapp"] = data.pop("whatsapp_number")
        return cls(**data)
