from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .pricing import format_price


class Retailer(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price_adjustment: int = Field(..., description="Pence added to the converted price; may be negative")
    shipping: Decimal = Field(..., ge=0, description="Shipping cost in pounds")
    in_stock: bool
    image_url_template: str = Field(..., description="Formatted with club_id")


class RetailerDealCreate(BaseModel):
    model_config = ConfigDict(frozen=True)

    retailer_name: str
    price: int = Field(..., description="Price in pence")
    shipping: int = Field(..., ge=0, description="Shipping cost in pence")
    in_stock: bool
    shipping_time: str | None = None
    image_url: str | None = None
    club_id: int

    @computed_field
    @property
    def display_price(self) -> str:
        return format_price(self.price)


class RetailerDeal(RetailerDealCreate):
    id: int
