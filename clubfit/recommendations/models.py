from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..deals.pricing import format_price


class PriceTier(str, Enum):
    budget = "budget"
    mid_range = "mid-range"
    premium = "premium"


PRICE_TIERS: list[PriceTier] = [PriceTier.budget, PriceTier.mid_range, PriceTier.premium]


class Corrective(str, Enum):
    slice = "slice"
    hook = "hook"
    balanced = "balanced"


class ClubCatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    club_type: str
    name: str
    price: int = Field(..., ge=0, description="Price in pence")
    description: str
    badge_text: str
    forgiveness: int = Field(..., ge=1, le=5)
    distance: int | None = Field(default=None, ge=1, le=5)
    feel: int = Field(..., ge=1, le=5)
    workability: int | None = Field(default=None, ge=1, le=5)
    ideal_swing_speed: int | None = None
    corrective: Corrective
    price_tier: PriceTier


class RecommendedClubCreate(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    price: int = Field(..., ge=0, description="Price in pence")
    forgiveness: int
    distance: int | None = None
    feel: int
    price_tier: PriceTier
    badge_text: str
    club_type_id: int
    profile_id: int

    @computed_field
    @property
    def display_price(self) -> str:
        return format_price(self.price)


class RecommendedClub(RecommendedClubCreate):
    id: int


class RecommendationRequest(BaseModel):
    profile_id: int = Field(..., gt=0)
    club_type_id: int = Field(..., gt=0)


class SuggestedTierResponse(BaseModel):
    profile_id: int
    price_tier: PriceTier
