from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"
    prefer_not = "prefer-not"


class Handicap(str, Enum):
    beginner = "beginner"
    high = "high"
    mid = "mid"
    low = "low"
    scratch = "scratch"


class BallFlight(str, Enum):
    draw = "draw"
    fade = "fade"
    straight = "straight"
    hook = "hook"
    slice = "slice"
    unsure = "unsure"


class Priority(str, Enum):
    distance = "distance"
    accuracy = "accuracy"  # "Accuracy / Forgiveness"
    feel = "feel"
    versatility = "versatility"
    value = "value"


class GolfProfileCreate(BaseModel):
    model_config = ConfigDict(frozen=True)

    height_feet: int = Field(..., gt=0, le=8)
    height_inches: int = Field(..., ge=0, le=11)
    weight: int = Field(..., gt=0, description="Body weight in lbs")
    age: int = Field(..., gt=0, le=120)
    gender: Gender
    handicap: Handicap
    ball_flight: BallFlight
    swing_speed: int | None = Field(default=None, gt=0, description="Measured swing speed in mph")
    priority: Priority


class GolfProfile(GolfProfileCreate):
    id: int


class ClubTypeCreate(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str
    icon_name: str


class ClubType(ClubTypeCreate):
    id: int
