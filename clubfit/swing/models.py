from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SwingPath(str, Enum):
    in_to_out = "in-to-out"
    out_to_in = "out-to-in"
    severely_in_to_out = "severely-in-to-out"
    severely_out_to_in = "severely-out-to-in"
    neutral = "neutral"
    slightly_out_to_in = "slightly-out-to-in"

    @property
    def is_out_to_in(self) -> bool:
        """Slice-producing path."""
        return "out-to-in" in self.value

    @property
    def is_in_to_out(self) -> bool:
        """Hook-producing path."""
        return "in-to-out" in self.value


class ClubFace(str, Enum):
    closed = "closed"
    slightly_closed = "slightly-closed"
    square = "square"
    slightly_open = "slightly-open"
    open = "open"
    inconsistent = "inconsistent"


class Tempo(str, Enum):
    slow = "slow"
    moderate = "moderate"
    quick = "quick"
    inconsistent = "inconsistent"


class SwingAnalysisCreate(BaseModel):
    model_config = ConfigDict(frozen=True)

    swing_speed: int = Field(..., description="Club head speed in mph")
    swing_path: SwingPath
    club_face: ClubFace
    tempo: Tempo
    impact_position: str | None = None
    attack_angle: str | None = None
    backswing_length: str | None = None
    follow_through: str | None = None
    balance_rating: int | None = Field(default=None, ge=1, le=5)
    consistency: int | None = Field(default=None, ge=1, le=5)
    power_transfer: int | None = Field(default=None, ge=1, le=5)
    profile_id: int


class SwingAnalysis(SwingAnalysisCreate):
    id: int


class AnalyzeSwingRequest(BaseModel):
    profile_id: int = Field(..., gt=0)
    swing_video: str | None = Field(
        default=None, description="Uploaded video reference; not inspected by the simulator"
    )
