from __future__ import annotations

import logging
import random

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import DEFAULT_FITTING_CONFIG
from .deals.models import RetailerDeal
from .profiles.models import ClubType, GolfProfile, GolfProfileCreate
from .recommendations.models import (
    RecommendationRequest,
    RecommendedClub,
    SuggestedTierResponse,
)
from .recommendations.scoring import suggest_price_tier
from .recommendations.service import generate_recommendations
from .storage.repository import InMemoryFittingRepository, get_repository
from .swing.models import AnalyzeSwingRequest, SwingAnalysis, SwingAnalysisCreate
from .swing.simulator import simulate_swing

logging.basicConfig(
    level=DEFAULT_FITTING_CONFIG.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Golf Club Fitting API", version="1.0.0")

_rng = random.Random(DEFAULT_FITTING_CONFIG.random_seed)


def get_rng() -> random.Random:
    return _rng


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


def _require_profile(repo: InMemoryFittingRepository, profile_id: int) -> GolfProfile:
    profile = repo.get_golf_profile(profile_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


def _require_swing_analysis(repo: InMemoryFittingRepository, profile_id: int) -> SwingAnalysis:
    analysis = repo.get_swing_analysis_by_profile_id(profile_id)
    if analysis is None:
        raise HTTPException(status_code=404, detail="Swing analysis not found for this profile")
    return analysis


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/club-types", response_model=list[ClubType])
def list_club_types(repo: InMemoryFittingRepository = Depends(get_repository)) -> list[ClubType]:
    return repo.list_club_types()


@app.get("/api/club-types/{club_type_id}", response_model=ClubType)
def get_club_type(
    club_type_id: int,
    repo: InMemoryFittingRepository = Depends(get_repository),
) -> ClubType:
    club_type = repo.get_club_type(club_type_id)
    if club_type is None:
        raise HTTPException(status_code=404, detail="Club type not found")
    return club_type


# ── Profiles & swing analysis ────────────────────────────────────────────


@app.post("/api/profiles", response_model=GolfProfile, status_code=201)
def create_profile(
    body: GolfProfileCreate,
    repo: InMemoryFittingRepository = Depends(get_repository),
) -> GolfProfile:
    return repo.create_golf_profile(body)


@app.get("/api/profiles/{profile_id}", response_model=GolfProfile)
def get_profile(
    profile_id: int,
    repo: InMemoryFittingRepository = Depends(get_repository),
) -> GolfProfile:
    return _require_profile(repo, profile_id)


@app.post("/api/swing-analyses", response_model=SwingAnalysis, status_code=201)
def create_swing_analysis(
    body: SwingAnalysisCreate,
    repo: InMemoryFittingRepository = Depends(get_repository),
) -> SwingAnalysis:
    _require_profile(repo, body.profile_id)
    return repo.create_swing_analysis(body)


@app.get("/api/profiles/{profile_id}/swing-analysis", response_model=SwingAnalysis)
def get_swing_analysis(
    profile_id: int,
    repo: InMemoryFittingRepository = Depends(get_repository),
) -> SwingAnalysis:
    return _require_swing_analysis(repo, profile_id)


@app.post("/api/analyze-swing", response_model=SwingAnalysis)
def analyze_swing(
    body: AnalyzeSwingRequest,
    repo: InMemoryFittingRepository = Depends(get_repository),
    rng: random.Random = Depends(get_rng),
) -> SwingAnalysis:
    profile = _require_profile(repo, body.profile_id)
    try:
        analysis = simulate_swing(profile, rng)
    except Exception as exc:
        logger.exception("Swing analysis failed for profile %s", profile.id)
        raise HTTPException(status_code=500, detail="Failed to analyze swing") from exc
    return repo.create_swing_analysis(analysis)


# ── Recommendations & deals ──────────────────────────────────────────────


@app.post("/api/recommendations", response_model=list[RecommendedClub])
def create_recommendations(
    body: RecommendationRequest,
    repo: InMemoryFittingRepository = Depends(get_repository),
    rng: random.Random = Depends(get_rng),
) -> list[RecommendedClub]:
    profile = _require_profile(repo, body.profile_id)
    club_type = repo.get_club_type(body.club_type_id)
    if club_type is None:
        raise HTTPException(status_code=404, detail="Club type not found")
    analysis = _require_swing_analysis(repo, profile.id)

    try:
        return generate_recommendations(repo, profile, analysis, club_type, rng)
    except Exception as exc:
        logger.exception(
            "Recommendation failed for profile %s / club type %s", profile.id, club_type.id,
        )
        raise HTTPException(status_code=500, detail="Failed to generate recommendations") from exc


@app.get("/api/profiles/{profile_id}/recommendations", response_model=list[RecommendedClub])
def list_profile_recommendations(
    profile_id: int,
    repo: InMemoryFittingRepository = Depends(get_repository),
) -> list[RecommendedClub]:
    return repo.get_recommended_clubs_by_profile_id(profile_id)


@app.get(
    "/api/profiles/{profile_id}/club-types/{club_type_id}/recommendations",
    response_model=list[RecommendedClub],
)
def list_profile_club_type_recommendations(
    profile_id: int,
    club_type_id: int,
    repo: InMemoryFittingRepository = Depends(get_repository),
) -> list[RecommendedClub]:
    return repo.get_recommended_clubs_by_club_type_and_profile_id(club_type_id, profile_id)


@app.get("/api/profiles/{profile_id}/suggested-tier", response_model=SuggestedTierResponse)
def suggested_tier(
    profile_id: int,
    repo: InMemoryFittingRepository = Depends(get_repository),
) -> SuggestedTierResponse:
    profile = _require_profile(repo, profile_id)
    analysis = _require_swing_analysis(repo, profile_id)
    return SuggestedTierResponse(
        profile_id=profile_id,
        price_tier=suggest_price_tier(profile, analysis),
    )


@app.get("/api/clubs/{club_id}", response_model=RecommendedClub)
def get_club(
    club_id: int,
    repo: InMemoryFittingRepository = Depends(get_repository),
) -> RecommendedClub:
    club = repo.get_recommended_club(club_id)
    if club is None:
        raise HTTPException(status_code=404, detail="Club not found")
    return club


@app.get("/api/clubs/{club_id}/deals", response_model=list[RetailerDeal])
def list_club_deals(
    club_id: int,
    repo: InMemoryFittingRepository = Depends(get_repository),
) -> list[RetailerDeal]:
    return repo.get_retailer_deals_by_club_id(club_id)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
