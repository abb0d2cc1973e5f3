from __future__ import annotations

import logging
import random
import time

from ..deals.generator import generate_deals
from ..profiles.models import ClubType, GolfProfile
from ..storage.repository import FittingRepository
from ..swing.models import SwingAnalysisCreate
from .models import PRICE_TIERS, RecommendedClub
from .scoring import recommend

logger = logging.getLogger(__name__)


def generate_recommendations(
    repository: FittingRepository,
    profile: GolfProfile,
    analysis: SwingAnalysisCreate,
    club_type: ClubType,
    rng: random.Random | None = None,
) -> list[RecommendedClub]:
    """Recommend and store one club per price tier, with retailer deals for each.

    Returned in tier order: budget, mid-range, premium.
    """
    start_time = time.time()
    rng = rng or random.Random()

    stored: list[RecommendedClub] = []
    for tier in PRICE_TIERS:
        club = repository.create_recommended_club(
            recommend(profile, analysis, club_type, tier, rng=rng)
        )
        for deal in generate_deals(club.id, club.price):
            repository.create_retailer_deal(deal)
        stored.append(club)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.info(
        "Recommended %s for profile %s in %sms: %s",
        club_type.name, profile.id, elapsed_ms, ", ".join(c.name for c in stored),
    )
    return stored
