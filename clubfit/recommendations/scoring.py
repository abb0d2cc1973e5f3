from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from typing import Any

import pandas as pd

from ..profiles.models import ClubType, GolfProfile, Handicap, Priority
from ..swing.models import SwingAnalysisCreate
from .catalog import entry_from_row, get_clubs_for_type_and_tier, get_default_entry
from .models import ClubCatalogEntry, Corrective, PriceTier, RecommendedClubCreate

logger = logging.getLogger(__name__)

BASE_SCORE = 100.0
PATH_MISMATCH_PENALTY = 15.0
SPEED_PENALTY_PER_MPH = 0.5
BEGINNER_FORGIVENESS_PENALTY = 20.0
SCRATCH_WORKABILITY_PENALTY = 15.0
PRIORITY_PENALTY = 15.0

CANDIDATE_WINDOW = 10.0
MAX_CANDIDATES = 3

SLICE_SENTENCE = " Helps correct slice tendencies."
HOOK_SENTENCE = " Helps correct hook tendencies."
SLOW_SPEED_SENTENCE = " Optimized for moderate swing speeds."
FAST_SPEED_SENTENCE = " Designed for players with faster swing speeds."

PRIORITY_BADGES: dict[Priority, str] = {
    Priority.distance: "Maximum Distance",
    Priority.accuracy: "Most Forgiving",
    Priority.feel: "Premium Feel",
}

# Priority -> catalog rating it demands at 4 or better
_PRIORITY_RATINGS: dict[Priority, str] = {
    Priority.distance: "distance",
    Priority.accuracy: "forgiveness",
    Priority.feel: "feel",
}


def _rating(club: Mapping[str, Any], key: str) -> int | None:
    value = club.get(key)
    return int(value) if pd.notna(value) else None


def _below(club: Mapping[str, Any], key: str, threshold: int) -> bool:
    """True when the rating is missing or under *threshold*."""
    value = _rating(club, key)
    return value is None or value < threshold


def score_club(
    club: Mapping[str, Any],
    profile: GolfProfile,
    analysis: SwingAnalysisCreate,
) -> float:
    """Compute the fit score for one catalog row.

    Starts at 100 and subtracts independent penalties; the result may go
    negative. A missing rating (putters have no distance or workability)
    counts as below every threshold; a missing ideal swing speed skips the
    speed penalty.
    """
    score = BASE_SCORE
    corrective = str(club.get("corrective", Corrective.balanced.value))

    if analysis.swing_path.is_out_to_in and Corrective.slice.value not in corrective:
        score -= PATH_MISMATCH_PENALTY
    elif analysis.swing_path.is_in_to_out and Corrective.hook.value not in corrective:
        score -= PATH_MISMATCH_PENALTY

    ideal_speed = _rating(club, "ideal_swing_speed")
    if ideal_speed is not None:
        score -= abs(analysis.swing_speed - ideal_speed) * SPEED_PENALTY_PER_MPH

    if profile.handicap == Handicap.beginner and _below(club, "forgiveness", 4):
        score -= BEGINNER_FORGIVENESS_PENALTY
    elif (
        profile.handicap == Handicap.scratch
        and (_rating(club, "forgiveness") or 0) > 3
        and _below(club, "workability", 4)
    ):
        score -= SCRATCH_WORKABILITY_PENALTY

    rating_key = _PRIORITY_RATINGS.get(profile.priority)
    if rating_key and _below(club, rating_key, 4):
        score -= PRIORITY_PENALTY

    return score


def rank_clubs(
    clubs: pd.DataFrame,
    profile: GolfProfile,
    analysis: SwingAnalysisCreate,
) -> pd.DataFrame:
    """Score every row and sort best first, keeping catalog order on ties."""
    ranked = clubs.copy()
    if ranked.empty:
        ranked["_score"] = pd.Series(dtype=float)
        return ranked
    ranked["_score"] = ranked.apply(score_club, axis=1, profile=profile, analysis=analysis)
    return ranked.sort_values("_score", ascending=False, kind="stable")


def candidate_pool(ranked: pd.DataFrame) -> pd.DataFrame:
    """Rows scoring within CANDIDATE_WINDOW of the top score, inclusive."""
    if ranked.empty:
        return ranked
    top_score = ranked["_score"].iloc[0]
    return ranked.loc[ranked["_score"] >= top_score - CANDIDATE_WINDOW]


def customize_description(description: str, analysis: SwingAnalysisCreate) -> str:
    if analysis.swing_path.is_out_to_in:
        description += SLICE_SENTENCE
    elif analysis.swing_path.is_in_to_out:
        description += HOOK_SENTENCE

    if analysis.swing_speed < 70:
        description += SLOW_SPEED_SENTENCE
    elif analysis.swing_speed > 95:
        description += FAST_SPEED_SENTENCE
    return description


def badge_for(profile: GolfProfile, default_badge: str) -> str:
    return PRIORITY_BADGES.get(profile.priority, default_badge)


def select_club(
    profile: GolfProfile,
    analysis: SwingAnalysisCreate,
    club_type: str,
    price_tier: PriceTier | str,
    rng: random.Random | None = None,
    catalog: pd.DataFrame | None = None,
    defaults: pd.DataFrame | None = None,
) -> ClubCatalogEntry:
    """Pick one catalog entry for a club type and tier.

    The pick is a uniform draw among the first MAX_CANDIDATES rows of the
    candidate pool, so identical inputs do not always yield the same club.
    """
    rng = rng or random.Random()
    tier = PriceTier(price_tier)

    clubs = get_clubs_for_type_and_tier(club_type, tier, catalog=catalog)
    pool = candidate_pool(rank_clubs(clubs, profile, analysis))
    if pool.empty:
        logger.warning(
            "No %s catalog entries for %s, using default club", tier.value, club_type,
        )
        return get_default_entry(club_type, tier, defaults=defaults)

    top = pool.head(MAX_CANDIDATES)
    chosen = top.iloc[rng.randrange(len(top))]
    logger.debug(
        "%s/%s: pool of %d (top %.1f), chose %s at %.1f",
        club_type, tier.value, len(pool), pool["_score"].iloc[0],
        chosen["name"], chosen["_score"],
    )
    return entry_from_row(chosen)


def recommend(
    profile: GolfProfile,
    analysis: SwingAnalysisCreate,
    club_type: ClubType,
    price_tier: PriceTier | str,
    rng: random.Random | None = None,
    catalog: pd.DataFrame | None = None,
    defaults: pd.DataFrame | None = None,
) -> RecommendedClubCreate:
    """Build the recommendation record for one price tier (not yet stored)."""
    entry = select_club(
        profile, analysis, club_type.name, price_tier,
        rng=rng, catalog=catalog, defaults=defaults,
    )
    return RecommendedClubCreate(
        name=entry.name,
        description=customize_description(entry.description, analysis),
        price=entry.price,
        forgiveness=entry.forgiveness,
        distance=entry.distance,
        feel=entry.feel,
        price_tier=entry.price_tier,
        badge_text=badge_for(profile, entry.badge_text),
        club_type_id=club_type.id,
        profile_id=profile.id,
    )


def suggest_price_tier(profile: GolfProfile, analysis: SwingAnalysisCreate) -> PriceTier:
    """Suggest which of the three tiers best suits the golfer."""
    tier = PriceTier.mid_range
    if profile.priority == Priority.value:
        tier = PriceTier.budget
    if profile.handicap in (Handicap.low, Handicap.scratch) and analysis.swing_speed > 100:
        tier = PriceTier.premium
    if profile.handicap in (Handicap.beginner, Handicap.high) and analysis.swing_speed < 80:
        tier = PriceTier.budget
    return tier
