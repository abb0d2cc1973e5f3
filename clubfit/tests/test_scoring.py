from __future__ import annotations

import random

import pandas as pd
import pytest

from clubfit.profiles.models import ClubType, GolfProfile
from clubfit.recommendations.catalog import (
    CATALOG_COLUMNS,
    club_type_names,
    get_catalog,
    get_clubs_for_type_and_tier,
)
from clubfit.recommendations.models import PRICE_TIERS, PriceTier
from clubfit.recommendations.scoring import (
    FAST_SPEED_SENTENCE,
    HOOK_SENTENCE,
    SLICE_SENTENCE,
    SLOW_SPEED_SENTENCE,
    badge_for,
    candidate_pool,
    customize_description,
    rank_clubs,
    recommend,
    score_club,
    select_club,
    suggest_price_tier,
)
from clubfit.swing.models import SwingAnalysisCreate


class PickIndex:
    def __init__(self, index: int):
        self._index = index

    def randrange(self, start, stop=None, step=1):
        upper = start if stop is None else stop
        return min(self._index, upper - 1)


def _profile(**overrides) -> GolfProfile:
    data = {
        "id": 7,
        "height_feet": 6,
        "height_inches": 0,
        "weight": 190,
        "age": 35,
        "gender": "male",
        "handicap": "mid",
        "ball_flight": "straight",
        "priority": "versatility",
    }
    data.update(overrides)
    return GolfProfile(**data)


def _analysis(**overrides) -> SwingAnalysisCreate:
    data = {
        "swing_speed": 85,
        "swing_path": "neutral",
        "club_face": "square",
        "tempo": "moderate",
        "profile_id": 7,
    }
    data.update(overrides)
    return SwingAnalysisCreate(**data)


_ROW = {
    "club_type": "Drivers",
    "name": "Test Driver",
    "price": 30000,
    "description": "A test club.",
    "badge_text": "Test Badge",
    "forgiveness": 4,
    "distance": 4,
    "feel": 4,
    "workability": 4,
    "ideal_swing_speed": 85,
    "corrective": "balanced",
    "price_tier": "mid-range",
}


def _club(**overrides) -> dict:
    return {**_ROW, **overrides}


def _catalog(*rows: dict) -> pd.DataFrame:
    return pd.DataFrame(list(rows), columns=CATALOG_COLUMNS)


DRIVERS = ClubType(id=1, name="Drivers", description="Maximum distance off the tee", icon_name="sports_golf")
PUTTERS = ClubType(id=6, name="Putters", description="Precision on the green", icon_name="sports_golf")


# ── Score rules ──────────────────────────────────────────────────────────


class TestScoreClub:
    def test_perfect_fit_scores_100(self):
        assert score_club(_club(), _profile(), _analysis()) == 100

    def test_slice_path_penalised_unless_slice_corrective(self):
        analysis = _analysis(swing_path="severely-out-to-in")
        assert score_club(_club(corrective="balanced"), _profile(), analysis) == 85
        assert score_club(_club(corrective="hook"), _profile(), analysis) == 85
        assert score_club(_club(corrective="slice"), _profile(), analysis) == 100

    def test_hook_path_penalised_unless_hook_corrective(self):
        analysis = _analysis(swing_path="in-to-out")
        assert score_club(_club(corrective="slice"), _profile(), analysis) == 85
        assert score_club(_club(corrective="hook"), _profile(), analysis) == 100

    def test_speed_gap_costs_half_a_point_per_mph(self):
        assert score_club(_club(ideal_swing_speed=85), _profile(), _analysis(swing_speed=95)) == 95
        assert score_club(_club(ideal_swing_speed=100), _profile(), _analysis(swing_speed=87)) == 93.5

    def test_beginner_needs_forgiveness(self):
        beginner = _profile(handicap="beginner")
        assert score_club(_club(forgiveness=3), beginner, _analysis()) == 80
        assert score_club(_club(forgiveness=4), beginner, _analysis()) == 100

    def test_scratch_penalised_for_forgiving_unworkable_club(self):
        scratch = _profile(handicap="scratch")
        assert score_club(_club(forgiveness=5, workability=2), scratch, _analysis()) == 85
        assert score_club(_club(forgiveness=5, workability=4), scratch, _analysis()) == 100
        assert score_club(_club(forgiveness=3, workability=2), scratch, _analysis()) == 100

    @pytest.mark.parametrize(
        "priority, rating_key",
        [("distance", "distance"), ("accuracy", "forgiveness"), ("feel", "feel")],
    )
    def test_priority_penalty(self, priority, rating_key):
        profile = _profile(priority=priority)
        assert score_club(_club(**{rating_key: 3}), profile, _analysis()) == 85
        assert score_club(_club(**{rating_key: 4}), profile, _analysis()) == 100

    def test_value_priority_has_no_penalty(self):
        profile = _profile(priority="value")
        assert score_club(_club(distance=1, feel=1), profile, _analysis()) == 100

    def test_penalties_add_up_and_may_go_negative(self):
        profile = _profile(handicap="beginner", priority="distance")
        analysis = _analysis(swing_path="out-to-in", swing_speed=200)
        club = _club(forgiveness=2, distance=2, ideal_swing_speed=80, corrective="hook")
        # 100 - 15 (path) - 60 (speed) - 20 (beginner) - 15 (distance)
        assert score_club(club, profile, analysis) == -10

    def test_missing_ideal_speed_skips_speed_penalty(self):
        putter = _club(distance=None, workability=None, ideal_swing_speed=None)
        assert score_club(putter, _profile(), _analysis(swing_speed=120)) == 100

    def test_missing_ratings_count_as_low(self):
        putter = _club(forgiveness=4, distance=None, workability=None, ideal_swing_speed=None)
        scratch = _profile(handicap="scratch")
        assert score_club(putter, scratch, _analysis()) == 85
        assert score_club(putter, _profile(priority="distance"), _analysis()) == 85
        # 100 - 15 (scratch workability) - 15 (distance)
        assert score_club(putter, _profile(handicap="scratch", priority="distance"), _analysis()) == 70
        assert score_club({**putter, "forgiveness": 3}, scratch, _analysis()) == 100


def test_beginner_penalty_is_exactly_twenty_across_catalog():
    catalog = get_catalog()
    analysis = _analysis(swing_speed=80)
    beginner = _profile(handicap="beginner")
    mid = _profile(handicap="mid")
    for _, row in catalog.iterrows():
        with_penalty = score_club(row, beginner, analysis)
        without_penalty = score_club(row, mid, analysis)
        if row["forgiveness"] < 4:
            assert without_penalty - 20 == with_penalty
        else:
            assert without_penalty == with_penalty


# ── Ranking and candidate pool ───────────────────────────────────────────


def test_rank_clubs_sorts_best_first_and_keeps_ties_in_order():
    catalog = _catalog(
        _club(name="A", ideal_swing_speed=95),
        _club(name="B"),
        _club(name="C"),
    )
    ranked = rank_clubs(catalog, _profile(), _analysis())
    assert list(ranked["name"]) == ["B", "C", "A"]
    assert list(ranked["_score"]) == [100, 100, 95]


def test_rank_clubs_handles_empty_frame():
    ranked = rank_clubs(_catalog(), _profile(), _analysis())
    assert ranked.empty
    assert candidate_pool(ranked).empty


def test_candidate_pool_window_is_inclusive():
    catalog = _catalog(
        _club(name="top"),
        _club(name="edge", ideal_swing_speed=105),  # 90
        _club(name="out", ideal_swing_speed=105, feel=3),  # 90, feel not prioritised
        _club(name="far", ideal_swing_speed=106),  # 89.5
    )
    pool = candidate_pool(rank_clubs(catalog, _profile(), _analysis()))
    assert list(pool["name"]) == ["top", "edge", "out"]


# ── Selection ────────────────────────────────────────────────────────────


def test_select_club_draws_from_first_three_of_pool():
    catalog = _catalog(*[_club(name=f"club-{i}") for i in range(5)])
    picks = [
        select_club(_profile(), _analysis(), "Drivers", "mid-range", rng=PickIndex(i), catalog=catalog).name
        for i in range(3)
    ]
    assert picks == ["club-0", "club-1", "club-2"]

    rng = random.Random(5)
    for _ in range(50):
        chosen = select_club(_profile(), _analysis(), "Drivers", "mid-range", rng=rng, catalog=catalog)
        assert chosen.name in {"club-0", "club-1", "club-2"}


def test_selected_club_is_within_window_of_best_for_every_tier():
    rng = random.Random(11)
    profiles = [
        (_profile(handicap="beginner", priority="accuracy"), _analysis(swing_speed=68, swing_path="severely-out-to-in")),
        (_profile(handicap="scratch", priority="distance"), _analysis(swing_speed=112, swing_path="in-to-out")),
        (_profile(handicap="mid", priority="feel"), _analysis(swing_speed=90)),
    ]
    for club_type in club_type_names():
        for tier in PRICE_TIERS:
            for profile, analysis in profiles:
                ranked = rank_clubs(get_clubs_for_type_and_tier(club_type, tier), profile, analysis)
                best = ranked["_score"].max()
                chosen = select_club(profile, analysis, club_type, tier, rng=rng)
                chosen_score = ranked.loc[ranked["name"] == chosen.name, "_score"].iloc[0]
                assert chosen_score >= best - 10


def test_empty_tier_falls_back_to_default_club():
    catalog = _catalog(_club(price_tier="budget"))
    entry = select_club(_profile(), _analysis(), "Drivers", "premium", rng=PickIndex(0), catalog=catalog)
    assert entry.name == "TaylorMade Stealth Plus"
    assert entry.price == 59999
    assert entry.badge_text == "Top Performance"


def test_unknown_price_tier_is_rejected():
    with pytest.raises(ValueError):
        select_club(_profile(), _analysis(), "Drivers", "luxury")


# ── Description and badge ────────────────────────────────────────────────


def test_description_mentions_path_and_speed():
    assert customize_description("Base.", _analysis(swing_path="out-to-in", swing_speed=65)) == (
        "Base." + SLICE_SENTENCE + SLOW_SPEED_SENTENCE
    )
    assert customize_description("Base.", _analysis(swing_path="severely-in-to-out", swing_speed=100)) == (
        "Base." + HOOK_SENTENCE + FAST_SPEED_SENTENCE
    )
    assert customize_description("Base.", _analysis(swing_speed=70)) == "Base."
    assert customize_description("Base.", _analysis(swing_speed=95)) == "Base."


def test_badge_overrides_by_priority():
    assert badge_for(_profile(priority="distance"), "Default") == "Maximum Distance"
    assert badge_for(_profile(priority="accuracy"), "Default") == "Most Forgiving"
    assert badge_for(_profile(priority="feel"), "Default") == "Premium Feel"
    assert badge_for(_profile(priority="value"), "Default") == "Default"
    assert badge_for(_profile(priority="versatility"), "Default") == "Default"


# ── Recommendation records ───────────────────────────────────────────────


def test_slicer_always_gets_slice_sentence():
    profile = _profile(ball_flight="slice")
    analysis = _analysis(swing_path="severely-out-to-in")
    rng = random.Random(2)
    for club_type in club_type_names():
        for tier in PRICE_TIERS:
            club_type_record = ClubType(id=1, name=club_type, description="", icon_name="sports_golf")
            rec = recommend(profile, analysis, club_type_record, tier, rng=rng)
            assert SLICE_SENTENCE in rec.description


def test_scratch_distance_slicer_premium_driver():
    profile = _profile(handicap="scratch", priority="distance", ball_flight="slice")
    analysis = _analysis(swing_speed=105, swing_path="severely-out-to-in", club_face="open")

    ranked = rank_clubs(get_clubs_for_type_and_tier("Drivers", "premium"), profile, analysis)
    candidates = set(candidate_pool(ranked).head(3)["name"])

    for seed in range(10):
        rec = recommend(profile, analysis, DRIVERS, PriceTier.premium, rng=random.Random(seed))
        assert rec.name in candidates
        assert rec.badge_text == "Maximum Distance"
        assert rec.price_tier == PriceTier.premium
        assert rec.description.endswith(SLICE_SENTENCE + FAST_SPEED_SENTENCE)
        assert rec.club_type_id == 1
        assert rec.profile_id == 7


def test_slice_corrective_entry_keeps_full_score():
    profile = _profile(handicap="scratch", priority="distance", ball_flight="slice")
    analysis = _analysis(swing_speed=105, swing_path="severely-out-to-in")
    catalog = _catalog(
        _club(name="Anti Slice", corrective="slice", forgiveness=3, distance=5, workability=5,
              ideal_swing_speed=105, price_tier="premium"),
        _club(name="Neutral", corrective="balanced", forgiveness=3, distance=5, workability=5,
              ideal_swing_speed=105, price_tier="premium"),
        _club(name="Hook Fix", corrective="hook", forgiveness=3, distance=5, workability=5,
              ideal_swing_speed=105, price_tier="premium"),
    )
    ranked = rank_clubs(catalog, profile, analysis)
    assert ranked.iloc[0]["name"] == "Anti Slice"
    assert ranked.iloc[0]["_score"] == 100

    for index in range(3):
        rec = recommend(profile, analysis, DRIVERS, "premium", rng=PickIndex(index), catalog=catalog)
        assert rec.name == "Anti Slice"


def test_scratch_budget_putter_is_the_least_forgiving():
    profile = _profile(handicap="scratch", ball_flight="straight", priority="versatility")
    analysis = _analysis(swing_speed=105)
    picks = {
        recommend(profile, analysis, PUTTERS, PriceTier.budget, rng=random.Random(seed)).name
        for seed in range(30)
    }
    assert picks == {"Cleveland Huntington Beach"}


def test_beginner_putters_have_no_distance():
    profile = _profile(handicap="beginner", priority="distance")
    analysis = _analysis(swing_speed=70, tempo="inconsistent")
    for tier in PRICE_TIERS:
        rec = recommend(profile, analysis, PUTTERS, tier, rng=random.Random(0))
        assert rec.distance is None
        assert rec.club_type_id == 6
        assert rec.display_price.startswith("£")


# ── Suggested tier ───────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "handicap, priority, speed, expected",
    [
        ("mid", "versatility", 90, PriceTier.mid_range),
        ("mid", "value", 90, PriceTier.budget),
        ("low", "versatility", 101, PriceTier.premium),
        ("scratch", "value", 105, PriceTier.premium),
        ("beginner", "distance", 75, PriceTier.budget),
        ("high", "feel", 79, PriceTier.budget),
        ("high", "feel", 80, PriceTier.mid_range),
    ],
)
def test_suggest_price_tier(handicap, priority, speed, expected):
    profile = _profile(handicap=handicap, priority=priority)
    assert suggest_price_tier(profile, _analysis(swing_speed=speed)) == expected
