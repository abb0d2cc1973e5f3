from __future__ import annotations

import logging
import threading
from typing import Protocol

from ..deals.models import RetailerDeal, RetailerDealCreate
from ..profiles.models import ClubType, ClubTypeCreate, GolfProfile, GolfProfileCreate
from ..recommendations.models import RecommendedClub, RecommendedClubCreate
from ..swing.models import SwingAnalysis, SwingAnalysisCreate

logger = logging.getLogger(__name__)

CLUB_TYPE_SEED: list[ClubTypeCreate] = [
    ClubTypeCreate(name="Drivers", description="Maximum distance off the tee", icon_name="sports_golf"),
    ClubTypeCreate(name="Fairway Woods", description="Long shots from the fairway", icon_name="sports_golf"),
    ClubTypeCreate(name="Hybrids", description="Versatile clubs for various shots", icon_name="sports_golf"),
    ClubTypeCreate(name="Irons", description="Precision approach shots", icon_name="sports_golf"),
    ClubTypeCreate(name="Wedges", description="Short game and bunker shots", icon_name="sports_golf"),
    ClubTypeCreate(name="Putters", description="Precision on the green", icon_name="sports_golf"),
]


class FittingRepository(Protocol):
    def list_club_types(self) -> list[ClubType]: ...

    def get_club_type(self, club_type_id: int) -> ClubType | None: ...

    def create_golf_profile(self, profile: GolfProfileCreate) -> GolfProfile: ...

    def get_golf_profile(self, profile_id: int) -> GolfProfile | None: ...

    def create_swing_analysis(self, analysis: SwingAnalysisCreate) -> SwingAnalysis: ...

    def get_swing_analysis(self, analysis_id: int) -> SwingAnalysis | None: ...

    def get_swing_analysis_by_profile_id(self, profile_id: int) -> SwingAnalysis | None: ...

    def create_recommended_club(self, club: RecommendedClubCreate) -> RecommendedClub: ...

    def get_recommended_club(self, club_id: int) -> RecommendedClub | None: ...

    def get_recommended_clubs_by_profile_id(self, profile_id: int) -> list[RecommendedClub]: ...

    def get_recommended_clubs_by_club_type_and_profile_id(
        self, club_type_id: int, profile_id: int
    ) -> list[RecommendedClub]: ...

    def create_retailer_deal(self, deal: RetailerDealCreate) -> RetailerDeal: ...

    def get_retailer_deals_by_club_id(self, club_id: int) -> list[RetailerDeal]: ...


class InMemoryFittingRepository:
    """Keyed maps sharing one auto-increment id counter.

    Every public method takes the lock, so ids stay unique when requests
    are served from a thread pool.
    """

    def __init__(self, club_types: list[ClubTypeCreate] | None = None) -> None:
        self._lock = threading.Lock()
        self._next_id = 1
        self._club_types: dict[int, ClubType] = {}
        self._profiles: dict[int, GolfProfile] = {}
        self._analyses: dict[int, SwingAnalysis] = {}
        # one live analysis per profile
        self._analysis_by_profile: dict[int, int] = {}
        self._clubs: dict[int, RecommendedClub] = {}
        self._deals: dict[int, RetailerDeal] = {}

        for club_type in CLUB_TYPE_SEED if club_types is None else club_types:
            self._create_club_type(club_type)

    def _allocate_id_locked(self) -> int:
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def _create_club_type(self, club_type: ClubTypeCreate) -> ClubType:
        with self._lock:
            record = ClubType(id=self._allocate_id_locked(), **club_type.model_dump())
            self._club_types[record.id] = record
            return record

    # ── Club types ──────────────────────────────────────────────────────

    def list_club_types(self) -> list[ClubType]:
        with self._lock:
            return list(self._club_types.values())

    def get_club_type(self, club_type_id: int) -> ClubType | None:
        with self._lock:
            return self._club_types.get(club_type_id)

    # ── Profiles ────────────────────────────────────────────────────────

    def create_golf_profile(self, profile: GolfProfileCreate) -> GolfProfile:
        with self._lock:
            record = GolfProfile(id=self._allocate_id_locked(), **profile.model_dump())
            self._profiles[record.id] = record
        logger.info("Created golf profile %s", record.id)
        return record

    def get_golf_profile(self, profile_id: int) -> GolfProfile | None:
        with self._lock:
            return self._profiles.get(profile_id)

    # ── Swing analyses ──────────────────────────────────────────────────

    def create_swing_analysis(self, analysis: SwingAnalysisCreate) -> SwingAnalysis:
        """Store *analysis*, replacing any earlier one for the same profile."""
        with self._lock:
            record = SwingAnalysis(id=self._allocate_id_locked(), **analysis.model_dump())
            previous_id = self._analysis_by_profile.get(record.profile_id)
            if previous_id is not None:
                del self._analyses[previous_id]
            self._analyses[record.id] = record
            self._analysis_by_profile[record.profile_id] = record.id

        if previous_id is not None:
            logger.info(
                "Replaced swing analysis %s with %s for profile %s",
                previous_id, record.id, record.profile_id,
            )
        else:
            logger.info("Created swing analysis %s for profile %s", record.id, record.profile_id)
        return record

    def get_swing_analysis(self, analysis_id: int) -> SwingAnalysis | None:
        with self._lock:
            return self._analyses.get(analysis_id)

    def get_swing_analysis_by_profile_id(self, profile_id: int) -> SwingAnalysis | None:
        with self._lock:
            analysis_id = self._analysis_by_profile.get(profile_id)
            return self._analyses.get(analysis_id) if analysis_id is not None else None

    # ── Recommended clubs ───────────────────────────────────────────────

    def create_recommended_club(self, club: RecommendedClubCreate) -> RecommendedClub:
        with self._lock:
            record = RecommendedClub(
                id=self._allocate_id_locked(),
                **club.model_dump(exclude={"display_price"}),
            )
            self._clubs[record.id] = record
            return record

    def get_recommended_club(self, club_id: int) -> RecommendedClub | None:
        with self._lock:
            return self._clubs.get(club_id)

    def get_recommended_clubs_by_profile_id(self, profile_id: int) -> list[RecommendedClub]:
        with self._lock:
            return [c for c in self._clubs.values() if c.profile_id == profile_id]

    def get_recommended_clubs_by_club_type_and_profile_id(
        self, club_type_id: int, profile_id: int
    ) -> list[RecommendedClub]:
        with self._lock:
            return [
                c for c in self._clubs.values()
                if c.club_type_id == club_type_id and c.profile_id == profile_id
            ]

    # ── Retailer deals ──────────────────────────────────────────────────

    def create_retailer_deal(self, deal: RetailerDealCreate) -> RetailerDeal:
        with self._lock:
            record = RetailerDeal(
                id=self._allocate_id_locked(),
                **deal.model_dump(exclude={"display_price"}),
            )
            self._deals[record.id] = record
            return record

    def get_retailer_deals_by_club_id(self, club_id: int) -> list[RetailerDeal]:
        with self._lock:
            return [d for d in self._deals.values() if d.club_id == club_id]


_repository: InMemoryFittingRepository | None = None


def get_repository() -> InMemoryFittingRepository:
    """Return the process-wide repository, creating it on first call."""
    global _repository
    if _repository is None:
        _repository = InMemoryFittingRepository()
    return _repository


def reset_repository() -> None:
    global _repository
    _repository = None
