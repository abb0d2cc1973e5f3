"""
Profile-driven swing simulation.

There is no video analysis behind this: every metric is a heuristic over
the golfer's stated profile, with bounded randomness so two identical
profiles do not always produce identical swings.
"""
from __future__ import annotations

import logging
import math
import random

from ..profiles.models import BallFlight, Gender, GolfProfile, Handicap
from .models import ClubFace, SwingAnalysisCreate, SwingPath, Tempo

logger = logging.getLogger(__name__)

BASE_SWING_SPEED = 85

_PATH_BY_BALL_FLIGHT: dict[BallFlight, SwingPath] = {
    BallFlight.draw: SwingPath.in_to_out,
    BallFlight.fade: SwingPath.out_to_in,
    BallFlight.hook: SwingPath.severely_in_to_out,
    BallFlight.slice: SwingPath.severely_out_to_in,
    BallFlight.straight: SwingPath.neutral,
}

_FACE_BY_BALL_FLIGHT: dict[BallFlight, ClubFace] = {
    BallFlight.draw: ClubFace.slightly_closed,
    BallFlight.fade: ClubFace.slightly_open,
    BallFlight.hook: ClubFace.closed,
    BallFlight.slice: ClubFace.open,
    BallFlight.straight: ClubFace.square,
}

_GENDER_SPEED = {Gender.male: 10, Gender.female: -10}
_HANDICAP_SPEED = {
    Handicap.scratch: 10,
    Handicap.low: 5,
    Handicap.high: -5,
    Handicap.beginner: -10,
}

_IMPACT_OPTIONS = {
    Handicap.low: ["centered", "slightly heel-side", "slightly toe-side"],
    Handicap.high: ["heel-side", "toe-side", "slightly centered"],
    Handicap.beginner: ["inconsistent", "heel-side", "toe-side"],
}
_DEFAULT_IMPACT_OPTIONS = ["slightly heel-side", "slightly toe-side", "centered"]

_CONSISTENCY = {Handicap.scratch: 5, Handicap.low: 4, Handicap.high: 3}


def determine_swing_speed(profile: GolfProfile, rng: random.Random) -> int:
    """Estimate club head speed in mph.

    The result is not clamped; extreme profiles may land outside a
    realistic range.
    """
    speed = BASE_SWING_SPEED
    speed += _GENDER_SPEED.get(profile.gender, 0)
    if profile.age < 30:
        speed += 5
    elif profile.age > 60:
        speed -= 10
    speed += _HANDICAP_SPEED.get(profile.handicap, 0)
    return speed + rng.randint(-2, 2)


def determine_swing_path(profile: GolfProfile) -> SwingPath:
    return _PATH_BY_BALL_FLIGHT.get(profile.ball_flight, SwingPath.slightly_out_to_in)


def determine_club_face(profile: GolfProfile) -> ClubFace:
    return _FACE_BY_BALL_FLIGHT.get(profile.ball_flight, ClubFace.inconsistent)


def determine_tempo(profile: GolfProfile, rng: random.Random) -> Tempo:
    if profile.handicap in (Handicap.scratch, Handicap.low):
        return Tempo.moderate if rng.random() > 0.7 else Tempo.quick
    if profile.handicap == Handicap.high:
        return Tempo.moderate if rng.random() > 0.6 else Tempo.slow
    if profile.handicap == Handicap.beginner:
        return Tempo.inconsistent if rng.random() > 0.3 else Tempo.slow
    if profile.age > 60:
        return Tempo.moderate if rng.random() > 0.7 else Tempo.slow
    return rng.choice([Tempo.slow, Tempo.moderate, Tempo.quick])


def determine_impact_position(profile: GolfProfile, rng: random.Random) -> str:
    if profile.handicap == Handicap.scratch:
        return "centered"
    return rng.choice(_IMPACT_OPTIONS.get(profile.handicap, _DEFAULT_IMPACT_OPTIONS))


def determine_attack_angle(profile: GolfProfile, path: SwingPath, rng: random.Random) -> str:
    scratch = profile.handicap == Handicap.scratch
    if path.is_in_to_out:
        return "slightly upward" if scratch else "upward"
    if path.is_out_to_in:
        return "slightly downward" if scratch else "downward"
    if profile.handicap in (Handicap.scratch, Handicap.low):
        return "neutral"
    return rng.choice(["slightly downward", "slightly upward", "neutral"])


def determine_backswing_length(profile: GolfProfile, tempo: Tempo, rng: random.Random) -> str:
    if tempo == Tempo.quick:
        if profile.handicap in (Handicap.scratch, Handicap.low):
            return "three-quarter"
        return "short"
    if tempo == Tempo.slow:
        return "full"
    if profile.handicap == Handicap.scratch:
        return "optimal"
    if profile.handicap == Handicap.low:
        return "full"
    if profile.handicap == Handicap.high:
        return "over-extended" if rng.random() > 0.5 else "three-quarter"
    return "inconsistent"


def determine_follow_through(profile: GolfProfile, tempo: Tempo) -> str:
    if profile.handicap == Handicap.scratch:
        return "full balanced"
    if profile.handicap == Handicap.low:
        return "compact" if tempo == Tempo.quick else "full"
    if profile.handicap == Handicap.high:
        return "decelerated" if tempo == Tempo.slow else "abbreviated"
    return "inconsistent"


def determine_balance_rating(profile: GolfProfile, rng: random.Random) -> int:
    if profile.handicap == Handicap.scratch:
        return 5
    if profile.handicap == Handicap.low:
        return 5 if rng.random() > 0.7 else 4
    if profile.handicap == Handicap.high:
        return 3 if rng.random() > 0.7 else 2
    return 2 if rng.random() > 0.7 else 1


def determine_consistency(profile: GolfProfile) -> int:
    return _CONSISTENCY.get(profile.handicap, 2)


def determine_power_transfer(profile: GolfProfile, swing_speed: int, tempo: Tempo) -> int:
    """Rate power transfer 1-5 from handicap, speed and tempo."""
    rating = 3.0
    if profile.handicap == Handicap.scratch:
        rating += 2
    elif profile.handicap == Handicap.low:
        rating += 1
    elif profile.handicap == Handicap.beginner:
        rating -= 1

    if swing_speed > 100:
        rating += 1
    elif swing_speed < 75:
        rating -= 1

    if tempo == Tempo.moderate:
        rating += 0.5
    elif tempo == Tempo.inconsistent:
        rating -= 1

    # half-up, so 3.5 -> 4
    return max(1, min(5, math.floor(rating + 0.5)))


def simulate_swing(profile: GolfProfile, rng: random.Random | None = None) -> SwingAnalysisCreate:
    """Build a full synthetic swing analysis for *profile*.

    Persisting the result is the caller's job.
    """
    rng = rng or random.Random()

    swing_speed = determine_swing_speed(profile, rng)
    swing_path = determine_swing_path(profile)
    club_face = determine_club_face(profile)
    tempo = determine_tempo(profile, rng)

    analysis = SwingAnalysisCreate(
        swing_speed=swing_speed,
        swing_path=swing_path,
        club_face=club_face,
        tempo=tempo,
        impact_position=determine_impact_position(profile, rng),
        attack_angle=determine_attack_angle(profile, swing_path, rng),
        backswing_length=determine_backswing_length(profile, tempo, rng),
        follow_through=determine_follow_through(profile, tempo),
        balance_rating=determine_balance_rating(profile, rng),
        consistency=determine_consistency(profile),
        power_transfer=determine_power_transfer(profile, swing_speed, tempo),
        profile_id=profile.id,
    )
    logger.debug(
        "Simulated swing for profile %s: %s mph, %s path, %s tempo",
        profile.id, swing_speed, swing_path.value, tempo.value,
    )
    return analysis
