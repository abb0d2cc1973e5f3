from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..config import DEFAULT_FITTING_CONFIG, FittingConfig
from .models import ClubCatalogEntry, Corrective, PriceTier

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: list[str] = [
    "club_type",
    "name",
    "price",
    "description",
    "badge_text",
    "forgiveness",
    "distance",
    "feel",
    "workability",
    "ideal_swing_speed",
    "corrective",
    "price_tier",
]

# Putters carry no distance, workability or ideal swing speed
_NULLABLE_INT_COLUMNS = ["distance", "workability", "ideal_swing_speed"]

_catalog: pd.DataFrame | None = None
_defaults: pd.DataFrame | None = None


def _load(path: Path) -> pd.DataFrame:
    df = pd.read_csv(
        path,
        dtype={column: "Int64" for column in _NULLABLE_INT_COLUMNS},
        keep_default_na=False,
        na_values={column: [""] for column in _NULLABLE_INT_COLUMNS},
    )
    missing = set(CATALOG_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(f"{path} is missing catalog columns: {sorted(missing)}")

    valid_tiers = {tier.value for tier in PriceTier}
    bad_tiers = set(df["price_tier"]) - valid_tiers
    if bad_tiers:
        raise ValueError(f"{path} has unknown price tiers: {sorted(bad_tiers)}")

    valid_correctives = {corrective.value for corrective in Corrective}
    bad_correctives = set(df["corrective"]) - valid_correctives
    if bad_correctives:
        raise ValueError(f"{path} has unknown corrective tags: {sorted(bad_correctives)}")

    logger.info("Loaded %d catalog rows from %s", len(df), path)
    return df[CATALOG_COLUMNS]


def get_catalog(config: FittingConfig = DEFAULT_FITTING_CONFIG) -> pd.DataFrame:
    """Return the full in-memory club catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = _load(config.catalog_path)
    return _catalog


def get_defaults(config: FittingConfig = DEFAULT_FITTING_CONFIG) -> pd.DataFrame:
    """Return the fallback club per (club type, price tier)."""
    global _defaults
    if _defaults is None:
        _defaults = _load(config.defaults_path)
    return _defaults


def club_type_names(catalog: pd.DataFrame | None = None) -> list[str]:
    df = get_catalog() if catalog is None else catalog
    return list(dict.fromkeys(df["club_type"]))


def get_clubs_for_type_and_tier(
    club_type: str,
    price_tier: PriceTier | str,
    catalog: pd.DataFrame | None = None,
) -> pd.DataFrame:
    """Catalog rows for one club type and price tier, in catalog order."""
    df = get_catalog() if catalog is None else catalog
    tier = PriceTier(price_tier)
    mask = (df["club_type"] == club_type) & (df["price_tier"] == tier.value)
    return df.loc[mask].copy()


def _opt_int(value) -> int | None:
    return int(value) if pd.notna(value) else None


def entry_from_row(row: pd.Series) -> ClubCatalogEntry:
    return ClubCatalogEntry(
        club_type=row["club_type"],
        name=row["name"],
        price=int(row["price"]),
        description=row["description"],
        badge_text=row["badge_text"],
        forgiveness=int(row["forgiveness"]),
        distance=_opt_int(row["distance"]),
        feel=int(row["feel"]),
        workability=_opt_int(row["workability"]),
        ideal_swing_speed=_opt_int(row["ideal_swing_speed"]),
        corrective=row["corrective"],
        price_tier=row["price_tier"],
    )


def get_default_entry(
    club_type: str,
    price_tier: PriceTier | str,
    defaults: pd.DataFrame | None = None,
) -> ClubCatalogEntry:
    """Hardcoded fallback used when a catalog tier has no entries."""
    df = get_defaults() if defaults is None else defaults
    tier = PriceTier(price_tier)
    match = df.loc[(df["club_type"] == club_type) & (df["price_tier"] == tier.value)]
    if match.empty:
        # Unknown club types fall back to the Drivers defaults
        match = df.loc[(df["club_type"] == "Drivers") & (df["price_tier"] == tier.value)]
    if match.empty:
        raise ValueError(f"No default club configured for {club_type!r} / {tier.value!r}")
    return entry_from_row(match.iloc[0])


def clear_catalog() -> None:
    global _catalog, _defaults
    _catalog = None
    _defaults = None
