from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_DATA_DIR = Path(__file__).resolve().parent / "data"


def _env_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class FittingConfig:
    random_seed: int | None = _env_int("CLUBFIT_RANDOM_SEED")
    catalog_path: Path = Path(os.getenv("CLUBFIT_CATALOG_PATH", str(_DATA_DIR / "club_catalog.csv")))
    defaults_path: Path = Path(os.getenv("CLUBFIT_DEFAULTS_PATH", str(_DATA_DIR / "default_clubs.csv")))
    gbp_conversion_rate: Decimal = Decimal(os.getenv("CLUBFIT_GBP_RATE", "0.78"))
    log_level: str = os.getenv("CLUBFIT_LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        # logging only accepts upper-case level names
        object.__setattr__(self, "log_level", self.log_level.strip().upper())


DEFAULT_FITTING_CONFIG = FittingConfig()
