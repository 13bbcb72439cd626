from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

# policy constants -----------------------------------------------------------
ZONE_LIMIT = 10                  # drivers shown in the zone tier
TOP_N_CHOICES = (20, 50, 100)    # selector presets, "all" is appended per table
DEFAULT_TOP_N = 20
MODEL_STATS_LIMIT = 20
ROUTE_LABEL_LIMIT = 10

CURRENCY_SUFFIX = "₽"
PLACEHOLDER = "—"
SEGMENT_SEPARATOR = " → "

DATA_DIR_ENV = "DISPATCH_DATA_DIR"


@dataclass(frozen=True)
class PanelConfig:
    """Where the four source tables live and how the panel presents them."""
    data_dir: Path = Path("data")
    trips_file: str = "gotovie_dannie.csv"
    route_summary_file: str = "route_summary.csv"
    driver_summary_file: str = "driver_summary.csv"
    segments_file: str = "top30_routes_with_segments.csv"

    zone_limit: int = ZONE_LIMIT
    top_n_choices: Tuple[int, ...] = TOP_N_CHOICES
    default_top_n: int = DEFAULT_TOP_N

    currency_suffix: str = CURRENCY_SUFFIX
    placeholder: str = PLACEHOLDER
    segment_separator: str = SEGMENT_SEPARATOR

    @property
    def trips_path(self) -> Path:
        return Path(self.data_dir) / self.trips_file

    @property
    def route_summary_path(self) -> Path:
        return Path(self.data_dir) / self.route_summary_file

    @property
    def driver_summary_path(self) -> Path:
        return Path(self.data_dir) / self.driver_summary_file

    @property
    def segments_path(self) -> Path:
        return Path(self.data_dir) / self.segments_file

    @classmethod
    def from_env(cls, **overrides) -> PanelConfig:
        """Build a config, taking ``data_dir`` from $DISPATCH_DATA_DIR if set."""
        env_dir = os.environ.get(DATA_DIR_ENV)
        if env_dir and "data_dir" not in overrides:
            overrides["data_dir"] = Path(env_dir)
        return cls(**overrides)
