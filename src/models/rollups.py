"""
Derived, per-request results.
File: src/models/rollups.py

Nothing here is cached: every instance is rebuilt from the trip table when
a driver or route card is opened, so it always reflects the loaded data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pandas as pd

from .records import DriverSummary, RouteSegment, RouteSummary


@dataclass(frozen=True)
class DriverRouteRollup:
    """One route a driver has served, summarised from their trips."""
    origin_city: Optional[str]
    dest_city: Optional[str]
    trips: int
    prices: Tuple[float, ...] = ()
    costs: Tuple[float, ...] = ()
    last_date: Optional[pd.Timestamp] = None
    cities: Tuple[str, ...] = ()
    avg_price: float = 0.0
    avg_cost: float = 0.0
    avg_margin: float = 0.0

    @property
    def route(self) -> str:
        return f"{self.origin_city} → {self.dest_city}"

    @property
    def waypoints(self) -> Tuple[str, ...]:
        return self.cities[1:-1]


@dataclass(frozen=True)
class RouteDriverRollup:
    """One driver who served a route, summarised from their trips on it."""
    driver_name: Optional[str]
    driver_phone: Optional[str]
    trips: int
    prices: Tuple[float, ...] = ()
    costs: Tuple[float, ...] = ()
    last_date: Optional[pd.Timestamp] = None
    vehicles: Tuple[str, ...] = ()
    avg_price: float = 0.0
    avg_cost: float = 0.0
    avg_margin: float = 0.0


@dataclass(frozen=True)
class RouteDetails:
    drivers: Tuple[RouteDriverRollup, ...]
    cities: Tuple[str, ...]
    total_trips: int


@dataclass(frozen=True)
class SearchResult:
    """Three independent match tiers; any of them may be empty."""
    exact: List[RouteSummary] = field(default_factory=list)
    partial: List[RouteSegment] = field(default_factory=list)
    zone: List[DriverSummary] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.exact or self.partial or self.zone)


# ────────────────────────────────────────────────────────────────────────────
# Fleet composition
# ────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FleetOverview:
    trips_with_vehicle: int
    avg_price: float
    avg_cost: float


@dataclass(frozen=True)
class BrandCount:
    brand: str
    trips: int
    share: float        # percent of all trips


@dataclass(frozen=True)
class ModelStat:
    model: str          # "brand model"
    trips: int
    avg_price: float


@dataclass(frozen=True)
class RouteLabelStat:
    route_label: str
    trips: int
    total_price: float
    total_cost: float

    @property
    def avg_price(self) -> float:
        return self.total_price / self.trips if self.trips else 0.0
