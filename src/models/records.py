"""
Record types for the four source tables.
File: src/models/records.py

Each dataclass mirrors one row of a loaded table.  The tables themselves
live in pandas DataFrames inside the store; these types are what the query
layer hands back to callers, so the view never has to touch a DataFrame.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

import pandas as pd

import schema as S
from utils.values import or_none


def _as_int(value) -> int:
    value = or_none(value)
    return int(value) if value is not None else 0


def _as_float(value) -> Optional[float]:
    value = or_none(value)
    return float(value) if value is not None else None


def _as_str(value) -> Optional[str]:
    value = or_none(value)
    return str(value) if value is not None else None


@dataclass(frozen=True)
class TripRecord:
    """One observed shipment.  Identity is row order; there is no key."""
    origin_raw: Optional[str]
    dest_raw: Optional[str]
    driver_name: Optional[str]
    driver_phone: Optional[str] = None
    vehicle_brand: Optional[str] = None
    vehicle_model: Optional[str] = None
    declared_price: Optional[float] = None
    route_cost: Optional[float] = None
    created_at: Optional[datetime] = None
    route_label: Optional[str] = None


@dataclass(frozen=True)
class RouteSummary:
    origin_city: str
    dest_city: str
    total_trips: int = 0
    unique_drivers: int = 0
    avg_cost: Optional[float] = None
    min_cost: Optional[float] = None
    max_cost: Optional[float] = None
    total_cost: Optional[float] = None

    @property
    def route(self) -> str:
        return f"{self.origin_city} → {self.dest_city}"

    @classmethod
    def from_row(cls, row: pd.Series) -> RouteSummary:
        return cls(
            origin_city=_as_str(row.get(S.ORIGIN_CITY)),
            dest_city=_as_str(row.get(S.DEST_CITY)),
            total_trips=_as_int(row.get(S.TOTAL_TRIPS)),
            unique_drivers=_as_int(row.get(S.UNIQUE_DRIVERS)),
            avg_cost=_as_float(row.get(S.AVG_COST)),
            min_cost=_as_float(row.get(S.MIN_COST)),
            max_cost=_as_float(row.get(S.MAX_COST)),
            total_cost=_as_float(row.get(S.TOTAL_COST)),
        )


@dataclass(frozen=True)
class DriverSummary:
    driver_name: str
    driver_phone: Optional[str] = None
    total_trips: int = 0
    unique_routes: int = 0
    avg_cost: Optional[float] = None
    total_cost: Optional[float] = None

    @classmethod
    def from_row(cls, row: pd.Series) -> DriverSummary:
        return cls(
            driver_name=_as_str(row.get(S.DRIVER_NAME)),
            driver_phone=_as_str(row.get(S.DRIVER_PHONE)),
            total_trips=_as_int(row.get(S.TOTAL_TRIPS)),
            unique_routes=_as_int(row.get(S.UNIQUE_ROUTES)),
            avg_cost=_as_float(row.get(S.AVG_COST)),
            total_cost=_as_float(row.get(S.TOTAL_COST)),
        )


@dataclass(frozen=True)
class RouteSegment:
    """A known corridor.  ``segments[0]`` is the origin, ``segments[-1]`` the destination."""
    origin_city: str
    dest_city: str
    trips: int = 0
    segments: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def waypoints(self) -> Tuple[str, ...]:
        """Intermediate cities only."""
        return self.segments[1:-1]

    @classmethod
    def from_row(cls, row: pd.Series) -> RouteSegment:
        cities = row.get(S.SEGMENTS)
        return cls(
            origin_city=_as_str(row.get(S.ORIGIN_CITY)),
            dest_city=_as_str(row.get(S.DEST_CITY)),
            trips=_as_int(row.get(S.SEGMENT_TRIPS)),
            segments=tuple(cities) if isinstance(cities, (tuple, list)) else (),
        )
