"""
On-demand rollups behind the driver and route cards.
File: src/analytics/rollup.py

Both views rescan the trip table on every call.  Trips are grouped with
``groupby(sort=False)`` so groups come out in first-seen order; each group
is then finalised into an immutable rollup and the list is sorted by trip
count with a stable sort, so ties keep that first-seen order.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pandas as pd

import schema as S
from models import DriverRouteRollup, RouteDetails, RouteDriverRollup
from store import TableStore
from utils.values import is_absent, latest, mean_or_zero, observed_amounts, or_none


def _amount_stats(group: pd.DataFrame) -> Dict[str, object]:
    """Price/cost lists and their averages for one group of trips.

    Missing or zero amounts are left out; an empty list averages to 0.
    Margin is only defined when both prices and costs were recorded.
    """
    prices = observed_amounts(group[S.PRICE])
    costs = observed_amounts(group[S.COST])
    margin = (sum(prices) - sum(costs)) / len(prices) if prices and costs else 0.0
    return dict(
        prices=tuple(prices),
        costs=tuple(costs),
        avg_price=mean_or_zero(prices),
        avg_cost=mean_or_zero(costs),
        avg_margin=margin,
    )


def _vehicles(group: pd.DataFrame) -> Tuple[str, ...]:
    seen: Dict[str, None] = {}
    for brand, model in zip(group[S.VEHICLE_BRAND], group[S.VEHICLE_MODEL]):
        if is_absent(brand) or is_absent(model):
            continue
        seen.setdefault(f"{brand} {model}", None)
    return tuple(seen)


def _unique_in_order(cities) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(c for c in cities if not is_absent(c)))


def _by_trips(rollups: list) -> list:
    return sorted(rollups, key=lambda r: r.trips, reverse=True)


class RollupAggregator:
    """Per-driver and per-route statistics recomputed from raw trips."""

    def __init__(self, store: TableStore):
        self.store = store

    def corridor_cities(self, origin_city: Optional[str], dest_city: Optional[str]) -> Tuple[str, ...]:
        """Waypoint list of the known corridor, else just the two endpoints."""
        segment = self.store.segment_for(origin_city, dest_city)
        if segment is not None:
            return segment.segments
        return (origin_city, dest_city)

    # ------------------------------------------------------------------ driver card
    def driver_details(self, driver_name: str) -> List[DriverRouteRollup]:
        trips = self.store.trips
        if trips.empty or is_absent(driver_name):
            return []
        mine = trips[trips[S.DRIVER_NAME] == driver_name]

        rollups: List[DriverRouteRollup] = []
        for (origin, dest), grp in mine.groupby([S.ORIGIN_CITY, S.DEST_CITY], sort=False, dropna=False):
            origin, dest = or_none(origin), or_none(dest)
            rollups.append(
                DriverRouteRollup(
                    origin_city=origin,
                    dest_city=dest,
                    trips=len(grp),
                    last_date=latest(grp[S.CREATED_AT]),
                    cities=self.corridor_cities(origin, dest),
                    **_amount_stats(grp),
                )
            )
        return _by_trips(rollups)

    # ------------------------------------------------------------------ route card
    def route_details(self, origin_city: str, dest_city: str) -> RouteDetails:
        trips = self.store.trips
        if trips.empty:
            route = trips
        else:
            route = trips[(trips[S.ORIGIN_CITY] == origin_city) & (trips[S.DEST_CITY] == dest_city)]

        drivers: List[RouteDriverRollup] = []
        for name, grp in route.groupby(S.DRIVER_NAME, sort=False, dropna=False):
            drivers.append(
                RouteDriverRollup(
                    driver_name=or_none(name),
                    driver_phone=or_none(grp[S.DRIVER_PHONE].iloc[0]),
                    trips=len(grp),
                    last_date=latest(grp[S.CREATED_AT]),
                    vehicles=_vehicles(grp),
                    **_amount_stats(grp),
                )
            )

        segment = self.store.segment_for(origin_city, dest_city)
        waypoints = segment.segments if segment is not None else ()
        cities = _unique_in_order([origin_city, *waypoints, dest_city])

        return RouteDetails(drivers=tuple(_by_trips(drivers)), cities=cities, total_trips=len(route))
