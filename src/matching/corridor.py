"""Directory: src/matching/corridor.py"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

import pandas as pd

import schema as S
from config import ZONE_LIMIT
from models import DriverSummary, RouteSegment, RouteSummary, SearchResult
from .city import norm_city

if TYPE_CHECKING:
    from store import TableStore


def follows_in_corridor(cities: Sequence[str], from_city: str, to_city: str) -> bool:
    """True if ``to_city`` appears strictly after ``from_city`` in ``cities``.

    Direction matters: ``("A", "B", "C")`` serves A➜C and A➜B, never C➜A.
    """
    wanted_from, wanted_to = norm_city(from_city), norm_city(to_city)
    normed = [norm_city(c) for c in cities]
    if wanted_from not in normed:
        return False
    start = normed.index(wanted_from)
    return wanted_to in normed[start + 1:]


class CorridorMatcher:
    """Answer "who serves A ➜ B" at three confidence tiers.

    * **exact**   – route summaries whose endpoints are A and B
    * **partial** – known corridors passing through A and later B
    * **zone**    – drivers with any trip leaving A *or* arriving in B,
      first ``zone_limit`` in table order (a wide net, not a ranking)
    """

    def __init__(self, store: TableStore, zone_limit: int = ZONE_LIMIT):
        self.store = store
        self.zone_limit = zone_limit

    # helper --------------------------------------------------------------
    @staticmethod
    def _city_mask(column: pd.Series, city: Optional[str]) -> pd.Series:
        wanted = norm_city(city)
        return column.map(norm_city) == wanted

    # tiers ---------------------------------------------------------------
    def exact(self, from_city: str, to_city: str) -> List[RouteSummary]:
        routes = self.store.route_summaries
        if routes.empty:
            return []
        mask = (self._city_mask(routes[S.ORIGIN_CITY], from_city)
                & self._city_mask(routes[S.DEST_CITY], to_city))
        return [RouteSummary.from_row(row) for _, row in routes[mask].iterrows()]

    def partial(self, from_city: str, to_city: str) -> List[RouteSegment]:
        segs = self.store.route_segments
        if segs.empty:
            return []
        mask = segs[S.SEGMENTS].map(
            lambda cities: bool(cities) and follows_in_corridor(cities, from_city, to_city)
        ).astype(bool)
        return [RouteSegment.from_row(row) for _, row in segs[mask].iterrows()]

    def zone(self, from_city: str, to_city: str) -> List[DriverSummary]:
        trips, drivers = self.store.trips, self.store.driver_summaries
        if trips.empty or drivers.empty:
            return []
        touches = (self._city_mask(trips[S.ORIGIN_CITY], from_city)
                   | self._city_mask(trips[S.DEST_CITY], to_city))
        names = set(trips.loc[touches, S.DRIVER_NAME].dropna())
        hit = drivers[drivers[S.DRIVER_NAME].isin(names)].head(self.zone_limit)
        return [DriverSummary.from_row(row) for _, row in hit.iterrows()]

    # public --------------------------------------------------------------
    def search(self, from_city: Optional[str], to_city: Optional[str]) -> SearchResult:
        if norm_city(from_city) in (None, "") or norm_city(to_city) in (None, ""):
            return SearchResult()
        return SearchResult(
            exact=self.exact(from_city, to_city),
            partial=self.partial(from_city, to_city),
            zone=self.zone(from_city, to_city),
        )
