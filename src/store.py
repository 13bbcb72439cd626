from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

import schema as S
from matching.city import distinct_cities
from models import RouteSegment


@dataclass(frozen=True, eq=False)
class TableStore:
    """The four loaded tables.

    Written exactly once (by the loader) and only read afterwards.  Every
    query builds fresh result objects, so two overlapping requests never
    share mutable state.  Frames are expected to be already normalised
    (see ``data_utils``); build through :meth:`from_frames`.
    """
    trips: pd.DataFrame
    route_summaries: pd.DataFrame
    driver_summaries: pd.DataFrame
    route_segments: pd.DataFrame
    _cities: List[str] = field(default_factory=list, repr=False)

    @classmethod
    def from_frames(
        cls,
        trips: pd.DataFrame,
        route_summaries: pd.DataFrame,
        driver_summaries: pd.DataFrame,
        route_segments: pd.DataFrame,
    ) -> TableStore:
        cities = distinct_cities(trips[S.ORIGIN_CITY], trips[S.DEST_CITY])
        return cls(trips, route_summaries, driver_summaries, route_segments, cities)

    # ------------------------------------------------------------------ api
    def distinct_cities(self) -> List[str]:
        """Sorted city tokens seen in any trip, for search suggestions."""
        return list(self._cities)

    def counts(self) -> Dict[str, int]:
        return {
            "trips": len(self.trips),
            "routes": len(self.route_summaries),
            "drivers": len(self.driver_summaries),
            "corridors": len(self.route_segments),
        }

    def segment_for(self, origin_city: str, dest_city: str) -> Optional[RouteSegment]:
        """First corridor whose endpoints equal the pair exactly (case‑sensitive)."""
        seg = self.route_segments
        if seg.empty:
            return None
        hit = seg[(seg[S.ORIGIN_CITY] == origin_city) & (seg[S.DEST_CITY] == dest_city)]
        if hit.empty:
            return None
        found = RouteSegment.from_row(hit.iloc[0])
        return found if found.segments else None
