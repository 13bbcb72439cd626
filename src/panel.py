"""
Dispatcher panel query surface.
File: src/panel.py

One object wires the loaded store to the matcher, the rollups, the
rankings and the formatters.  The view layer owns its own state (active tab,
selected driver, modal flags) and only calls the methods below; every call
takes and returns plain data.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from analytics import RollupAggregator, top_n, top_n_choices
from analytics import fleet
from config import PanelConfig
from data_utils import load_tables
from matching import CorridorMatcher
from models import (BrandCount, DriverRouteRollup, DriverSummary, FleetOverview, ModelStat,
                    RouteDetails, RouteLabelStat, RouteSummary, SearchResult)
from store import TableStore
from utils.formatting import format_currency, format_phone

logger = logging.getLogger(__name__)


class DispatchPanel:

    def __init__(self, store: TableStore, config: Optional[PanelConfig] = None):
        self.config = config or PanelConfig()
        self.store = store
        self.matcher = CorridorMatcher(store, zone_limit=self.config.zone_limit)
        self.rollups = RollupAggregator(store)

    @classmethod
    def load(cls, config: Optional[PanelConfig] = None) -> DispatchPanel:
        """Read all four tables and build a panel; raises ``LoadFailure``."""
        config = config or PanelConfig.from_env()
        return cls(load_tables(config), config)

    # ------------------------------------------------------------------ header
    def counts(self) -> dict:
        return self.store.counts()

    def distinct_cities(self) -> List[str]:
        return self.store.distinct_cities()

    # ------------------------------------------------------------------ search tab
    def search(self, from_city: Optional[str], to_city: Optional[str]) -> SearchResult:
        result = self.matcher.search(from_city, to_city)
        logger.debug(
            "search %r -> %r: %d exact, %d partial, %d zone",
            from_city, to_city, len(result.exact), len(result.partial), len(result.zone),
        )
        return result

    # ------------------------------------------------------------------ cards
    def driver_details(self, driver_name: str) -> List[DriverRouteRollup]:
        return self.rollups.driver_details(driver_name)

    def route_details(self, origin_city: str, dest_city: str) -> RouteDetails:
        return self.rollups.route_details(origin_city, dest_city)

    # ------------------------------------------------------------------ routes / drivers tabs
    def top_routes(self, n: Optional[int] = None) -> List[RouteSummary]:
        n = self.config.default_top_n if n is None else n
        ranked = top_n(self.store.route_summaries, n)
        return [RouteSummary.from_row(row) for _, row in ranked.iterrows()]

    def top_drivers(self, n: Optional[int] = None) -> List[DriverSummary]:
        n = self.config.default_top_n if n is None else n
        ranked = top_n(self.store.driver_summaries, n)
        return [DriverSummary.from_row(row) for _, row in ranked.iterrows()]

    def route_choices(self) -> Tuple[int, ...]:
        return top_n_choices(self.store.route_summaries, self.config.top_n_choices)

    def driver_choices(self) -> Tuple[int, ...]:
        return top_n_choices(self.store.driver_summaries, self.config.top_n_choices)

    # ------------------------------------------------------------------ vehicles tab
    def fleet_overview(self) -> FleetOverview:
        return fleet.fleet_overview(self.store.trips)

    def brand_counts(self) -> List[BrandCount]:
        return fleet.brand_counts(self.store.trips)

    def brand_average_prices(self) -> List[Tuple[str, float]]:
        return fleet.brand_average_prices(self.store.trips)

    def model_stats(self) -> List[ModelStat]:
        return fleet.model_stats(self.store.trips)

    def route_label_stats(self) -> List[RouteLabelStat]:
        return fleet.route_label_stats(self.store.trips)

    # ------------------------------------------------------------------ formatting
    def format_currency(self, amount: Any) -> str:
        return format_currency(amount, self.config.currency_suffix, self.config.placeholder)

    def format_phone(self, phone: Any) -> str:
        return format_phone(phone, self.config.placeholder)
