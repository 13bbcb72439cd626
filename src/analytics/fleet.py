"""
Fleet composition figures for the vehicles tab.
File: src/analytics/fleet.py

All functions take the normalised trip table and return plain lists,
ordered busiest / most expensive first.  Ties keep first-seen order.
"""

from __future__ import annotations

from typing import List, Tuple

import pandas as pd

import schema as S
from config import MODEL_STATS_LIMIT, ROUTE_LABEL_LIMIT
from models import BrandCount, FleetOverview, ModelStat, RouteLabelStat
from utils.values import is_absent, mean_or_zero, observed_amounts


def _present(col: pd.Series) -> pd.Series:
    return ~col.map(is_absent).astype(bool)


def _per_trip(total: float, trips: pd.DataFrame) -> float:
    return total / len(trips) if len(trips) else 0.0


def fleet_overview(trips: pd.DataFrame) -> FleetOverview:
    """Headline tiles: trips with a known vehicle, average price and cost.

    The tile averages spread the recorded totals over every trip, so an
    unpriced trip counts as zero here (unlike the per-brand and per-model
    figures, which only average recorded prices).
    """
    return FleetOverview(
        trips_with_vehicle=int(_present(trips[S.VEHICLE_BRAND]).sum()) if not trips.empty else 0,
        avg_price=_per_trip(sum(observed_amounts(trips[S.PRICE])), trips),
        avg_cost=_per_trip(sum(observed_amounts(trips[S.COST])), trips),
    )


def brand_counts(trips: pd.DataFrame) -> List[BrandCount]:
    """Trips per brand with the brand's share of all trips, in percent."""
    if trips.empty:
        return []
    branded = trips[_present(trips[S.VEHICLE_BRAND])]
    counts = branded.groupby(S.VEHICLE_BRAND, sort=False).size()
    stats = [
        BrandCount(brand=str(brand), trips=int(n), share=_per_trip(100.0 * int(n), trips))
        for brand, n in counts.items()
    ]
    return sorted(stats, key=lambda s: s.trips, reverse=True)


def brand_average_prices(trips: pd.DataFrame) -> List[Tuple[str, float]]:
    """Average declared price per brand, over trips that have a price."""
    if trips.empty:
        return []
    branded = trips[_present(trips[S.VEHICLE_BRAND])]
    pairs = []
    for brand, grp in branded.groupby(S.VEHICLE_BRAND, sort=False):
        prices = observed_amounts(grp[S.PRICE])
        if prices:
            pairs.append((str(brand), mean_or_zero(prices)))
    return sorted(pairs, key=lambda p: p[1], reverse=True)


def model_stats(trips: pd.DataFrame, limit: int = MODEL_STATS_LIMIT) -> List[ModelStat]:
    """Most common "brand model" pairs with their average price (0 if unpriced)."""
    if trips.empty:
        return []
    known = trips[_present(trips[S.VEHICLE_BRAND]) & _present(trips[S.VEHICLE_MODEL])]
    labels = known[S.VEHICLE_BRAND].astype(str) + " " + known[S.VEHICLE_MODEL].astype(str)

    stats = [
        ModelStat(model=str(model), trips=len(grp), avg_price=mean_or_zero(observed_amounts(grp[S.PRICE])))
        for model, grp in known.groupby(labels, sort=False)
    ]
    return sorted(stats, key=lambda s: s.trips, reverse=True)[:limit]


def route_label_stats(trips: pd.DataFrame, limit: int = ROUTE_LABEL_LIMIT) -> List[RouteLabelStat]:
    """Busiest operator route labels with price/cost totals."""
    if trips.empty:
        return []
    labelled = trips[_present(trips[S.ROUTE_LABEL])]
    stats = [
        RouteLabelStat(
            route_label=str(label),
            trips=len(grp),
            total_price=sum(observed_amounts(grp[S.PRICE])),
            total_cost=sum(observed_amounts(grp[S.COST])),
        )
        for label, grp in labelled.groupby(S.ROUTE_LABEL, sort=False)
    ]
    return sorted(stats, key=lambda s: s.trips, reverse=True)[:limit]
