"""
Analytics package: rollups, rankings and fleet figures over the loaded tables.
"""

from .rollup import RollupAggregator
from .ranking import top_n, top_n_choices, is_show_all
from .fleet import (
    fleet_overview,
    brand_counts,
    brand_average_prices,
    model_stats,
    route_label_stats,
)

__all__ = [
    'RollupAggregator',
    'top_n',
    'top_n_choices',
    'is_show_all',
    'fleet_overview',
    'brand_counts',
    'brand_average_prices',
    'model_stats',
    'route_label_stats',
]
