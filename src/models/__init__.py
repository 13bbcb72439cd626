"""
Models package initialization.
File: src/models/__init__.py

Imports all record and result types for easy access:
from models import TripRecord, RouteSummary, DriverRouteRollup
"""

from .records import (
    TripRecord,
    RouteSummary,
    DriverSummary,
    RouteSegment,
)

from .rollups import (
    DriverRouteRollup,
    RouteDriverRollup,
    RouteDetails,
    SearchResult,
    FleetOverview,
    BrandCount,
    ModelStat,
    RouteLabelStat,
)

# Make all classes available at package level
__all__ = [
    # Source tables
    'TripRecord',
    'RouteSummary',
    'DriverSummary',
    'RouteSegment',

    # Derived results
    'DriverRouteRollup',
    'RouteDriverRollup',
    'RouteDetails',
    'SearchResult',
    'FleetOverview',
    'BrandCount',
    'ModelStat',
    'RouteLabelStat',
]
