"""
Tests for the three-tier corridor search
File: tests/test_corridor.py
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.append(str(Path(__file__).parent.parent / "src"))

from config import ZONE_LIMIT
from data_utils import store_from_records
from matching import CorridorMatcher, follows_in_corridor
from models import DriverSummary, RouteSegment, TripRecord


class TestCorridorSearch:
    """Search over the shared sample store."""

    @pytest.fixture(autouse=True)
    def _matcher(self, store):
        self.matcher = CorridorMatcher(store)

    def test_exact_match(self):
        result = self.matcher.search("Москва", "Казань")
        assert [(r.origin_city, r.dest_city) for r in result.exact] == [("Москва", "Казань")]
        assert result.exact[0].total_trips == 3
        assert result.exact[0].avg_cost == 850.0

    def test_exact_match_ignores_case(self):
        a = self.matcher.search("Москва", "Казань")
        b = self.matcher.search("москва", "КАЗАНЬ")
        assert a == b

    @pytest.mark.parametrize("from_city, to_city", [
        ("", "Казань"), ("Москва", ""), (None, "Казань"), ("Москва", None), ("  ", "Казань"),
    ])
    def test_empty_query_returns_nothing(self, from_city, to_city):
        result = self.matcher.search(from_city, to_city)
        assert result.exact == [] and result.partial == [] and result.zone == []
        assert result.is_empty

    def test_partial_via_corridor(self):
        result = self.matcher.search("Владимир", "Казань")
        assert result.exact == []
        assert [(s.origin_city, s.dest_city) for s in result.partial] == [("Москва", "Казань")]
        assert result.partial[0].waypoints == ("Владимир", "Нижний")

    def test_partial_respects_direction(self):
        assert self.matcher.search("Казань", "Владимир").partial == []
        # Казань sits between Самара and Уфа
        assert len(self.matcher.search("Казань", "Уфа").partial) == 1
        assert self.matcher.search("Уфа", "Самара").partial == []

    def test_zone_is_either_endpoint(self):
        # Сидоров departed Тула, Петров arrived in Уфа; neither did both
        result = self.matcher.search("Тула", "Уфа")
        assert [d.driver_name for d in result.zone] == ["Петров", "Сидоров"]

    def test_zone_keeps_driver_table_order(self):
        result = self.matcher.search("Москва", "Казань")
        assert [d.driver_name for d in result.zone] == ["Петров", "Иванов", "Сидоров"]

    def test_no_match_is_empty_per_tier(self):
        result = self.matcher.search("Владивосток", "Омск")
        assert result.is_empty


@pytest.mark.parametrize("from_city, to_city, expected", [
    ("A", "C", True),
    ("A", "B", True),
    ("B", "C", True),
    ("C", "A", False),
    ("B", "A", False),
    ("A", "A", False),
    ("a", "c", True),
    ("A", "X", False),
])
def test_follows_in_corridor(from_city, to_city, expected):
    assert follows_in_corridor(("A", "B", "C"), from_city, to_city) is expected


def test_partial_directionality_on_store():
    store = store_from_records(
        trips=[],
        route_segments=[RouteSegment("A", "C", trips=1, segments=("A", "B", "C"))],
    )
    matcher = CorridorMatcher(store)
    assert len(matcher.search("A", "C").partial) == 1
    assert len(matcher.search("A", "B").partial) == 1
    assert matcher.search("C", "A").partial == []
    assert matcher.search("B", "A").partial == []


def test_zone_is_capped():
    names = [f"Водитель {i:02d}" for i in range(15)]
    trips = [TripRecord("Омск, вокзал", "Томск", name) for name in names]
    drivers = [DriverSummary(name, total_trips=1) for name in names]
    store = store_from_records(trips, driver_summaries=drivers)

    zone = CorridorMatcher(store).search("Омск", "Барнаул").zone
    assert len(zone) == ZONE_LIMIT
    assert [d.driver_name for d in zone] == names[:ZONE_LIMIT]


def test_zone_limit_is_configurable():
    names = [f"D{i}" for i in range(5)]
    store = store_from_records(
        [TripRecord("Омск", "Томск", n) for n in names],
        driver_summaries=[DriverSummary(n) for n in names],
    )
    assert len(CorridorMatcher(store, zone_limit=3).search("Омск", "Томск").zone) == 3
