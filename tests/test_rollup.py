"""
Test suite for driver and route rollups
File: tests/test_rollup.py
"""

import sys
from datetime import datetime
from pathlib import Path

import pandas as pd
import pytest

# Add src to path for imports
sys.path.append(str(Path(__file__).parent.parent / "src"))

from analytics import RollupAggregator
from data_utils import store_from_records
from models import RouteSegment, TripRecord


def make_aggregator(trips, segments=()):
    return RollupAggregator(store_from_records(trips, route_segments=segments))


class TestDriverDetails:
    """Per-driver route rollups."""

    @pytest.fixture(autouse=True)
    def _agg(self, store):
        self.agg = RollupAggregator(store)

    def test_groups_by_route_busiest_first(self):
        routes = self.agg.driver_details("Иванов")
        assert [r.route for r in routes] == ["Москва → Казань", "Москва → Самара"]
        assert [r.trips for r in routes] == [2, 1]

    def test_route_stats(self):
        top = self.agg.driver_details("Иванов")[0]
        assert top.prices == (1000.0, 1200.0)
        assert top.costs == (800.0, 900.0)
        assert top.avg_price == 1100
        assert top.avg_cost == 850
        assert top.avg_margin == 250
        assert top.last_date == pd.Timestamp(2024, 2, 1)

    def test_missing_price_averages_to_zero(self):
        samara = self.agg.driver_details("Иванов")[1]
        assert samara.prices == ()
        assert samara.avg_price == 0
        assert samara.avg_cost == 500
        assert samara.avg_margin == 0    # margin needs both prices and costs

    def test_zero_price_is_not_an_observation(self):
        moscow = [r for r in self.agg.driver_details("Петров") if r.dest_city == "Казань"][0]
        assert moscow.prices == ()
        assert moscow.avg_price == 0
        assert moscow.last_date is None

    def test_cities_from_known_corridor(self):
        routes = self.agg.driver_details("Иванов")
        assert routes[0].cities == ("Москва", "Владимир", "Нижний", "Казань")
        assert routes[0].waypoints == ("Владимир", "Нижний")

    def test_cities_fall_back_to_endpoints(self):
        routes = self.agg.driver_details("Иванов")
        assert routes[1].cities == ("Москва", "Самара")
        assert routes[1].waypoints == ()

    def test_unknown_driver(self):
        assert self.agg.driver_details("Кузнецов") == []
        assert self.agg.driver_details("") == []

    def test_fresh_objects_each_call(self):
        first = self.agg.driver_details("Иванов")
        second = self.agg.driver_details("Иванов")
        assert first == second
        assert first is not second


def test_two_trips_on_one_route():
    agg = make_aggregator([
        TripRecord("Москва", "Казань", "Иванов", declared_price=1000, route_cost=800),
        TripRecord("Москва", "Казань", "Иванов", declared_price=1200, route_cost=900),
    ])
    routes = agg.driver_details("Иванов")
    assert len(routes) == 1
    r = routes[0]
    assert r.route == "Москва → Казань"
    assert (r.trips, r.avg_price, r.avg_cost, r.avg_margin) == (2, 1100, 850, 250)


def test_average_of_recorded_prices():
    agg = make_aggregator([
        TripRecord("A", "B", "X", declared_price=100),
        TripRecord("A", "B", "X"),
        TripRecord("A", "B", "X", declared_price=200),
    ])
    r = agg.driver_details("X")[0]
    assert r.trips == 3
    assert r.avg_price == 150


def test_ties_keep_first_seen_order():
    agg = make_aggregator([
        TripRecord("A", "B", "X"),
        TripRecord("C", "D", "X"),
        TripRecord("E", "F", "X"),
        TripRecord("C", "D", "X"),
        TripRecord("G", "H", "X"),
    ])
    assert [r.route for r in agg.driver_details("X")] == [
        "C → D", "A → B", "E → F", "G → H",
    ]


def test_trip_without_city_still_counts():
    agg = make_aggregator([
        TripRecord(None, "B", "X", declared_price=10),
        TripRecord("A", "B", "X", declared_price=20),
    ])
    routes = agg.driver_details("X")
    assert sum(r.trips for r in routes) == 2
    assert {r.origin_city for r in routes} == {None, "A"}


def test_margin_divides_by_price_count():
    agg = make_aggregator([
        TripRecord("A", "B", "X", declared_price=300, route_cost=100),
        TripRecord("A", "B", "X", declared_price=300),
    ])
    r = agg.driver_details("X")[0]
    # (600 - 100) / 2
    assert r.avg_margin == 250


class TestRouteDetails:
    """Per-route driver rollups."""

    @pytest.fixture(autouse=True)
    def _agg(self, store):
        self.agg = RollupAggregator(store)

    def test_drivers_busiest_first(self):
        details = self.agg.route_details("Москва", "Казань")
        assert details.total_trips == 3
        assert [d.driver_name for d in details.drivers] == ["Иванов", "Петров"]
        assert [d.trips for d in details.drivers] == [2, 1]

    def test_driver_stats(self):
        ivanov, petrov = self.agg.route_details("Москва", "Казань").drivers
        assert ivanov.driver_phone == "79991234567"
        assert ivanov.vehicles == ("Volvo FH",)
        assert ivanov.avg_price == 1100
        assert ivanov.avg_margin == 250
        assert ivanov.last_date == pd.Timestamp(2024, 2, 1)

        assert petrov.vehicles == ("Scania R450",)
        assert petrov.avg_price == 0
        assert petrov.avg_cost == 0

    def test_cities_include_waypoints(self):
        details = self.agg.route_details("Москва", "Казань")
        assert details.cities == ("Москва", "Владимир", "Нижний", "Казань")

    def test_cities_without_corridor(self):
        details = self.agg.route_details("Тула", "Казань")
        assert details.cities == ("Тула", "Казань")
        assert [d.driver_name for d in details.drivers] == ["Сидоров"]

    def test_route_without_trips(self):
        details = self.agg.route_details("Омск", "Томск")
        assert details.drivers == ()
        assert details.total_trips == 0
        assert details.cities == ("Омск", "Томск")

    def test_route_match_is_case_sensitive(self):
        assert self.agg.route_details("москва", "казань").total_trips == 0


def test_route_vehicles_distinct_in_order():
    agg = make_aggregator([
        TripRecord("A", "B", "X", vehicle_brand="MAN", vehicle_model="TGX"),
        TripRecord("A", "B", "X", vehicle_brand="Volvo", vehicle_model="FH"),
        TripRecord("A", "B", "X", vehicle_brand="MAN", vehicle_model="TGX"),
        TripRecord("A", "B", "X", vehicle_brand="DAF"),
    ])
    driver = agg.route_details("A", "B").drivers[0]
    assert driver.vehicles == ("MAN TGX", "Volvo FH")


def test_route_last_date_is_latest():
    agg = make_aggregator([
        TripRecord("A", "B", "X", created_at=datetime(2024, 5, 1)),
        TripRecord("A", "B", "X", created_at=datetime(2024, 7, 1)),
        TripRecord("A", "B", "X", created_at=datetime(2024, 6, 1)),
        TripRecord("A", "B", "X"),
    ])
    assert agg.route_details("A", "B").drivers[0].last_date == pd.Timestamp(2024, 7, 1)


def test_route_cities_are_distinct():
    agg = make_aggregator(
        [TripRecord("A", "C", "X")],
        segments=[RouteSegment("A", "C", trips=1, segments=("A", "B", "C"))],
    )
    assert agg.route_details("A", "C").cities == ("A", "B", "C")
