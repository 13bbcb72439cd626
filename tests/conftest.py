"""
Shared fixtures: a small dispatcher dataset built from records.
File: tests/conftest.py
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.append(str(Path(__file__).parent.parent / "src"))

from data_utils import store_from_records  # noqa: E402
from models import DriverSummary, RouteSegment, RouteSummary, TripRecord  # noqa: E402


def trip(origin, dest, driver, price=None, cost=None, date=None, phone=None,
         brand=None, model=None, label=None):
    return TripRecord(
        origin_raw=origin,
        dest_raw=dest,
        driver_name=driver,
        driver_phone=phone,
        vehicle_brand=brand,
        vehicle_model=model,
        declared_price=price,
        route_cost=cost,
        created_at=date,
        route_label=label,
    )


@pytest.fixture
def sample_trips():
    return [
        trip("Москва, ул. Ленина, 1", "Казань, ул. Баумана, 5", "Иванов",
             price=1000, cost=800, date=datetime(2024, 1, 10), phone="79991234567",
             brand="Volvo", model="FH", label="МСК-КЗН"),
        trip("Москва г, Тверская 7", "Казань", "Иванов",
             price=1200, cost=900, date=datetime(2024, 2, 1), phone="79991234567",
             brand="Volvo", model="FH", label="МСК-КЗН"),
        trip("Москва", "Самара, Московское ш.", "Иванов",
             cost=500, date=datetime(2023, 12, 1), phone="79991234567",
             brand="MAN", model="TGX"),
        trip("Москва, склад 3", "Казань, порт", "Петров",
             price=0, phone="79990000000", brand="Scania", model="R450", label="МСК-КЗН"),
        trip("Казань", "Уфа, центр", "Петров",
             price=2000, cost=1500, date=datetime(2024, 3, 5), phone="79990000000",
             brand="Scania", model="R450"),
        trip("Тула, Советская 2", "Казань", "Сидоров",
             price=700, cost=600, brand="Volvo", model="FM"),
    ]


@pytest.fixture
def sample_routes():
    return [
        RouteSummary("Москва", "Казань", total_trips=3, unique_drivers=2, avg_cost=850.0,
                     min_cost=800.0, max_cost=900.0, total_cost=1700.0),
        RouteSummary("Казань", "Уфа", total_trips=1, unique_drivers=1, avg_cost=1500.0),
        RouteSummary("Москва", "Самара", total_trips=1, unique_drivers=1, avg_cost=500.0),
        RouteSummary("Тула", "Казань", total_trips=1, unique_drivers=1, avg_cost=600.0),
    ]


@pytest.fixture
def sample_drivers():
    return [
        DriverSummary("Петров", "79990000000", total_trips=2, unique_routes=2),
        DriverSummary("Иванов", "79991234567", total_trips=3, unique_routes=2),
        DriverSummary("Сидоров", None, total_trips=1, unique_routes=1),
        DriverSummary("Кузнецов", None, total_trips=0, unique_routes=0),
    ]


@pytest.fixture
def sample_segments():
    return [
        RouteSegment("Москва", "Казань", trips=30,
                     segments=("Москва", "Владимир", "Нижний", "Казань")),
        RouteSegment("Самара", "Уфа", trips=5, segments=("Самара", "Казань", "Уфа")),
    ]


@pytest.fixture
def store(sample_trips, sample_routes, sample_drivers, sample_segments):
    return store_from_records(sample_trips, sample_routes, sample_drivers, sample_segments)
