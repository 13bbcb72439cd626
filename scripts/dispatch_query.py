#!/usr/bin/env python3
"""
Dispatcher Panel Report
=======================

Loads the four dispatcher tables and prints what the panel would show:
- corridor search between two cities (exact / partial / zone tiers)
- a driver card (routes served, prices, margins)
- a route card (drivers, vehicles, waypoint cities)
- top routes and top drivers
- fleet composition

Usage (from repo root):
    python3 scripts/dispatch_query.py search Москва Казань
    python3 scripts/dispatch_query.py driver "Иванов Иван"
    python3 scripts/dispatch_query.py route Москва Казань
    python3 scripts/dispatch_query.py top --n 50
    python3 scripts/dispatch_query.py fleet --data-dir data/
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent / "src"))

from config import PanelConfig  # noqa: E402
from data_utils import LoadFailure  # noqa: E402
from panel import DispatchPanel  # noqa: E402


def print_search(panel: DispatchPanel, from_city: str, to_city: str) -> None:
    result = panel.search(from_city, to_city)
    money = panel.format_currency

    print(f"\n🔍 SEARCH {from_city} → {to_city}")
    print("=" * 50)

    print(f"\n✅ Exact matches: {len(result.exact)}")
    for route in result.exact:
        print(f"  {route.route:40} trips {route.total_trips:5d}  drivers {route.unique_drivers:4d}  "
              f"avg {money(route.avg_cost)}")
    if not result.exact:
        print("  none")

    print(f"\n🛣️ Corridor matches: {len(result.partial)}")
    for seg in result.partial:
        print(f"  {seg.origin_city} → {seg.dest_city} ({seg.trips} trips)")
        print(f"     via {' → '.join(seg.segments)}")
    if not result.partial:
        print("  none")

    print(f"\n📍 Drivers in the zone: {len(result.zone)}")
    for drv in result.zone:
        print(f"  {str(drv.driver_name):30} {panel.format_phone(drv.driver_phone):18} "
              f"trips {drv.total_trips:4d}  routes {drv.unique_routes:3d}")
    if not result.zone:
        print("  none")


def print_driver(panel: DispatchPanel, name: str) -> None:
    routes = panel.driver_details(name)
    money = panel.format_currency

    print(f"\n🚚 DRIVER {name}")
    print("=" * 50)
    if not routes:
        print("  no trips recorded")
        return
    for r in routes:
        last = r.last_date.strftime("%Y-%m-%d") if r.last_date is not None else "—"
        print(f"  {r.route:40} trips {r.trips:4d}  last {last}")
        print(f"     price {money(r.avg_price)}  cost {money(r.avg_cost)}  margin {money(r.avg_margin)}")
        if r.waypoints:
            print(f"     via {' → '.join(r.waypoints)}")


def print_route(panel: DispatchPanel, origin: str, dest: str) -> None:
    details = panel.route_details(origin, dest)
    money = panel.format_currency

    print(f"\n🗺️ ROUTE {origin} → {dest}")
    print("=" * 50)
    print(f"  Cities: {' → '.join(details.cities)}")
    print(f"  Trips:  {details.total_trips}")
    for d in details.drivers:
        print(f"  {str(d.driver_name):30} {panel.format_phone(d.driver_phone):18} trips {d.trips:4d}  "
              f"price {money(d.avg_price)}  margin {money(d.avg_margin)}")
        if d.vehicles:
            print(f"     vehicles: {', '.join(d.vehicles)}")


def print_top(panel: DispatchPanel, n: int) -> None:
    print(f"\n🏆 TOP ROUTES (choices: {panel.route_choices()})")
    print("-" * 30)
    for i, route in enumerate(panel.top_routes(n), 1):
        print(f"  {i:3d}. {route.route:40} {route.total_trips:5d} trips")

    print(f"\n🏆 TOP DRIVERS (choices: {panel.driver_choices()})")
    print("-" * 30)
    for i, drv in enumerate(panel.top_drivers(n), 1):
        print(f"  {i:3d}. {str(drv.driver_name):30} {drv.total_trips:5d} trips")


def print_fleet(panel: DispatchPanel) -> None:
    money = panel.format_currency
    overview = panel.fleet_overview()

    print("\n🚛 FLEET")
    print("=" * 50)
    print(f"  Trips with vehicle: {overview.trips_with_vehicle:,}")
    print(f"  Avg price:          {money(overview.avg_price)}")
    print(f"  Avg cost:           {money(overview.avg_cost)}")

    print("\n  Brands:")
    for stat in panel.brand_counts():
        print(f"    {stat.brand:25} {stat.trips:5d}  {stat.share:5.1f}%")
    print("\n  Average price by brand:")
    for brand, avg in panel.brand_average_prices():
        print(f"    {brand:25} {money(avg)}")
    print("\n  Models:")
    for stat in panel.model_stats():
        print(f"    {stat.model:35} {stat.trips:5d}  avg {money(stat.avg_price)}")
    print("\n  Route labels:")
    for stat in panel.route_label_stats():
        print(f"    {stat.route_label:35} {stat.trips:5d}  avg {money(stat.avg_price)}")


def main():
    """Load the dispatcher tables and print the requested view."""

    parser = argparse.ArgumentParser(description='Query the dispatcher panel tables')
    parser.add_argument('--data-dir', type=Path, default=None,
                        help='Directory with the four CSV tables (default: $DISPATCH_DATA_DIR or ./data)')
    parser.add_argument('--verbose', action='store_true', help='Log table loading details')
    sub = parser.add_subparsers(dest='command', required=True)

    p_search = sub.add_parser('search', help='Corridor search between two cities')
    p_search.add_argument('from_city')
    p_search.add_argument('to_city')

    p_driver = sub.add_parser('driver', help='Driver card')
    p_driver.add_argument('name')

    p_route = sub.add_parser('route', help='Route card')
    p_route.add_argument('origin')
    p_route.add_argument('dest')

    p_top = sub.add_parser('top', help='Top routes and drivers')
    p_top.add_argument('--n', type=int, default=None, help='Rows to show (default: 20)')

    sub.add_parser('fleet', help='Fleet composition')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {'data_dir': args.data_dir} if args.data_dir else {}
    config = PanelConfig.from_env(**overrides)

    print("🚛 DISPATCHER PANEL")
    print("=" * 60)
    print(f"Data directory: {config.data_dir}")

    try:
        panel = DispatchPanel.load(config)
    except LoadFailure as e:
        print(f"❌ Load failed: {e}")
        return 1

    counts = panel.counts()
    print(f"{counts['trips']:,} trips, {counts['routes']:,} routes, {counts['drivers']:,} drivers")

    if args.command == 'search':
        print_search(panel, args.from_city, args.to_city)
    elif args.command == 'driver':
        print_driver(panel, args.name)
    elif args.command == 'route':
        print_route(panel, args.origin, args.dest)
    elif args.command == 'top':
        print_top(panel, args.n if args.n is not None else config.default_top_n)
    elif args.command == 'fleet':
        print_fleet(panel)

    return 0


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
