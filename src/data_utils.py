from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from dataclasses import asdict
from typing import Dict, Iterable, List, Optional

import pandas as pd

import schema as S
from config import PanelConfig, SEGMENT_SEPARATOR
from matching.city import extract_cities
from models import DriverSummary, RouteSegment, RouteSummary, TripRecord
from store import TableStore
from utils.values import is_absent, object_column, phone_text

logger = logging.getLogger(__name__)


class LoadFailure(RuntimeError):
    """One of the four source tables could not be read; nothing was loaded."""

    def __init__(self, table: str, reason: str):
        super().__init__(f"{table}: {reason}")
        self.table = table
        self.reason = reason


def load_raw_data(path: str | Path) -> pd.DataFrame:
    """
    Load a raw CSV into a DataFrame.
    """
    df = pd.read_csv(path, low_memory=False, skip_blank_lines=True)
    logger.info("Loaded %s with shape %s", Path(path).name, df.shape)
    return df


# ────────────────────────────────────────────────────────────────────────────
# Schema adapters: raw frame ➜ canonical frame
# ────────────────────────────────────────────────────────────────────────────

def _require(df: pd.DataFrame, required: List[str], table: str) -> None:
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise LoadFailure(table, f"missing required columns: {missing}")


def _with_columns(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    """Add any absent optional column as all‑missing."""
    for col in columns:
        if col not in df.columns:
            df[col] = None
    return df


def normalise_trips(df: pd.DataFrame) -> pd.DataFrame:
    """
    Map either trip export (wide Cyrillic headers or canonical names) onto the
    canonical schema, coerce types, and pre‑extract origin/destination cities.
    """
    df = df.rename(columns=S.RAW_TRIP_COLUMNS).copy()
    _require(df, S.TRIP_REQUIRED, "trips")
    df = _with_columns(df, S.TRIP_COLUMNS)

    for col in (S.PRICE, S.COST):
        df[col] = pd.to_numeric(df[col], errors="coerce")
    df[S.CREATED_AT] = pd.to_datetime(df[S.CREATED_AT], errors="coerce")
    df[S.DRIVER_PHONE] = object_column(map(phone_text, df[S.DRIVER_PHONE]), df.index)

    df[S.ORIGIN_CITY] = extract_cities(df[S.ORIGIN_RAW])
    df[S.DEST_CITY] = extract_cities(df[S.DEST_RAW])

    unresolved = int((df[S.ORIGIN_CITY].isna() | df[S.DEST_CITY].isna()).sum())
    if unresolved:
        logger.debug("%d trips without a recognisable origin or destination city", unresolved)

    return df.reset_index(drop=True)


def normalise_route_summaries(df: pd.DataFrame) -> pd.DataFrame:
    _require(df, S.ROUTE_SUMMARY_REQUIRED, "route_summary")
    df = _with_columns(df.copy(), S.ROUTE_SUMMARY_COLUMNS)
    for col in (S.TOTAL_TRIPS, S.UNIQUE_DRIVERS, S.AVG_COST, S.MIN_COST, S.MAX_COST, S.TOTAL_COST):
        df[col] = pd.to_numeric(df[col], errors="coerce")
    return df.reset_index(drop=True)


def normalise_driver_summaries(df: pd.DataFrame) -> pd.DataFrame:
    _require(df, S.DRIVER_SUMMARY_REQUIRED, "driver_summary")
    df = _with_columns(df.copy(), S.DRIVER_SUMMARY_COLUMNS)
    for col in (S.TOTAL_TRIPS, S.UNIQUE_ROUTES, S.AVG_COST, S.TOTAL_COST):
        df[col] = pd.to_numeric(df[col], errors="coerce")
    df[S.DRIVER_PHONE] = object_column(map(phone_text, df[S.DRIVER_PHONE]), df.index)
    return df.reset_index(drop=True)


def split_segments(value, separator: str = SEGMENT_SEPARATOR) -> tuple:
    """``"A → B → C"`` ➜ ``("A", "B", "C")``; lists/tuples pass through."""
    if isinstance(value, (list, tuple)):
        return tuple(str(c).strip() for c in value if not is_absent(c))
    if is_absent(value):
        return ()
    return tuple(part.strip() for part in str(value).split(separator) if part.strip())


def normalise_segments(df: pd.DataFrame, separator: str = SEGMENT_SEPARATOR) -> pd.DataFrame:
    _require(df, S.SEGMENT_REQUIRED, "route_segments")
    df = _with_columns(df.copy(), S.SEGMENT_COLUMNS)
    df[S.SEGMENT_TRIPS] = pd.to_numeric(df[S.SEGMENT_TRIPS], errors="coerce")
    df[S.SEGMENTS] = df[S.SEGMENTS].map(lambda v: split_segments(v, separator)).astype(object)
    return df.reset_index(drop=True)


# ────────────────────────────────────────────────────────────────────────────
# Bulk load: all four tables or nothing
# ────────────────────────────────────────────────────────────────────────────

def _read_table(path: Path, table: str) -> pd.DataFrame:
    if not path.exists():
        raise LoadFailure(table, f"file not found: {path}")
    try:
        return load_raw_data(path)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as exc:
        raise LoadFailure(table, f"cannot parse {path}: {exc}") from exc


def _table_paths(config: PanelConfig) -> Dict[str, Path]:
    return {
        "trips": config.trips_path,
        "route_summary": config.route_summary_path,
        "driver_summary": config.driver_summary_path,
        "route_segments": config.segments_path,
    }


def build_store(raw: Dict[str, pd.DataFrame], config: Optional[PanelConfig] = None) -> TableStore:
    """Normalise four raw frames into a store.  Raises :class:`LoadFailure`."""
    config = config or PanelConfig()
    store = TableStore.from_frames(
        trips=normalise_trips(raw["trips"]),
        route_summaries=normalise_route_summaries(raw["route_summary"]),
        driver_summaries=normalise_driver_summaries(raw["driver_summary"]),
        route_segments=normalise_segments(raw["route_segments"], config.segment_separator),
    )
    logger.info(
        "Store ready: %d trips, %d routes, %d drivers, %d corridors",
        *store.counts().values(),
    )
    return store


def store_from_records(
    trips: Iterable[TripRecord],
    route_summaries: Iterable[RouteSummary] = (),
    driver_summaries: Iterable[DriverSummary] = (),
    route_segments: Iterable[RouteSegment] = (),
) -> TableStore:
    """Build a store from in‑memory records instead of CSV files."""
    def frame(rows, columns):
        return pd.DataFrame([asdict(r) for r in rows], columns=columns)

    return build_store({
        "trips": frame(trips, S.TRIP_COLUMNS),
        "route_summary": frame(route_summaries, S.ROUTE_SUMMARY_COLUMNS),
        "driver_summary": frame(driver_summaries, S.DRIVER_SUMMARY_COLUMNS),
        "route_segments": frame(route_segments, S.SEGMENT_COLUMNS),
    })


def load_tables(config: Optional[PanelConfig] = None) -> TableStore:
    """
    Read the four source CSVs from ``config.data_dir``.

    The store is only built once every table has been read and normalised;
    the first failure aborts the whole load with :class:`LoadFailure`.
    """
    config = config or PanelConfig.from_env()
    raw = {table: _read_table(path, table) for table, path in _table_paths(config).items()}
    return build_store(raw, config)


async def load_tables_async(config: Optional[PanelConfig] = None) -> TableStore:
    """Same as :func:`load_tables` but reads the four files concurrently."""
    config = config or PanelConfig.from_env()
    paths = _table_paths(config)
    frames = await asyncio.gather(
        *(asyncio.to_thread(_read_table, path, table) for table, path in paths.items())
    )
    return build_store(dict(zip(paths.keys(), frames)), config)
