"""Central place for column‑name constants so tests, ingestion,
   and the query engine all stay in sync.

‼️  **Edit here once** if the raw CSV schema changes.  All downstream code
    (including tests) should import from this module instead of hard‑coding
    strings.  """

# ────────────────────────────────────────────────────────────────────────────
# Trip table (one row per observed shipment), canonical names
# ────────────────────────────────────────────────────────────────────────────

ORIGIN_RAW    = "origin_raw"       # free-text pickup address
DEST_RAW      = "dest_raw"         # free-text drop-off address
DRIVER_NAME   = "driver_name"
DRIVER_PHONE  = "driver_phone"     # digit string, may be absent
VEHICLE_BRAND = "vehicle_brand"
VEHICLE_MODEL = "vehicle_model"
PRICE         = "declared_price"   # currency, may be absent
COST          = "route_cost"       # currency, may be absent
CREATED_AT    = "created_at"       # datetime, may be absent
ROUTE_LABEL   = "route_label"      # operator's free-text route name

# derived at ingestion from ORIGIN_RAW / DEST_RAW
ORIGIN_CITY   = "origin_city"
DEST_CITY     = "dest_city"

TRIP_COLUMNS = [
    ORIGIN_RAW, DEST_RAW, DRIVER_NAME, DRIVER_PHONE, VEHICLE_BRAND,
    VEHICLE_MODEL, PRICE, COST, CREATED_AT, ROUTE_LABEL,
]
TRIP_REQUIRED = [ORIGIN_RAW, DEST_RAW, DRIVER_NAME]

# ────────────────────────────────────────────────────────────────────────────
# Wide Cyrillic export of the same trip table
# ────────────────────────────────────────────────────────────────────────────

RAW_TRIP_COLUMNS = {
    "Откуда полный":          ORIGIN_RAW,
    "Куда полный":            DEST_RAW,
    "Водитель":               DRIVER_NAME,
    "Номер телефона":         DRIVER_PHONE,
    "Марка":                  VEHICLE_BRAND,
    "Модель":                 VEHICLE_MODEL,
    "ОБЪЯВЛЕННАЯ ЦЕНА":       PRICE,
    "СЕБЕСТОИМОСТЬ МАРШРУТА": COST,
    "Дата создания":          CREATED_AT,
    "Маршрут":                ROUTE_LABEL,
}

# ────────────────────────────────────────────────────────────────────────────
# Pre-aggregated summary tables (read-only)
# ────────────────────────────────────────────────────────────────────────────

TOTAL_TRIPS    = "total_trips"
UNIQUE_DRIVERS = "unique_drivers"
UNIQUE_ROUTES  = "unique_routes"
AVG_COST       = "avg_cost"
MIN_COST       = "min_cost"
MAX_COST       = "max_cost"
TOTAL_COST     = "total_cost"

ROUTE_SUMMARY_COLUMNS = [
    ORIGIN_CITY, DEST_CITY, TOTAL_TRIPS, UNIQUE_DRIVERS,
    AVG_COST, MIN_COST, MAX_COST, TOTAL_COST,
]
ROUTE_SUMMARY_REQUIRED = [ORIGIN_CITY, DEST_CITY]

DRIVER_SUMMARY_COLUMNS = [
    DRIVER_NAME, DRIVER_PHONE, TOTAL_TRIPS, UNIQUE_ROUTES, AVG_COST, TOTAL_COST,
]
DRIVER_SUMMARY_REQUIRED = [DRIVER_NAME]

# ────────────────────────────────────────────────────────────────────────────
# Known corridors with their waypoint sequence
# ────────────────────────────────────────────────────────────────────────────

SEGMENT_TRIPS = "trips"
SEGMENTS      = "segments"     # "A → B → C" on disk, tuple of cities in memory

SEGMENT_COLUMNS = [ORIGIN_CITY, DEST_CITY, SEGMENT_TRIPS, SEGMENTS]
SEGMENT_REQUIRED = [ORIGIN_CITY, DEST_CITY, SEGMENTS]
