"""Directory: src/matching/city.py"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional

import pandas as pd

from utils.values import is_absent, object_column


def extract_city(address: Any) -> Optional[str]:
    """Return the city token of a free‑text address.

    The city is the first word of the first comma‑delimited part, e.g.
    ``"Москва г, ул. Ленина 1"`` ➜ ``"Москва"``.  Case is preserved; callers
    compare with :func:`same_city`.  ``None`` when nothing usable is there.
    """
    if is_absent(address):
        return None
    head = str(address).split(",", 1)[0]
    words = head.split()
    if not words:
        return None
    return words[0].strip() or None


def norm_city(city: Any) -> Optional[str]:
    if is_absent(city):
        return None
    return str(city).strip().lower()


def same_city(a: Any, b: Any) -> bool:
    """Case‑insensitive equality; a missing city never matches anything."""
    na, nb = norm_city(a), norm_city(b)
    return na is not None and na == nb


def extract_cities(addresses: pd.Series) -> pd.Series:
    """Vectorised :func:`extract_city` keeping the index of ``addresses``."""
    return object_column(map(extract_city, addresses), addresses.index)


def distinct_cities(*columns: Iterable[Any]) -> List[str]:
    """Sorted, de‑duplicated city tokens across any number of columns."""
    seen = set()
    for col in columns:
        for city in col:
            if not is_absent(city):
                seen.add(str(city))
    return sorted(seen)
