from __future__ import annotations

from typing import Any, Iterable, List, Optional

import numpy as np
import pandas as pd


def is_absent(value: Any) -> bool:
    """True for None, NaN/NaT and blank strings – the ways a CSV cell goes missing."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):  # list‑likes are never "missing"
        return False


def or_none(value: Any) -> Any:
    """Map missing cells to ``None`` and unwrap numpy scalars."""
    if is_absent(value):
        return None
    if isinstance(value, np.generic):
        return value.item()
    return value


def phone_text(value: Any) -> Optional[str]:
    """Phone cell as a digit string; CSV readers hand numbers back as ``7999….0``."""
    if is_absent(value):
        return None
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return str(value).strip()


def object_column(values: Iterable[Any], index: pd.Index) -> pd.Series:
    """Object column that keeps ``None`` for missing cells under any string dtype default."""
    return pd.Series([or_none(v) for v in values], index=index, dtype=object)


def observed_amounts(values: Iterable[Any]) -> List[float]:
    """Keep only recorded, non‑zero amounts.

    A missing or zero price is *not* an observation, so it must not drag
    an average towards zero.
    """
    out: List[float] = []
    for v in values:
        if is_absent(v):
            continue
        try:
            amount = float(v)
        except (TypeError, ValueError):
            continue
        if not np.isfinite(amount) or amount == 0:
            continue
        out.append(amount)
    return out


def mean_or_zero(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def latest(values: Iterable[Any]) -> Optional[pd.Timestamp]:
    """Most recent timestamp among ``values``; ``None`` if none were recorded."""
    stamps = [v for v in values if not is_absent(v)]
    if not stamps:
        return None
    return max(pd.Timestamp(v) for v in stamps)
