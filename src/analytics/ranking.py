from __future__ import annotations

from typing import Iterable, Tuple

import pandas as pd

import schema as S
from config import TOP_N_CHOICES


def top_n(table: pd.DataFrame, n: int, by: str = S.TOTAL_TRIPS) -> pd.DataFrame:
    """Return the ``n`` busiest rows of a summary table.

    Rows are ordered by ``by`` descending (missing counts rank as 0) with a
    stable sort, so equal counts keep table order.  ``n == len(table)`` is
    the "show all" choice and returns every row.  The input is not modified.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if table.empty:
        return table.copy()
    ranked = table.sort_values(
        by,
        ascending=False,
        kind="stable",
        key=lambda col: pd.to_numeric(col, errors="coerce").fillna(0),
    )
    return ranked.head(n).reset_index(drop=True)


def top_n_choices(table: pd.DataFrame, presets: Iterable[int] = TOP_N_CHOICES) -> Tuple[int, ...]:
    """Selector presets followed by the table length (the "all" entry)."""
    return (*presets, len(table))


def is_show_all(table: pd.DataFrame, n: int) -> bool:
    return n == len(table)
