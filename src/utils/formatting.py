from __future__ import annotations

import math
import re
from typing import Any

import numpy as np

from config import CURRENCY_SUFFIX, PLACEHOLDER
from utils.values import is_absent, phone_text

_GROUP_SEP = "\u00a0"  # ru-RU groups thousands with a no-break space
_PHONE_RE = re.compile(r"(\d)(\d{3})(\d{3})(\d{2})(\d{2})")


def format_currency(amount: Any, suffix: str = CURRENCY_SUFFIX, placeholder: str = PLACEHOLDER) -> str:
    """``1234567.4`` ➜ ``"1 234 567 ₽"``.  Missing or zero ➜ placeholder."""
    if is_absent(amount):
        return placeholder
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return placeholder
    if not np.isfinite(value) or value == 0:
        return placeholder
    rounded = math.floor(value + 0.5)  # half up
    grouped = f"{rounded:,}".replace(",", _GROUP_SEP)
    return f"{grouped} {suffix}"


def format_phone(phone: Any, placeholder: str = PLACEHOLDER) -> str:
    """``"79991234567"`` ➜ ``"+7 999 123-45-67"``.

    The first run of eleven digits is regrouped by position; text without
    such a run is returned as is, and input without any digit at all gives
    the placeholder.
    """
    if is_absent(phone):
        return placeholder
    text = phone_text(phone)
    if not any(ch.isdigit() for ch in text):
        return placeholder
    return _PHONE_RE.sub(r"+\1 \2 \3-\4-\5", text, count=1)
