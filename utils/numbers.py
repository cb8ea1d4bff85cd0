# utils/numbers.py
from __future__ import annotations
import math
from typing import Optional


def safe_div(a: float, b: float) -> float:
    if b == 0:
        return 0.0
    return a / b


def parse_decimal(text: str) -> Optional[float]:
    """Strict decimal parse of user input. Blank, garbage, nan and inf give None."""
    if text is None:
        return None
    v = str(text).strip()
    if not v:
        return None
    try:
        number = float(v)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_integer(text: str) -> Optional[int]:
    """Strict integer parse of user input; "3.5" is not an integer."""
    if text is None:
        return None
    v = str(text).strip()
    if not v:
        return None
    try:
        return int(v)
    except ValueError:
        return None
