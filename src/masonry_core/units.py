from __future__ import annotations

import math
import re
from typing import Any

Size = float

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        raise ValueError("empty input")
    text = text.replace(",", ".")
    if text.lower() in ("inf", "infinity", "+inf"):
        return math.inf
    return float(text)


def parse_span(value: Any, default: int = 1) -> int:
    """Parse a column span attribute.

    Attributes arrive either as integers or as strings; strings use the
    leading-integer rule (``" 2px"`` -> 2). ``None`` and unparsable text
    give ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    match = _LEADING_INT.match(str(value))
    if match is None:
        return default
    return int(match.group(1))


def format_float(value: float, ndigits: int = 2) -> str:
    return f"{value:.{ndigits}f}"
