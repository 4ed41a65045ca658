from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Literal, Mapping, Optional, Union

from .units import parse_float

Align = Literal["start", "center", "end", "justify", "stretch"]
ContentAlign = Literal["masonry", "start", "center", "end"]
StretchOutline = Literal["", "scale-down", "scale-up", "scale-center"]

ALIGNS = ("start", "center", "end", "justify", "stretch")
CONTENT_ALIGNS = ("masonry", "start", "center", "end")
STRETCH_OUTLINES = ("", "scale-down", "scale-up", "scale-center")

# camelCase option names accepted next to the snake case field names
OPTION_ALIASES = {
    "column": "column",
    "columnSize": "column_size",
    "columnSizeRatio": "column_size_ratio",
    "align": "align",
    "contentAlign": "content_align",
    "columnCalculationThreshold": "column_calculation_threshold",
    "maxStretchColumnSize": "max_stretch_column_size",
    "stretchOutline": "stretch_outline",
    "gap": "gap",
    "contentGap": "content_gap",
    "observeChildren": "observe_children",
}


@dataclass(frozen=True)
class MasonryOptions:
    """Configuration snapshot for one layout pass."""

    column: int = 0
    column_size: float = 0.0
    column_size_ratio: Union[float, bool] = 0.0
    align: Align = "justify"
    content_align: ContentAlign = "masonry"
    column_calculation_threshold: float = 0.5
    max_stretch_column_size: float = math.inf
    stretch_outline: StretchOutline = ""
    gap: float = 0.0
    content_gap: Optional[float] = None
    observe_children: bool = False

    @property
    def inline_gap(self) -> float:
        return self.gap

    @property
    def stacking_gap(self) -> float:
        return self.gap if self.content_gap is None else self.content_gap

    @property
    def is_stretch(self) -> bool:
        return self.align == "stretch"

    def replace(self, **changes: Any) -> "MasonryOptions":
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MasonryOptions":
        """Build options from a settings mapping.

        Raises ``ValueError`` for unknown keys and invalid values.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for raw_key, raw_value in data.items():
            key = OPTION_ALIASES.get(raw_key, raw_key)
            if key not in known:
                raise ValueError(f"unknown masonry option: {raw_key!r}")
            values[key] = _coerce(key, raw_value)
        return cls(**values)


DEFAULT_OPTIONS = MasonryOptions()


def _coerce(key: str, value: Any) -> Any:
    if key == "column":
        column = int(parse_float(value))
        if column < 0:
            raise ValueError("column must be >= 0")
        return column
    if key in ("column_size", "column_calculation_threshold", "gap"):
        return parse_float(value)
    if key == "content_gap":
        return None if value is None else parse_float(value)
    if key == "max_stretch_column_size":
        if value is None:
            return math.inf
        return parse_float(value)
    if key == "column_size_ratio":
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "auto"):
            return True
        if isinstance(value, str) and value.strip().lower() == "false":
            return 0.0
        return parse_float(value)
    if key == "observe_children":
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        raise ValueError(f"observe_children must be true or false, got {value!r}")
    if key == "align":
        return _choice(key, value, ALIGNS)
    if key == "content_align":
        return _choice(key, value, CONTENT_ALIGNS)
    if key == "stretch_outline":
        return _choice(key, "" if value is None else value, STRETCH_OUTLINES)
    return value


def _choice(key: str, value: Any, allowed: tuple) -> str:
    text = str(value).strip()
    if text not in allowed:
        raise ValueError(f"{key} must be one of {allowed}, got {value!r}")
    return text
