"""Column geometry: how many columns and how wide each one is."""

from __future__ import annotations

import math
from typing import Sequence

from .models import GridItem
from .options import MasonryOptions


def _stretch_column_count(container_size: float, options: MasonryOptions) -> int:
    if options.column:
        return options.column
    gap = options.inline_gap
    max_size = options.max_stretch_column_size or math.inf
    denom = max_size + gap
    if denom <= 0:
        return 1
    return max(1, math.ceil((container_size + gap) / denom))


def _is_reference_item(item: GridItem) -> bool:
    return (
        item.is_measured
        and bool(item.inline_size)
        and item.column_span == 1
        and item.max_column_span == 1
    )


def compute_column_size(
    items: Sequence[GridItem], container_size: float, options: MasonryOptions
) -> float:
    """Return the size of one column.

    Stretch alignment divides the container between the columns. Otherwise
    an explicit ``column_size`` wins, then the first measured single-column
    item; without such an item the container size is used.
    """
    gap = options.inline_gap

    if options.is_stretch:
        column = _stretch_column_count(container_size, options)
        column_size = (container_size + gap) / column - gap
    elif options.column_size:
        column_size = options.column_size
    else:
        checked = next((item for item in items if _is_reference_item(item)), None)
        column_size = checked.inline_size if checked is not None else container_size
    return column_size or 0.0


def compute_column_count(
    items: Sequence[GridItem], container_size: float, options: MasonryOptions
) -> int:
    if options.column:
        return options.column

    gap = options.inline_gap
    column_size = compute_column_size(items, container_size, options)
    denom = column_size - options.column_calculation_threshold + gap
    if denom <= 0:
        return 1
    column = max(1, math.floor((container_size + gap) / denom))
    if not options.max_stretch_column_size:
        column = max(1, min(len(items), column))
    return column
