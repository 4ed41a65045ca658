from __future__ import annotations

from typing import List, Sequence

from .options import MasonryOptions


def compute_align_positions(
    column_count: int,
    column_size: float,
    container_size: float,
    options: MasonryOptions,
) -> List[float]:
    """Inline offset of every column for the configured ``align`` mode."""
    gap = options.inline_gap
    offset = 0.0
    dist = 0.0

    if options.align in ("justify", "stretch"):
        count_dist = column_count - 1
        if count_dist:
            dist = max((container_size - column_size) / count_dist, column_size + gap)
        # center the row, never pushing the first column right of 0
        offset = min(0.0, container_size / 2 - (count_dist * dist + column_size) / 2)
    else:
        dist = column_size + gap
        total_size = (column_count - 1) * dist + column_size
        if options.align == "center":
            offset = (container_size - total_size) / 2
        elif options.align == "end":
            offset = container_size - total_size
    return [offset + i * dist for i in range(column_count)]


def column_distance(positions: Sequence[float]) -> float:
    if len(positions) > 1:
        return positions[1] - positions[0]
    return 0.0
