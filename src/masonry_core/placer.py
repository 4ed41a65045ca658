"""Greedy column placement.

Items are visited in index order when filling toward ``"end"`` and in
reverse order when filling toward ``"start"``, so each item extends the
outline outward from content that is already placed. The outline list is
the only state shared between items: every choice depends on the values
left behind by the items before it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Sequence

from .align import column_distance
from .models import Direction, GridItem, Outline
from .options import MasonryOptions

PointMode = Literal["min", "max"]


@dataclass
class Placement:
    start_outline: Outline
    end_outline: Outline
    # item indexes per starting column, in placement order
    column_items: List[List[int]] = field(default_factory=list)
    # shared reference of the row synchronisation (content_align="start")
    sync_pos: Optional[float] = None


def column_point(outline: Sequence[float], index: int, span: int, mode: PointMode) -> float:
    window = outline[index : index + span]
    return max(window) if mode == "max" else min(window)


def nearest_min(points: Sequence[float]) -> int:
    """Index of the smallest point, ties going to the last index."""
    best = min(points)
    return len(points) - 1 - list(reversed(points)).index(best)


def nearest_max(points: Sequence[float]) -> int:
    """Index of the largest point, ties going to the first index."""
    return list(points).index(max(points))


def find_column_index(
    outline: Sequence[float], span: int, direction: Direction, start_pos: float
) -> int:
    """Pick the window of ``span`` columns nearest to ``start_pos``.

    Toward end each window is represented by its highest column and the
    lowest window wins; toward start by its lowest column and the highest
    window wins.
    """
    length = len(outline) - span + 1
    if direction == "end":
        points = [max(start_pos, column_point(outline, i, span, "max")) for i in range(length)]
        return nearest_min(points)
    points = [min(start_pos, column_point(outline, i, span, "min")) for i in range(length)]
    return nearest_max(points)


def seed_outline(
    outline: Optional[Sequence[float]], column_count: int, direction: Direction
) -> Outline:
    if outline is not None and len(outline) == column_count:
        return list(outline)
    if outline:
        point = max(outline) if direction == "end" else min(outline)
    else:
        point = 0.0
    return [point for _ in range(column_count)]


def _auto_span(inline_size: float, gap: float, column_dist: float) -> int:
    if column_dist <= 0:
        return 1
    return max(1, math.ceil((inline_size + gap) / column_dist))


def _apply_size_ratio(item: GridItem, ratio_option) -> float:
    content_size = item.content_size
    item.rendered_content_size = None
    if ratio_option is True:
        if item.org_inline_size:
            ratio = item.org_content_size / item.org_inline_size
            content_size = item.computed_inline_size * ratio
            item.rendered_content_size = content_size
    elif ratio_option and ratio_option > 0:
        content_size = item.computed_inline_size / ratio_option
        item.rendered_content_size = content_size
    return content_size


def place_items(
    items: Sequence[GridItem],
    direction: Direction,
    outline: Optional[Sequence[float]],
    *,
    column_count: int,
    column_size: float,
    positions: Sequence[float],
    options: MasonryOptions,
) -> Placement:
    is_end = direction == "end"
    point_mode: PointMode = "max" if is_end else "min"
    inline_gap = options.inline_gap
    content_gap = options.stacking_gap

    start_outline = seed_outline(outline, column_count, direction)
    end_outline = list(start_outline)
    column_dist = column_distance(positions)
    is_start_content_align = is_end and options.content_align == "start"
    column_items: List[List[int]] = [[] for _ in range(column_count)]

    start_pos = -math.inf if is_end else math.inf
    if is_start_content_align:
        start_pos = min(end_outline)

    count = len(items)
    for i in range(count):
        item_index = i if is_end else count - 1 - i
        item = items[item_index]
        column_attr = item.column_span
        max_column_attr = item.max_column_span

        if column_attr > 0:
            span = min(column_count, column_attr)
        else:
            span = min(column_count, _auto_span(item.inline_size, inline_gap, column_dist))
        max_span = min(column_count, max(span, max_column_attr))
        column_index = find_column_index(end_outline, span, direction, start_pos)
        content_pos = column_point(end_outline, column_index, span, point_mode)

        if is_start_content_align and start_pos != content_pos:
            start_pos = max(end_outline)
            end_outline = [start_pos for _ in range(column_count)]
            content_pos = start_pos
            column_index = 0

        # ties never favour a level neighbour, so this mostly widens after a row sync
        while span < max_span:
            next_end_index = column_index + span
            next_index = column_index - 1
            if is_end and (
                next_end_index >= column_count or end_outline[next_end_index] > content_pos
            ):
                break
            if not is_end and (next_index < 0 or end_outline[next_index] < content_pos):
                break
            if not is_end:
                column_index -= 1
            span += 1

        column_index = max(0, column_index)
        span = min(column_count - column_index, span)
        column_items[column_index].append(item_index)

        if (column_attr > 0 and span > 1) or options.is_stretch:
            next_inline_size = (span - 1) * column_dist + column_size
            if not options.observe_children and item.rendered_inline_size != next_inline_size:
                item.should_reupdate = True
            item.rendered_inline_size = next_inline_size

        content_size = _apply_size_ratio(item, options.column_size_ratio)
        if not is_end:
            content_pos = content_pos - content_gap - content_size

        item.inline_pos = positions[column_index]
        item.content_pos = content_pos
        next_point = content_pos + content_size + content_gap if is_end else content_pos
        for offset in range(span):
            end_outline[column_index + offset] = next_point

    return Placement(
        start_outline=start_outline,
        end_outline=end_outline,
        column_items=column_items,
        sync_pos=start_pos if is_start_content_align else None,
    )
