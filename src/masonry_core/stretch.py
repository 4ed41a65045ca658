"""Rescale placed items so every column ends at the same point."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from .models import Direction, GridItem, Outline
from .options import StretchOutline
from .placer import Placement

logger = logging.getLogger(__name__)


def scale_point(outline: Outline, mode: StretchOutline) -> float:
    if mode == "scale-up":
        return max(outline)
    if mode == "scale-center":
        return (max(outline) + min(outline)) / 2
    return min(outline)


def _frac(value: float) -> float:
    return math.fmod(value, 1)


def _round_offset(item: GridItem, point: float, is_end: bool) -> tuple[float, float]:
    # Positions and sizes are rounded downstream; the last item of a
    # column absorbs the difference so the column still ends at ``point``.
    if is_end:
        size_offset = (
            (1 if _frac(item.content_pos) >= 0.5 else 0)
            + (1 if _frac(item.computed_content_size) >= 0.5 else 0)
            + (-1 if _frac(point) >= 0.5 else 0)
        )
        return 0, size_offset
    pos_offset = (-1 if _frac(item.content_pos) < 0.5 else 0) + (
        1 if _frac(point) < 0.5 else 0
    )
    return pos_offset, 0


def stretch_outlines(
    items: Sequence[GridItem],
    placement: Placement,
    direction: Direction,
    stretch_outline: StretchOutline,
    content_gap: float,
) -> None:
    """Scale every column of ``placement`` to a common end point, in place."""
    if not stretch_outline or not items:
        return
    is_end = direction == "end"
    start_outline = placement.start_outline
    end_outline = placement.end_outline

    point = scale_point(end_outline, stretch_outline)
    if is_end:
        point -= content_gap

    for i, column_end in enumerate(end_outline):
        indexes = placement.column_items[i]
        total_gap = (len(indexes) - 1) * content_gap
        start_point = start_outline[i]
        denom = abs(column_end - start_point) - (content_gap if is_end else 0) - total_gap
        if denom == 0:
            continue
        scale = (abs(point - start_point) - total_gap) / denom
        if scale == 1 or not math.isfinite(scale):
            continue
        logger.debug("stretching column %d by %.4f to %s", i, scale, point)

        end_outline[i] = point + content_gap if is_end else point
        prev_point = start_point if is_end else start_point - content_gap
        last = len(indexes) - 1

        for j, item_index in enumerate(indexes):
            item = items[item_index]
            next_size = item.computed_content_size * scale
            item.set_rect(
                content_pos=prev_point if is_end else prev_point - next_size,
                content_size=next_size,
            )
            if is_end:
                prev_point = item.content_pos + item.computed_content_size + content_gap
            else:
                prev_point = item.content_pos - content_gap

            if j == last:
                pos_offset, size_offset = _round_offset(item, point, is_end)
                item.set_rect(
                    content_pos=item.content_pos - pos_offset,
                    content_size=item.computed_content_size - size_offset,
                )
