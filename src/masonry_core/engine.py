from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from .align import compute_align_positions
from .models import Direction, GridItem, GridOutlines
from .options import DEFAULT_OPTIONS, MasonryOptions
from .outline import compute_column_count, compute_column_size
from .placer import place_items
from .settings import load_options
from .stretch import stretch_outlines

logger = logging.getLogger(__name__)


class MasonryGrid:
    """Stack items into columns like bricks.

    Every column has the same size; each item goes into the column window
    whose content ends first and extends the outline of that window.
    """

    def __init__(
        self, container_size: float, options: Optional[MasonryOptions] = None
    ) -> None:
        self.container_size = container_size
        self.options = options or DEFAULT_OPTIONS

    @classmethod
    def from_settings(
        cls, container_size: float, path: str | Path | None = None
    ) -> "MasonryGrid":
        return cls(container_size, load_options(str(path) if path else None))

    def compute_column_size(self, items: Sequence[GridItem]) -> float:
        return compute_column_size(items, self.container_size, self.options)

    def compute_column_count(self, items: Sequence[GridItem]) -> int:
        return compute_column_count(items, self.container_size, self.options)

    def apply_grid(
        self,
        items: Sequence[GridItem],
        direction: Direction = "end",
        outline: Optional[Sequence[float]] = None,
    ) -> GridOutlines:
        """Place ``items`` against ``outline`` and return the new outlines.

        Item positions and rendered sizes are written onto the items.
        """
        options = self.options
        column_size = self.compute_column_size(items)
        column_count = self.compute_column_count(items)
        positions = compute_align_positions(
            column_count, column_size, self.container_size, options
        )
        logger.debug(
            "masonry pass: %d items, %d columns of %s, direction=%s",
            len(items),
            column_count,
            column_size,
            direction,
        )

        placement = place_items(
            items,
            direction,
            outline,
            column_count=column_count,
            column_size=column_size,
            positions=positions,
            options=options,
        )
        stretch_outlines(
            items, placement, direction, options.stretch_outline, options.stacking_gap
        )

        end_outline = placement.end_outline
        # the row synchronisation must still line up after stretching
        if placement.sync_pos is not None and placement.sync_pos != min(end_outline):
            sync_pos = max(end_outline)
            end_outline = [sync_pos for _ in end_outline]

        if direction == "end":
            return GridOutlines(start=placement.start_outline, end=end_outline)
        return GridOutlines(start=end_outline, end=placement.start_outline)

    def layout(self, items: Sequence[GridItem]) -> GridOutlines:
        """Lay out ``items`` from scratch, filling toward end."""
        return self.apply_grid(items, "end", [])
