from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

from .units import Size, parse_span

Direction = Literal["start", "end"]
Outline = List[float]


@dataclass
class GridItem:
    """One element placed by the grid.

    ``inline_size`` is measured across the columns and ``content_size``
    along the stacking axis. The ``*_pos`` and ``rendered_*`` fields are
    written by a layout pass; inputs are never modified.
    """

    inline_size: Size
    content_size: Size
    column: int | str | None = 1
    max_column: int | str | None = 1
    key: str = ""
    is_measured: bool = True
    org_inline_size: Optional[Size] = None
    org_content_size: Optional[Size] = None

    inline_pos: Optional[Size] = None
    content_pos: Optional[Size] = None
    rendered_inline_size: Optional[Size] = None
    rendered_content_size: Optional[Size] = None
    should_reupdate: bool = False

    def __post_init__(self) -> None:
        if self.org_inline_size is None:
            self.org_inline_size = self.inline_size
        if self.org_content_size is None:
            self.org_content_size = self.content_size

    @property
    def column_span(self) -> int:
        return parse_span(self.column)

    @property
    def max_column_span(self) -> int:
        return parse_span(self.max_column)

    @property
    def computed_inline_size(self) -> Size:
        if self.rendered_inline_size is not None:
            return self.rendered_inline_size
        return self.inline_size

    @property
    def computed_content_size(self) -> Size:
        if self.rendered_content_size is not None:
            return self.rendered_content_size
        return self.content_size

    def set_rect(
        self,
        *,
        content_pos: Optional[Size] = None,
        content_size: Optional[Size] = None,
    ) -> None:
        if content_pos is not None:
            self.content_pos = content_pos
        if content_size is not None:
            self.rendered_content_size = content_size


@dataclass(frozen=True)
class GridOutlines:
    """Outlines returned by one pass; ``start`` is always the low side."""

    start: Outline = field(default_factory=list)
    end: Outline = field(default_factory=list)
