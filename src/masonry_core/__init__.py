"""Masonry layout: stack items of known size into parallel columns."""

from .align import compute_align_positions
from .engine import MasonryGrid
from .models import GridItem, GridOutlines
from .options import DEFAULT_OPTIONS, MasonryOptions
from .outline import compute_column_count, compute_column_size
from .placer import nearest_max, nearest_min, place_items
from .settings import load_options
from .stretch import stretch_outlines

__all__ = [
    "GridItem",
    "GridOutlines",
    "MasonryGrid",
    "MasonryOptions",
    "DEFAULT_OPTIONS",
    "compute_align_positions",
    "compute_column_count",
    "compute_column_size",
    "nearest_max",
    "nearest_min",
    "place_items",
    "stretch_outlines",
    "load_options",
]
