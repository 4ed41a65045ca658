from __future__ import annotations

from typing import List, Sequence, Tuple

from .models import GridItem

# (inline_pos, content_pos, inline_size, content_size)
Rect = Tuple[float, float, float, float]

EPS = 1e-6


def item_rect(item: GridItem) -> Rect:
    return (
        item.inline_pos or 0.0,
        item.content_pos or 0.0,
        item.computed_inline_size,
        item.computed_content_size,
    )


def rects_overlap(a: Rect, b: Rect, eps: float = EPS) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return not (
        ax + aw <= bx + eps
        or bx + bw <= ax + eps
        or ay + ah <= by + eps
        or by + bh <= ay + eps
    )


def placed_items(items: Sequence[GridItem]) -> List[Tuple[int, GridItem]]:
    return [
        (idx, item)
        for idx, item in enumerate(items)
        if item.inline_pos is not None and item.content_pos is not None
    ]


def find_overlaps(items: Sequence[GridItem], eps: float = EPS) -> List[Tuple[int, int]]:
    """Index pairs of placed items whose rectangles intersect."""
    placed = [(idx, item_rect(item)) for idx, item in placed_items(items)]
    overlaps: List[Tuple[int, int]] = []
    for i, (idx_a, a) in enumerate(placed):
        for idx_b, b in placed[i + 1 :]:
            if rects_overlap(a, b, eps):
                overlaps.append((idx_a, idx_b))
    return overlaps


def is_within_container(
    items: Sequence[GridItem], container_size: float, eps: float = EPS
) -> bool:
    for _, item in placed_items(items):
        x, _, w, _ = item_rect(item)
        if x < -eps or x + w > container_size + eps:
            return False
    return True


def check_layout(items: Sequence[GridItem], container_size: float) -> List[str]:
    warnings: List[str] = []
    unplaced = len(items) - len(placed_items(items))
    if unplaced:
        warnings.append(f"{unplaced} item(s) were not placed")
    for a, b in find_overlaps(items):
        warnings.append(f"items {a} and {b} overlap")
    if not is_within_container(items, container_size):
        warnings.append("layout exceeds the container")
    return warnings
