import pytest

from masonry_core import GridItem, MasonryGrid, MasonryOptions
from masonry_core.sanity import find_overlaps


def _mixed_items():
    sizes = [(100, 120), (100, 80), (210, 60), (100, 150), (100, 40), (100, 90), (210, 30)]
    spans = [1, 1, 2, 1, 1, 1, 2]
    return [
        GridItem(inline, content, column=span, key=f"i{idx}")
        for idx, ((inline, content), span) in enumerate(zip(sizes, spans))
    ]


def _snapshot(items):
    return [
        (
            item.inline_pos,
            item.content_pos,
            item.computed_inline_size,
            item.computed_content_size,
        )
        for item in items
    ]


def test_empty_items_return_seed_outline():
    grid = MasonryGrid(200, MasonryOptions(column=2, column_size=100))
    outlines = grid.apply_grid([], "end", [5, 7])
    assert outlines.start == [5, 7]
    assert outlines.end == [5, 7]


def test_incoming_outline_of_other_length_is_broadcast():
    grid = MasonryGrid(200, MasonryOptions(column=2, column_size=100))
    assert grid.apply_grid([], "end", [5, 7, 9]).end == [9, 9]
    assert grid.apply_grid([], "start", [5, 7, 9]).start == [5, 5]


def test_layout_starts_from_zero():
    grid = MasonryGrid(300, MasonryOptions(column=3, column_size=100, gap=10))
    items = [GridItem(100, 50) for _ in range(4)]
    outlines = grid.layout(items)
    assert outlines.start == [0, 0, 0]
    assert sorted(outlines.end) == [60, 60, 120]


def test_outline_length_matches_column_count():
    grid = MasonryGrid(1000, MasonryOptions(column_size=240, gap=10))
    items = _mixed_items()
    outlines = grid.apply_grid(items, "end", [])
    assert grid.compute_column_count(items) == 4
    assert len(outlines.start) == 4
    assert len(outlines.end) == 4


def test_repeated_passes_are_identical():
    options = MasonryOptions(column=3, column_size=100, gap=10, stretch_outline="scale-center")
    grid = MasonryGrid(330, options)
    items = _mixed_items()

    first = grid.apply_grid(items, "end", [])
    first_rects = _snapshot(items)
    second = grid.apply_grid(items, "end", [])

    assert first == second
    assert _snapshot(items) == first_rects

    fresh = _mixed_items()
    third = grid.apply_grid(fresh, "end", [])
    assert third == first
    assert _snapshot(fresh) == first_rects


def test_end_direction_extends_outline():
    grid = MasonryGrid(330, MasonryOptions(column=3, column_size=100, gap=10))
    items = _mixed_items()
    outlines = grid.apply_grid(items, "end", [20, 0, 10])
    for start, end in zip(outlines.start, outlines.end):
        assert end >= start


def test_start_direction_extends_outline_backwards():
    grid = MasonryGrid(330, MasonryOptions(column=3, column_size=100, gap=10))
    items = _mixed_items()
    outlines = grid.apply_grid(items, "start", [1000, 1000, 1000])
    assert outlines.end == [1000, 1000, 1000]
    for start, end in zip(outlines.start, outlines.end):
        assert start <= end
    assert not find_overlaps(items)


def test_spans_stay_inside_columns():
    grid = MasonryGrid(330, MasonryOptions(column=3, column_size=100, gap=10))
    items = _mixed_items()
    grid.apply_grid(items, "end", [])
    positions = [0, 115, 230]
    for item in items:
        assert item.inline_pos in positions
        span = round((item.computed_inline_size - 100) / 115) + 1
        assert 1 <= span <= 3
        assert positions.index(item.inline_pos) + span <= 3
    assert not find_overlaps(items)


def test_row_sync_is_restored_after_stretch():
    options = MasonryOptions(
        column=2, column_size=100, content_align="start", stretch_outline="scale-down"
    )
    grid = MasonryGrid(200, options)
    items = [GridItem(100, 40), GridItem(100, 60)]
    outlines = grid.apply_grid(items, "end", [])
    assert outlines.end[0] == outlines.end[1]


def test_from_settings(tmp_path):
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text(
        "masonry:\n  column: 2\n  columnSize: 100\n  gap: 10\n", encoding="utf-8"
    )
    grid = MasonryGrid.from_settings(210, settings_path)
    assert grid.options.column == 2
    items = [GridItem(100, 30), GridItem(100, 50)]
    outlines = grid.apply_grid(items, "end", [])
    assert sorted(outlines.end) == [40, 60]
    assert sorted(item.inline_pos for item in items) == pytest.approx([0, 110])
