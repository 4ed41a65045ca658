from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

import yaml

from .models import GridItem, GridOutlines
from .units import parse_float

ITEM_KEYS = {
    "key": "key",
    "inlineSize": "inline_size",
    "contentSize": "content_size",
    "column": "column",
    "maxColumn": "max_column",
    "isMeasured": "is_measured",
    "orgInlineSize": "org_inline_size",
    "orgContentSize": "org_content_size",
}
_SIZE_FIELDS = ("inline_size", "content_size", "org_inline_size", "org_content_size")


def item_from_dict(data: Mapping[str, Any]) -> GridItem:
    values: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = ITEM_KEYS.get(raw_key, raw_key)
        if key not in ITEM_KEYS.values():
            raise ValueError(f"unknown item field: {raw_key!r}")
        if key in _SIZE_FIELDS and value is not None:
            value = parse_float(value)
        values[key] = value
    for required in ("inline_size", "content_size"):
        if required not in values:
            raise ValueError(f"item is missing {required!r}")
    if "key" in values:
        values["key"] = str(values["key"])
    if "is_measured" in values:
        values["is_measured"] = bool(values["is_measured"])
    return GridItem(**values)


def item_to_dict(item: GridItem) -> Dict[str, Any]:
    return {
        "key": item.key,
        "inlinePos": item.inline_pos,
        "contentPos": item.content_pos,
        "inlineSize": item.computed_inline_size,
        "contentSize": item.computed_content_size,
        "shouldReupdate": item.should_reupdate,
    }


def layout_to_dict(items: Sequence[GridItem], outlines: GridOutlines) -> Dict[str, Any]:
    return {
        "outlines": {"start": list(outlines.start), "end": list(outlines.end)},
        "items": [item_to_dict(item) for item in items],
    }


def load_items(path: str | Path) -> List[GridItem]:
    """Read a JSON or YAML list of item records."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            payload = yaml.safe_load(f)
        else:
            payload = json.load(f)
    if isinstance(payload, dict):
        payload = payload.get("items")
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a list of items")
    return [item_from_dict(record) for record in payload]


def save_layout(
    path: str | Path, items: Sequence[GridItem], outlines: GridOutlines
) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(layout_to_dict(items, outlines), f, ensure_ascii=False, indent=2)


__all__ = [
    "item_from_dict",
    "item_to_dict",
    "layout_to_dict",
    "load_items",
    "save_layout",
]
