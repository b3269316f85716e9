# -*- coding: utf-8 -*-
"""
I/O helpers for loading item batches.

JSON format:
- items.json : [{"value": <int>, "weight": <int>}, ...]

Maps directly to business_objects.items.Item.
"""

from __future__ import annotations
import json
from typing import List

from backpack.business_objects.errors import SchemaError
from backpack.business_objects.items import Item


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _as_int(raw: object, key: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)) or int(raw) != raw:
        raise SchemaError(f"'{key}' must be an integer, got {raw!r}")
    return int(raw)


def read_items_json(path: str) -> List[Item]:
    """
    Load items from a JSON array. Each element must have:
      - value (integer >= 0)
      - weight (integer > 0)
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")

    items: List[Item] = []
    for idx, obj in enumerate(data, start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            value = _as_int(_require(obj, "value", path), "value")
            weight = _as_int(_require(obj, "weight", path), "weight")
            items.append(Item(value=value, weight=weight))
        except ValueError as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return items
