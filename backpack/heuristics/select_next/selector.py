# -*- coding: utf-8 -*-
"""
Batch ordering: value density, highest first.

Python's sort is stable, so items of equal density keep their input
order. No mutation occurs here.
"""

from __future__ import annotations
from typing import Iterable, Tuple

from backpack.business_objects.items import Item


def sort_by_density(items: Iterable[Item]) -> Tuple[Item, ...]:
    """Return the items ordered by descending value/weight."""
    return tuple(sorted(items, key=lambda it: it.density, reverse=True))
