# -*- coding: utf-8 -*-
"""
Result model for one packing call.

Produced by the pack orchestrator and consumed by the tracker and by
callers that want more than the cumulative manifest.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from backpack.business_objects.items import Item


@dataclass(frozen=True)
class PackResult:
    """
    Outcome of a single `Backpack.pack` call.

    Attributes
    ----------
    selected : tuple[Item, ...]
        Items committed by this call, in density order.
    total_value : int
        Sum of values of `selected`.
    total_weight : int
        Sum of weights of `selected`.
    remaining_before : int
        Remaining capacity when the call started.
    remaining_after : int
        Remaining capacity after the commit.
    knap_factor : int
        Search breadth used.
    candidates_evaluated : int
        Feasible subsets completed and scored during the search.
    """
    selected: Tuple[Item, ...]
    total_value: int
    total_weight: int
    remaining_before: int
    remaining_after: int
    knap_factor: int
    candidates_evaluated: int = 0
