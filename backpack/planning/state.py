# -*- coding: utf-8 -*-
"""
Per-call working state for the packing search.

This module defines:
  - BatchState: immutable snapshot of one batch (density-sorted items +
                the capacity available when the call started)
  - Candidate:  immutable selection over a BatchState (taken mask + totals)

Notes
-----
- Business (timeless) entities live in `business_objects/`.
- Both types here are created and discarded inside a single packing call;
  search functions build new Candidates instead of mutating one.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from backpack.business_objects.items import Item
from backpack.heuristics.select_next.selector import sort_by_density


# ----------------------------
# Immutable batch snapshot
# ----------------------------

@dataclass(frozen=True)
class BatchState:
    """
    Attributes
    ----------
    items : tuple[Item, ...]
        Batch items in descending density order.
    capacity : int
        Remaining backpack capacity at the start of the call.
    """
    items: Tuple[Item, ...]
    capacity: int

    @classmethod
    def from_batch(cls, items: Iterable[Item], capacity: int) -> "BatchState":
        return cls(items=sort_by_density(items), capacity=capacity)

    def __len__(self) -> int:
        return len(self.items)


# ----------------------------
# Selection snapshot
# ----------------------------

@dataclass(frozen=True)
class Candidate:
    """
    A selection of batch items.

    Attributes
    ----------
    taken : tuple[bool, ...]
        taken[i] is True when state.items[i] is selected.
    total_value : int
    total_weight : int
    """
    taken: Tuple[bool, ...]
    total_value: int
    total_weight: int

    @classmethod
    def empty(cls, size: int) -> "Candidate":
        return cls(taken=(False,) * size, total_value=0, total_weight=0)

    @classmethod
    def from_indices(cls, state: BatchState, indices: Sequence[int]) -> "Candidate":
        chosen = set(indices)
        taken = tuple(i in chosen for i in range(len(state.items)))
        return cls(
            taken=taken,
            total_value=sum(state.items[i].value for i in chosen),
            total_weight=sum(state.items[i].weight for i in chosen),
        )

    def with_item(self, index: int, item: Item) -> "Candidate":
        """Return a copy with `index` marked as taken."""
        taken = list(self.taken)
        taken[index] = True
        return Candidate(
            taken=tuple(taken),
            total_value=self.total_value + item.value,
            total_weight=self.total_weight + item.weight,
        )

    def selected_items(self, state: BatchState) -> list[Item]:
        """Selected items in density order."""
        return [it for it, flag in zip(state.items, self.taken) if flag]
