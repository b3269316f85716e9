# -*- coding: utf-8 -*-
"""
Backpack (container) model.

A Backpack is created once with a total capacity and then filled batch by
batch through `try_to_pack`. Packed items are never removed, and the
remaining capacity only goes down.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Sequence

from .errors import StateValidationError
from .items import Item

if TYPE_CHECKING:  # pragma: no cover - typing only
    from backpack.planning.solution import PackResult
    from backpack.planning.tracker import Tracker


class Backpack:
    """
    Runtime backpack with a mutable remaining capacity and packed manifest.

    Attributes
    ----------
    total_capacity : int
        Read-only; fixed at construction.
    remaining_capacity : int
        Read-only; total capacity minus the weight of everything packed.
    packed_items : list[Item]
        Read-only copy of the cumulative manifest, in packing order.
    """

    def __init__(self, total_capacity: int) -> None:
        if total_capacity < 0:
            raise StateValidationError(f"Backpack capacity must be >= 0, got {total_capacity}.")
        self._total = total_capacity
        self._remaining = total_capacity
        self._packed: List[Item] = []

    def __repr__(self) -> str:
        return f"Backpack(total_capacity={self._total}, remaining_capacity={self._remaining})"

    @property
    def total_capacity(self) -> int:
        return self._total

    @property
    def remaining_capacity(self) -> int:
        return self._remaining

    @property
    def used_capacity(self) -> int:
        return self._total - self._remaining

    @property
    def packed_items(self) -> List[Item]:
        return list(self._packed)

    @property
    def packed_value(self) -> int:
        return sum(it.value for it in self._packed)

    def place_all(self, items: Sequence[Item]) -> None:
        """
        Commit a selection: append to the manifest and deduct its weight.
        The whole selection must fit; nothing is committed otherwise.
        """
        weight = sum(it.weight for it in items)
        if weight > self._remaining:
            raise StateValidationError(
                f"Selection weight {weight} exceeds remaining capacity {self._remaining}."
            )
        self._packed.extend(items)
        self._remaining -= weight

    def pack(
        self,
        items: Sequence[Item],
        knap_factor: int,
        tracker: Optional["Tracker"] = None,
    ) -> "PackResult":
        """
        Pack the best selection found for `items` and return a per-call summary.

        Raises a ValidationError subclass (before any search, leaving the
        backpack unchanged) if the batch or knap_factor is rejected.
        """
        from backpack.planning.pack_orchestrator import pack_batch

        return pack_batch(self, items, knap_factor, tracker=tracker)

    def try_to_pack(self, items: Sequence[Item], knap_factor: int) -> List[Item]:
        """
        Pack specified items in the most valuable combination found.

        Parameters
        ----------
        items : sequence of Item
            Batch to pack; only the winning subset is kept.
        knap_factor : int
            Largest subset size searched exhaustively before greedy completion.

        Returns
        -------
        list[Item]
            The cumulative packed manifest after this call.
        """
        self.pack(items, knap_factor)
        return self.packed_items
