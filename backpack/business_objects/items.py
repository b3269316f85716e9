# -*- coding: utf-8 -*-
"""
Item model for the backpack packer.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class Item:
    """
    An item that can be packed into a backpack at most once per batch.

    Two items with the same (value, weight) compare equal; there is no
    other identity.

    Attributes
    ----------
    value : int
        Nonnegative objective contribution if packed.
    weight : int
        Strictly positive capacity consumption.
    """
    value: int
    weight: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.value < 0:
            raise StateValidationError(f"Item({self.value}, {self.weight}) value must be >= 0.")
        if self.weight <= 0:
            raise StateValidationError(f"Item({self.value}, {self.weight}) weight must be > 0.")

    @property
    def density(self) -> float:
        """Value per unit of weight; used only for ordering."""
        return self.value / self.weight
