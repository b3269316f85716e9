# -*- coding: utf-8 -*-
"""
Heuristic 0/1 backpack packer.

Usage:
    bp = Backpack(100)
    packed = bp.try_to_pack([Item(200, 50), Item(90, 25), Item(155, 40)], knap_factor=2)
    bp.remaining_capacity
"""

from .business_objects import (
    Item,
    Backpack,
    ValidationError,
    AllItemsExceedCapacityError,
    KnapFactorTooLargeError,
    KnapFactorNonPositiveError,
)

__all__ = [
    "Item",
    "Backpack",
    "ValidationError",
    "AllItemsExceedCapacityError",
    "KnapFactorTooLargeError",
    "KnapFactorNonPositiveError",
]
