# -*- coding: utf-8 -*-
"""
Fail-fast checks for a packing request.

Runs before any search work. Order: item weights first, then knap_factor.
"""

from __future__ import annotations
import logging
from typing import Sequence

from backpack.business_objects.errors import (
    AllItemsExceedCapacityError,
    KnapFactorNonPositiveError,
    KnapFactorTooLargeError,
)
from backpack.business_objects.items import Item

logger = logging.getLogger(__name__)


def validate_items_weights(items: Sequence[Item], remaining_capacity: int) -> None:
    """
    Reject a batch whose items are all too heavy.

    The test is `too_heavy != 0 and total // too_heavy == 1`, which also
    fires when more than half of the batch (but not all of it) is too
    heavy: e.g. 3 of 4 items gives 4 // 3 == 1.
    """
    total = len(items)
    too_heavy = sum(1 for it in items if it.weight > remaining_capacity)

    if too_heavy != 0 and total // too_heavy == 1:
        raise AllItemsExceedCapacityError(
            "All specified items have weight greater than remaining backpack's capacity."
        )

    if too_heavy:
        logger.warning(
            "%d of %d items exceed remaining capacity %d and will never be packed",
            too_heavy, total, remaining_capacity,
        )


def validate_knap_factor(knap_factor: int, items_count: int) -> None:
    if knap_factor > items_count:
        raise KnapFactorTooLargeError(
            f"Knap factor must be <= number of items to pack ({knap_factor} > {items_count})."
        )
    if knap_factor <= 0:
        raise KnapFactorNonPositiveError(f"Knap factor must be > 0, got {knap_factor}.")


def validate_batch(items: Sequence[Item], knap_factor: int, remaining_capacity: int) -> None:
    """Raise a ValidationError subclass if the request cannot be searched."""
    validate_items_weights(items, remaining_capacity)
    validate_knap_factor(knap_factor, len(items))
