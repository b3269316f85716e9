# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    SchemaError,
    StateValidationError,
    ValidationError,
    AllItemsExceedCapacityError,
    KnapFactorTooLargeError,
    KnapFactorNonPositiveError,
)
from .items import Item
from .backpacks import Backpack

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "ValidationError",
    "AllItemsExceedCapacityError",
    "KnapFactorTooLargeError",
    "KnapFactorNonPositiveError",
    # core models
    "Item",
    "Backpack",
]
