# -*- coding: utf-8 -*-
"""
Common exceptions for the backpack packing layer.

All of them are ValueError subclasses: they describe bad input, never a
runtime or resource fault.
"""


class SchemaError(ValueError):
    """Raised when an input file (JSON) violates the expected schema."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class ValidationError(ValueError):
    """Base class for rejected packing requests (checked before any search)."""


class AllItemsExceedCapacityError(ValidationError):
    """Every item of the batch is heavier than the remaining capacity."""


class KnapFactorTooLargeError(ValidationError):
    """knap_factor is greater than the number of items in the batch."""


class KnapFactorNonPositiveError(ValidationError):
    """knap_factor is zero or negative."""
