# -*- coding: utf-8 -*-
"""
Planning layer public API for the backpack packer.

This module exposes the planning-time data contracts:
  - State models (BatchState, Candidate)
  - Policy configuration
  - PackResult

Validation, solvers, the orchestrator and the tracker are not exported
here. They should be imported explicitly when needed.
"""

from .state import BatchState, Candidate
from .policy import Policy
from .solution import PackResult

__all__ = [
    "BatchState",
    "Candidate",
    "Policy",
    "PackResult",
]
