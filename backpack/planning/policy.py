# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for a packing call.

  - knap_factor: largest subset size searched exhaustively. For every
    knap in 1..knap_factor all C(n, knap) subsets of the density-sorted
    batch are tried, each completed greedily. Cost grows as C(n, knap),
    so keep it small relative to the batch size.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Policy:
    """
    Search knobs (pure data holder).

    Attributes
    ----------
    knap_factor : int
        Exhaustive-search breadth; validated against the batch at pack time.
    """
    knap_factor: int = 1
