# -*- coding: utf-8 -*-
"""
Hybrid exhaustive + greedy search over one batch.

Pipeline for knap = 1 .. policy.knap_factor:
  1) Enumerate every size-knap subset of the density-sorted batch that
     fits the capacity (heuristics.subsets).
  2) Complete each one greedily (heuristics.complete).
  3) Keep the best-valued completion seen so far. A later candidate
     replaces the best only with a strictly greater value, so ties go to
     the one found first (smaller knap, then lexicographic subset order).

Return:
  - The best Candidate (None when no subset fits) and the number of
    completed candidates evaluated.
"""

from __future__ import annotations
import logging
from typing import Optional, Tuple

from backpack.planning.state import BatchState, Candidate
from backpack.planning.policy import Policy
from backpack.heuristics.subsets.enumeration import count_subsets, iter_feasible_subsets
from backpack.heuristics.complete.greedy import complete_greedily

logger = logging.getLogger(__name__)


def run_hybrid_search(state: BatchState, policy: Policy) -> Tuple[Optional[Candidate], int]:
    """
    Search `state` with the breadth given by `policy.knap_factor`.

    The state must already be validated; this function does no input checks.
    """
    best: Optional[Candidate] = None
    evaluated = 0

    for knap in range(1, policy.knap_factor + 1):
        feasible = 0
        for start in iter_feasible_subsets(state, knap):
            feasible += 1
            completed = complete_greedily(state, start)
            if best is None or completed.total_value > best.total_value:
                best = completed
                logger.debug(
                    "knap=%d new best value=%d weight=%d",
                    knap, best.total_value, best.total_weight,
                )
        evaluated += feasible
        logger.debug(
            "knap=%d: %d of %d subsets feasible",
            knap, feasible, count_subsets(len(state), knap),
        )

    return best, evaluated
