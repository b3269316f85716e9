# -*- coding: utf-8 -*-
"""
Greedy completion of a partial selection.

Single linear pass over the batch in density order: every item not yet
taken whose weight fits the free capacity is added. Deterministic for a
given BatchState and starting Candidate.
"""

from __future__ import annotations

from backpack.planning.state import BatchState, Candidate


def complete_greedily(state: BatchState, candidate: Candidate) -> Candidate:
    """
    Extend a feasible `candidate` and return the completed selection.

    Parameters
    ----------
    state : BatchState
        Sorted batch and the capacity available to this call.
    candidate : Candidate
        Starting selection; must already fit `state.capacity`.

    Returns
    -------
    Candidate
        New selection whose total_value is the score of this start.
    """
    free = state.capacity - candidate.total_weight
    completed = candidate
    for idx, item in enumerate(state.items):
        if not candidate.taken[idx] and item.weight <= free:
            completed = completed.with_item(idx, item)
            free -= item.weight
    return completed
