# -*- coding: utf-8 -*-
"""
Subset generation for the exhaustive part of the search.

For a given knap, every way of marking `knap` of the `n` sorted positions
as taken is produced exactly once: a direct choose-knap-of-n enumeration,
yielding the same set of masks as permuting a 0/1 vector with duplicate
swaps pruned. Subsets heavier than the batch capacity are dropped.

Order: lexicographic over sorted positions, so subsets built from the
densest items come first.
"""

from __future__ import annotations
import math
from itertools import combinations
from typing import Iterator

from backpack.planning.state import BatchState, Candidate


def iter_feasible_subsets(state: BatchState, knap: int) -> Iterator[Candidate]:
    """
    Yield a Candidate for each size-`knap` subset whose weight fits
    `state.capacity`.
    """
    weights = [it.weight for it in state.items]
    for indices in combinations(range(len(state.items)), knap):
        if sum(weights[i] for i in indices) <= state.capacity:
            yield Candidate.from_indices(state, indices)


def count_subsets(n: int, knap: int) -> int:
    """Number of size-`knap` subsets before the weight filter: C(n, knap)."""
    return math.comb(n, knap) if 0 <= knap <= n else 0
