# -*- coding: utf-8 -*-
"""
Pack Orchestrator: one packing call against a Backpack.

Single-call API that:
  1) Validates the batch and knap_factor (nothing is mutated on failure).
  2) Runs the hybrid search on a per-call BatchState (no mutation there).
  3) Commits the winning selection into the Backpack.
  4) Emits a PackResult and optionally logs it via Tracker.
"""

from __future__ import annotations
import logging
from typing import Optional, Sequence

from backpack.business_objects.backpacks import Backpack
from backpack.business_objects.items import Item
from backpack.planning import BatchState, Candidate, Policy, PackResult
from backpack.planning.solvers.hybrid import run_hybrid_search
from backpack.planning.validation import validate_batch
from .tracker import Tracker

logger = logging.getLogger(__name__)


def pack_batch(
    backpack: Backpack,
    items: Sequence[Item],
    knap_factor: int,
    tracker: Optional[Tracker] = None,
) -> PackResult:
    """
    Decide & commit the best selection for one batch.

    Parameters
    ----------
    backpack : Backpack
        Mutable container; its remaining capacity bounds the search.
    items : sequence of Item
        Batch to pack.
    knap_factor : int
        Exhaustive-search breadth (1 <= knap_factor <= len(items)).
    tracker : Tracker | None
        If provided, writes the batch order and appends a pack_log row.

    Returns
    -------
    PackResult
        Selected items and capacity before/after.
    """
    items = list(items)
    remaining_before = backpack.remaining_capacity

    # 1) Fail fast
    validate_batch(items, knap_factor, remaining_before)

    # 2) Search on a per-call snapshot
    state = BatchState.from_batch(items, remaining_before)
    best, evaluated = run_hybrid_search(state, Policy(knap_factor=knap_factor))
    if best is None:
        best = Candidate.empty(len(state))
    selected = tuple(best.selected_items(state))

    # 3) Commit
    backpack.place_all(selected)

    result = PackResult(
        selected=selected,
        total_value=sum(it.value for it in selected),
        total_weight=sum(it.weight for it in selected),
        remaining_before=remaining_before,
        remaining_after=backpack.remaining_capacity,
        knap_factor=knap_factor,
        candidates_evaluated=evaluated,
    )
    logger.info(
        "packed %d of %d items (value=%d, weight=%d), remaining capacity %d -> %d",
        len(selected), len(items), result.total_value, result.total_weight,
        remaining_before, result.remaining_after,
    )

    # 4) Optional artifacts
    if tracker is not None:
        tracker.write_batch_order_csv(state)
        tracker.append_pack_result(result)

    return result
