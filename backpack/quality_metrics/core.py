# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to compute KPIs for a backpack and its packing calls.
- No side effects
- No external dependencies

Public API:
  - compute_backpack_metrics(backpack) -> Dict[str, float]
  - compute_result_metrics(result) -> Dict[str, float]
"""

from __future__ import annotations
from typing import Dict

from backpack.business_objects.backpacks import Backpack
from backpack.planning.solution import PackResult


def _safe_ratio(num: float, den: float) -> float:
    return 0.0 if den == 0.0 else num / den


def compute_backpack_metrics(backpack: Backpack) -> Dict[str, float]:
    """
    Returns:
      {
        "Total Value": ...,
        "Used": ...,
        "Remaining": ...,
        "Capacity": ...,
        "Utilization": ...,     # percent (0..100)
        "Items Packed": ...,
        "Value Per Weight": ...,
      }
    """
    capacity = float(backpack.total_capacity)
    used = float(backpack.used_capacity)
    value = float(backpack.packed_value)

    return {
        "Total Value": value,
        "Used": used,
        "Remaining": float(backpack.remaining_capacity),
        "Capacity": capacity,
        "Utilization": _safe_ratio(used, capacity) * 100.0,
        "Items Packed": float(len(backpack.packed_items)),
        "Value Per Weight": _safe_ratio(value, used),
    }


def compute_result_metrics(result: PackResult) -> Dict[str, float]:
    """
    KPIs for a single call; `Fill` is the share of the capacity available
    at call start that the selection consumed (percent).
    """
    return {
        "Value": float(result.total_value),
        "Weight": float(result.total_weight),
        "Fill": _safe_ratio(result.total_weight, result.remaining_before) * 100.0,
        "Items Selected": float(len(result.selected)),
        "Candidates Evaluated": float(result.candidates_evaluated),
    }
