# -*- coding: utf-8 -*-
"""
Packing tracker: CSV artifacts for successive packing calls.

Files produced (when Tracker is used):
  - batch_items.csv        (density order of each batch; rewritten per call)
  - pack_log.csv           (append-as-you-go, one row per packing call)
  - packed_items.csv       (cumulative manifest snapshot)
  - backpack_summary.csv   (global KPIs)

Notes
-----
- Callers decide when to invoke the snapshot writers; the pack
  orchestrator only writes batch_items.csv and appends to pack_log.csv.
"""

from __future__ import annotations
import csv
import json
import os
from dataclasses import dataclass, field

from backpack.business_objects.backpacks import Backpack
from backpack.planning import BatchState, PackResult
from backpack.quality_metrics.core import compute_backpack_metrics, compute_result_metrics


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str
    _pack_log_path: str = field(init=False, repr=False)
    _pack_started: bool = field(default=False, init=False, repr=False)
    _call_idx: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)
        self._pack_log_path = os.path.join(self.out_dir, "pack_log.csv")

    @property
    def pack_log_path(self) -> str:
        return self._pack_log_path

    # -----------------------------
    # Batch order CSV
    # -----------------------------
    def write_batch_order_csv(self, state: BatchState, filename: str = "batch_items.csv") -> str:
        """
        Persist the density ordering the search worked on.

        Columns:
          order_index, value, weight, density
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "value", "weight", "density"])
            for idx, it in enumerate(state.items):
                w.writerow([idx, it.value, it.weight, round(it.density, 5)])
        return path

    # -----------------------------
    # Pack log CSV
    # -----------------------------
    def append_pack_result(self, result: PackResult) -> str:
        """
        Append a single packing-call row.

        Columns:
          call_index, knap_factor, items_selected, value, weight,
          remaining_before, remaining_after, fill_pct,
          candidates_evaluated, selected_json
        """
        if not self._pack_started:
            with open(self._pack_log_path, "w", newline="", encoding="utf-8") as f:
                w = csv.writer(f)
                w.writerow([
                    "call_index",
                    "knap_factor",
                    "items_selected",
                    "value",
                    "weight",
                    "remaining_before",
                    "remaining_after",
                    "fill_pct",
                    "candidates_evaluated",
                    "selected_json",
                ])
            self._pack_started = True

        kpis = compute_result_metrics(result)
        selected = [[it.value, it.weight] for it in result.selected]

        with open(self._pack_log_path, "a", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                self._call_idx,
                result.knap_factor,
                len(result.selected),
                result.total_value,
                result.total_weight,
                result.remaining_before,
                result.remaining_after,
                round(kpis["Fill"], 5),
                result.candidates_evaluated,
                json.dumps(selected),
            ])

        self._call_idx += 1
        return self._pack_log_path

    # -----------------------------
    # Snapshots
    # -----------------------------
    def write_packed_items_csv(self, backpack: Backpack, filename: str = "packed_items.csv") -> str:
        """
        Columns:
          position, value, weight
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["position", "value", "weight"])
            for pos, it in enumerate(backpack.packed_items):
                w.writerow([pos, it.value, it.weight])
        return path

    def write_backpack_summary_csv(self, backpack: Backpack, filename: str = "backpack_summary.csv") -> str:
        """
        One header row + one data row with the KPIs of compute_backpack_metrics.
        """
        path = os.path.join(self.out_dir, filename)
        metrics = compute_backpack_metrics(backpack)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(list(metrics.keys()))
            w.writerow([round(v, 5) for v in metrics.values()])
        return path
