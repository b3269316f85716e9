#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pack two sample batches into one backpack and print the manifest.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_backpack.py

Outputs (when OUT_DIR is set) under OUT_DIR:
  - batch_items.csv, pack_log.csv, packed_items.csv, backpack_summary.csv
"""

from __future__ import annotations
import logging
import sys
from typing import List, Optional, TextIO

# ====== CONFIGURATION ======
CAPACITY = 100

# (value, weight) pairs, packed in order; each with its own knap factor
FIRST_BATCH = [(200, 50), (90, 25), (155, 40), (115, 30)]
FIRST_KNAP_FACTOR = 3

SECOND_BATCH = [(100, 95), (5, 1)]
SECOND_KNAP_FACTOR = 2

# Optional JSON file replacing FIRST_BATCH: [{"value": .., "weight": ..}, ...]
ITEMS_PATH: Optional[str] = None

# Artifact folder; None disables the CSV tracker
OUT_DIR: Optional[str] = None

LOG_LEVEL = logging.WARNING
# ===========================

from backpack import Backpack, Item, ValidationError
from backpack.planning.tracker import Tracker
from backpack.utils.read_jsons import read_items_json


def show_packed_items(packed_items: List[Item], out: TextIO = sys.stdout) -> None:
    out.write("Packed items:\n")
    out.write("----------------\n")
    out.write("Value:  Weight:\n")
    for it in packed_items:
        out.write(f"{it.value:>6}{it.weight:>9}\n")


def show_remaining_capacity(backpack: Backpack, out: TextIO = sys.stdout) -> None:
    out.write(f"Remaining backpack's capacity: {backpack.remaining_capacity}\n")


def main(out: TextIO = sys.stdout) -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    first = read_items_json(ITEMS_PATH) if ITEMS_PATH else [Item(v, w) for v, w in FIRST_BATCH]
    second = [Item(v, w) for v, w in SECOND_BATCH]

    backpack = Backpack(CAPACITY)
    tracker = Tracker(out_dir=OUT_DIR) if OUT_DIR else None

    try:
        backpack.pack(first, FIRST_KNAP_FACTOR, tracker=tracker)
        show_packed_items(backpack.packed_items, out)
        show_remaining_capacity(backpack, out)
        out.write("\n")

        backpack.pack(second, SECOND_KNAP_FACTOR, tracker=tracker)
        show_packed_items(backpack.packed_items, out)
        show_remaining_capacity(backpack, out)
    except ValidationError as e:
        out.write(f"{e}\n")
        return 1
    finally:
        if tracker is not None:
            tracker.write_packed_items_csv(backpack)
            tracker.write_backpack_summary_csv(backpack)

    return 0


if __name__ == "__main__":
    sys.exit(main())
