#!/usr/bin/env python3
"""Analyze generated board layouts over a range of seeds."""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from catan_lite.engine.board import BoardGenerator, NumberShuffleConstraints, pip_count
from catan_lite.engine.types import PRODUCIBLE_RESOURCES
from catan_lite.utils.repro import make_rng, seed_everything


def board_record(seed: int, generator: BoardGenerator) -> Dict[str, object]:
    board = generator.generate(make_rng(seed))
    record: Dict[str, object] = {
        "seed": seed,
        "attempts": board.attempts,
        "degraded": board.degraded,
        "desert": board.desert_index,
        "red_conflicts": len(board.red_number_conflicts()),
    }
    for resource in PRODUCIBLE_RESOURCES:
        record[f"pips_{resource.value}"] = sum(
            pip_count(tile.number_token) for tile in board.tiles if tile.resource == resource
        )
    return record


def analyze(seeds: range, max_attempts: int, progress: bool = True) -> pd.DataFrame:
    generator = BoardGenerator(constraints=NumberShuffleConstraints(max_attempts=max_attempts))
    records: List[Dict[str, object]] = []
    for seed in tqdm(seeds, desc="boards", disable=not progress):
        records.append(board_record(seed, generator))
    return pd.DataFrame.from_records(records)


def bootstrap_mean_interval(values: np.ndarray, rounds: int = 1000) -> Tuple[float, float]:
    """95% interval of the mean, resampled from the global numpy generator."""
    samples = np.random.choice(values, size=(rounds, len(values)), replace=True)
    means = samples.mean(axis=1)
    return float(np.percentile(means, 2.5)), float(np.percentile(means, 97.5))


def summarize(frame: pd.DataFrame) -> None:
    attempts = frame["attempts"].to_numpy()
    low, high = bootstrap_mean_interval(attempts)
    print(f"Board Analysis ({len(frame)} boards):")
    print("=" * 60)
    print(f"Degraded: {int(frame['degraded'].sum())}")
    print(
        f"Attempts: mean={attempts.mean():.2f} median={np.median(attempts):.0f} "
        f"p95={np.percentile(attempts, 95):.0f} max={attempts.max()}"
    )
    print(f"Mean attempts 95% bootstrap interval: [{low:.2f}, {high:.2f}]")
    print(f"Boards with 6/8 conflicts: {int((frame['red_conflicts'] > 0).sum())}")

    print("\nDesert position frequency:")
    counts = frame["desert"].value_counts().sort_index()
    for tile_id, count in counts.items():
        print(f"  Tile {tile_id:2}: {count}")

    print("\nMean pips per resource:")
    pip_columns = [column for column in frame.columns if column.startswith("pips_")]
    for column, value in frame[pip_columns].mean().items():
        print(f"  {column[5:]:6} {value:5.2f}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--boards", type=int, default=1000)
    parser.add_argument("--start-seed", type=int, default=0)
    parser.add_argument("--max-attempts", type=int, default=1000)
    parser.add_argument("--csv", type=str, default=None, help="Optional path to write raw records")
    args = parser.parse_args(argv)
    seed_everything(args.start_seed)

    frame = analyze(range(args.start_seed, args.start_seed + args.boards), args.max_attempts)
    summarize(frame)
    if args.csv:
        frame.to_csv(args.csv, index=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
