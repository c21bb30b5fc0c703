#!/usr/bin/env python3
"""Quick perf benchmark for nccl document parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from ncclpy import Pair, parse_file


def _collect_files(root: Path) -> list[Path]:
    return [path for path in sorted(root.rglob("*.nccl")) if path.is_file()]


def _count_nodes(pair: Pair) -> int:
    return 1 + sum(_count_nodes(child) for child in pair.children)


def _run_once(
    files: list[Path],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_nodes = 0
    total_diagnostics = 0
    iterator = tqdm(files, desc=label, unit="file") if show_progress else files
    for path in iterator:
        result = parse_file(path)
        total_diagnostics += len(result.diagnostics)
        if result.tree is not None:
            total_nodes += _count_nodes(result.tree)
    duration = time.perf_counter() - start
    return duration, total_nodes, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark nccl parsing throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for *.nccl files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")

    files = _collect_files(root)
    if not files:
        raise SystemExit(f"No .nccl files found under {root}")

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(files, label=f"warmup {warmup_idx + 1}", show_progress=show_progress)

        timings: list[float] = []
        nodes = 0
        diagnostics = 0
        for run_idx in range(max(args.runs, 1)):
            duration, nodes, diagnostics = _run_once(
                files,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, nodes, diagnostics

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, nodes, diagnostics = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats("tottime").print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, nodes, diagnostics = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {len(files)}")
    print(f"Nodes: {nodes}")
    print(f"Diagnostics: {diagnostics}")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
