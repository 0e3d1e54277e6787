#!/usr/bin/env python3
"""
Profile a projaudit run for performance bottlenecks.

This script:
1. Creates a synthetic project tree
2. Profiles a full audit of it
3. Writes the cProfile dump and the top functions report

Example usage:
    python scripts/profile_audit.py --depth 4 --fanout 6 --output profile_results/
"""

import argparse
import cProfile
import io
import json
import pstats
import random
import sys
import tempfile
import time
from pathlib import Path
from typing import Dict

from tqdm import tqdm

from projaudit import audit_project
from projaudit.vcs import FileStatus


class _NoVcs:
    def query_status(self, root):
        return [FileStatus(path="x.py", index=" ", working_dir="M")]


def generate_tree(root: Path, depth: int = 4, fanout: int = 6, seed: int = 42) -> int:
    """Generate a synthetic project tree under *root*.

    Args:
        root: Directory to populate
        depth: Number of directory levels below root
        fanout: Subdirectories per directory
        seed: Random seed for reproducibility

    Returns:
        Number of directories created
    """
    rng = random.Random(seed)
    markers = ["README.md", "README", ".gitignore", "package-lock.json", "yarn.lock", ".env.example", ".env"]
    frontier = [root]
    created = 0
    for _ in tqdm(range(depth), desc="Generating"):
        next_frontier = []
        for parent in frontier:
            for i in range(fanout):
                d = parent / f"dir_{i}"
                d.mkdir()
                created += 1
                # leave some directories empty
                if rng.random() < 0.1:
                    continue
                for name in rng.sample(markers, k=rng.randint(0, 3)):
                    (d / name).write_text("")
                (d / "module.py").write_text("")
                next_frontier.append(d)
        frontier = next_frontier
    return created


def profile_audit(root: Path, output_dir: Path) -> Dict[str, float]:
    """Profile one audit of *root* and save the results to *output_dir*."""
    profiler = cProfile.Profile()
    profiler.enable()

    start = time.time()
    results = audit_project(str(root), status_query=_NoVcs())
    elapsed = time.time() - start

    profiler.disable()

    output_dir.mkdir(parents=True, exist_ok=True)
    profile_file = output_dir / "audit.prof"
    profiler.dump_stats(str(profile_file))

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats('cumulative')
    ps.print_stats(20)
    print("\nTop functions by cumulative time:")
    print(s.getvalue())

    with open(output_dir / "audit_top.txt", "w") as f:
        f.write(s.getvalue())

    return {
        "audit_time": elapsed,
        "empty_folders": len(results.empty_folders),
        "lock_files": len(results.multiple_lock_files),
        "duplicated_readme_files": len(results.duplicated_readme_files),
        "profile_file": str(profile_file),
    }


def main():
    parser = argparse.ArgumentParser(description="Profile projaudit performance")
    parser.add_argument("--depth", type=int, default=4,
                        help="Directory levels in the synthetic tree")
    parser.add_argument("--fanout", type=int, default=6,
                        help="Subdirectories per directory")
    parser.add_argument("--output", type=str, default="profile_results",
                        help="Output directory for profile results")

    args = parser.parse_args()
    output_dir = Path(args.output)

    try:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            n_dirs = generate_tree(root, depth=args.depth, fanout=args.fanout)
            metrics = profile_audit(root, output_dir)
            metrics["directories"] = n_dirs

        with open(output_dir / "metrics.json", "w") as f:
            json.dump(metrics, f, indent=2)

        print(f"\nProfile results saved to: {output_dir.absolute()}")
        print(f"To view profile results, run: snakeviz {output_dir}/*.prof")

    except Exception as e:
        print(f"Error during profiling: {e}", file=sys.stderr)
        raise


if __name__ == "__main__":
    main()
