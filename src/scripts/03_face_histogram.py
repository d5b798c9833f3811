"""
Face Size Histogram
===================

Histogram of the face sizes of MC_n(Per_c), saved as an image.

USAGE:
    python 03_face_histogram.py -p 10 -c 1
    python 03_face_histogram.py -p 12 -o plots/face_sizes.svg

OUTPUT:
    plots/face_sizes_per{c}_mc{n}.svg (default path)

Jan 2026
"""

import sys
from pathlib import Path

# Find src directory robustly (works from any location)
def _find_src():
    """Find src/ by looking for marked_cycles/ subdirectory."""
    current = Path(__file__).resolve().parent
    for _ in range(10):  # max 10 levels up
        candidate = current / 'src'
        if (candidate / 'marked_cycles').is_dir():
            return candidate
        if (current / 'marked_cycles').is_dir():
            return current
        current = current.parent
    raise RuntimeError("Cannot find src/marked_cycles directory")

sys.path.insert(0, str(_find_src()))

import numpy as np
from marked_cycles.builders import MarkedCycleCover
from marked_cycles.analysis.face_statistics import compute_face_statistics

# matplotlib imported only in plot functions to avoid CI issues on headless systems


def make_histogram(period: int, crit_period: int, save_path: Path) -> Path:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    cover = MarkedCycleCover.build(period, crit_period)
    stats = compute_face_statistics(cover)
    sizes = np.arange(len(stats.histogram))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(sizes, stats.histogram, width=1.0, color="tab:blue")
    ax.set_xlim(1.5, stats.max_face + 0.5)
    ax.set_xlabel("face size")
    ax.set_ylabel("number of faces")
    ax.set_title(f"MC_{period}(Per_{crit_period}): {cover.num_faces()} faces, genus {cover.genus()}")

    save_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return save_path


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Face-size histogram of a marked cycle cover")
    parser.add_argument("-c", "--crit-period", type=int, default=1,
                        help="Period of the critical cycle (1 or 2)")
    parser.add_argument("-p", "--period", type=int, default=10,
                        help="Period of the marked cycle")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output image path")
    args = parser.parse_args(argv)

    output = args.output or Path("plots") / f"face_sizes_per{args.crit_period}_mc{args.period}.svg"
    path = make_histogram(args.period, args.crit_period, output)
    print(f"✓ Saved {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
