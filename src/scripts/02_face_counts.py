"""
Face Counts Table
=================

CSV table of face-size statistics of MC_n(Per_c) for n = 1..max_period.

COLUMNS:
    period, max face, min face, min irreducible face, # max faces,
    # min faces, # min irreducible faces, # reflexive faces,
    # odd irreducible faces

USAGE:
    python 02_face_counts.py -c 1 -m 12
    python 02_face_counts.py -m 12 --serde-header > counts.csv

--serde-header writes machine-readable column names instead of the
human-readable header.

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

from marked_cycles.analysis.face_statistics import face_counts_table, format_table


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Face-size table of marked cycle covers")
    parser.add_argument("-c", "--crit-period", type=int, default=1,
                        help="Period of the critical cycle (1 or 2)")
    parser.add_argument("-m", "--max-period", type=int, default=15,
                        help="Max period of data table")
    parser.add_argument("-s", "--serde-header", action="store_true",
                        help="Write a machine-readable header")
    args = parser.parse_args(argv)

    rows = face_counts_table(args.max_period, args.crit_period)
    sys.stdout.write(format_table(rows, serde_header=args.serde_header))
    return 0


if __name__ == "__main__":
    sys.exit(main())
