"""
Cover Summary
=============

Build one cover and print its cells, face sizes and genus, optionally
followed by a closed-form data table.

USAGE:
    python 01_cover_summary.py -m 6                # MC_6(Per_1)
    python 01_cover_summary.py -m 6 -c 2 -b        # MC_6(Per_2), binary ids
    python 01_cover_summary.py -m 5 -d             # Dyn_5(Per_1)
    python 01_cover_summary.py -t 12               # table only, periods 2..12

OUTPUTS
-------

  - Vertices, edges (with wake and kneading sequence), faces
  - Face sizes, smallest/largest face, genus
  - Table: period | vertices edges faces genus (marked cycle cover only)

EXPECTED OUTPUT (-t 6):
      period |     vertices        edges        faces        genus
           2 |            1            0            1            0
           3 |            2            1            1            0
           4 |            3            3            2            0
           5 |            6           11            3            2
           6 |            9           20            5            4

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

from marked_cycles.builders import DynatomicCover, MarkedCycleCover
from marked_cycles.analysis.combinatorics import MarkedCycleCombinatorics


def print_row(*cells):
    period, *rest = cells
    print(f"{period:>8} | " + " ".join(f"{c:>12}" for c in rest))


def print_cover(args):
    """Build and summarize one cover (skipped if marked period is 0)."""
    if args.marked_period <= 0:
        return

    print(
        f"Computing combinatorics of (c,lambda) -> c cover for marked period "
        f"{args.marked_period}, critical period {args.crit_period}"
    )
    cls = DynatomicCover if args.dynatomic else MarkedCycleCover
    cover = cls.build(args.marked_period, args.crit_period)
    print(cover.summarize(indent=args.indent, binary=args.binary))


def print_data_table(args):
    """Closed-form V, E, F, genus for periods 2..t (skipped if t is 0)."""
    if args.table_max_period <= 0:
        return
    if args.dynatomic:
        print("\nData table not yet supported for dynatomic curves.")
        return

    comb = MarkedCycleCombinatorics(args.crit_period)
    print_row("period", "vertices", "edges", "faces", "genus")
    for period in range(2, args.table_max_period + 1):
        print_row(
            period,
            comb.vertices(period),
            comb.edges(period),
            comb.faces(period),
            comb.genus(period),
        )


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Summarize a marked cycle or dynatomic cover")
    parser.add_argument("-m", "--marked-period", type=int, default=0,
                        help="Period of the marked cycle (0 to skip)")
    parser.add_argument("-c", "--crit-period", type=int, default=1,
                        help="Period of the critical cycle (1 or 2)")
    parser.add_argument("-t", "--table-max-period", type=int, default=0,
                        help="Max period of data table (0 to skip)")
    parser.add_argument("-d", "--dynatomic", action="store_true",
                        help="Compute the dynatomic cover instead of the marked cycle cover")
    parser.add_argument("-b", "--binary", action="store_true",
                        help="Display cell ids in binary")
    parser.add_argument("--indent", type=int, default=4,
                        help="How far to indent the cell descriptions")
    args = parser.parse_args(argv)

    print_cover(args)
    print_data_table(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
