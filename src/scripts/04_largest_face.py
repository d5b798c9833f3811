"""
Largest Face as TikZ
====================

Print a tikzpicture of the largest (or smallest) face of MC_n(Per_c).

USAGE:
    python 04_largest_face.py -p 8
    python 04_largest_face.py -p 8 -c 2 --smallest
    python 04_largest_face.py -p 6 --all -b
    python 04_largest_face.py -p 8 --shifts

Satellite steps are drawn as double lines, real-axis crossings as dashed
spokes to the face label. The document must define \\abr and \\del.
With --shifts the relative-shift sequence of the face is printed instead.

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
from marked_cycles.render import TikzRenderer


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="TikZ drawing of a face of a cover")
    parser.add_argument("-c", "--crit-period", type=int, default=1,
                        help="Period of the critical cycle (1 or 2)")
    parser.add_argument("-p", "--period", type=int, default=8,
                        help="Period of the marked cycle")
    parser.add_argument("-d", "--dynatomic", action="store_true",
                        help="Use the dynatomic cover")
    parser.add_argument("-b", "--binary", action="store_true",
                        help="Display cell ids in binary")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--smallest", action="store_true", help="Draw the smallest face")
    group.add_argument("--all", action="store_true", help="Draw every face")
    parser.add_argument("--shifts", action="store_true",
                        help="Print the face label and its relative shifts instead of TikZ")
    args = parser.parse_args(argv)

    if args.shifts and (args.dynatomic or args.all):
        parser.error("--shifts needs a single face of the marked cycle cover")

    cls = DynatomicCover if args.dynatomic else MarkedCycleCover
    cover = cls.build(args.period, args.crit_period)

    if args.shifts:
        face = cover.smallest_face() if args.smallest else cover.largest_face()
        print(format(face.label, "b" if args.binary else ""))
        print(" ".join(str(s) for s in cover.face_shifts(face)))
        return 0

    renderer = TikzRenderer(cover.faces, binary=args.binary)

    if args.all:
        print(renderer.generate())
    elif args.smallest:
        print(renderer.draw_smallest_face())
    else:
        print(renderer.draw_largest_face())
    return 0


if __name__ == "__main__":
    sys.exit(main())
