"""
marked_cycles
=============

Combinatorial covers of quadratic dynamics: the marked cycle cover
MC_n(Per_c) and the dynatomic cover Dyn_n(Per_c), built from the Lavaurs
lamination and the angle-doubling map.

Layers:
    spec      - constants, errors, cell types, cover mesh contract
    dynamics  - angle arithmetic, orbits, abstract cycles
    builders  - lamination, vertex identities, cover builder, covers
    operators - sparse incidence matrices
    analysis  - verification, face statistics, closed-form counts
    render    - TikZ / SVG output

Usage:
    from marked_cycles import MarkedCycleCover
    cover = MarkedCycleCover.build(8, crit_period=1)
    print(cover.genus())
"""

from .builders import (
    Lamination,
    MarkedCycleCover,
    DynatomicCover,
    MarkedCycleCoverBuilder,
    DynatomicCoverBuilder,
)
