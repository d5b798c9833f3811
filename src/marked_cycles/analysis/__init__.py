"""
Analysis functions - depend on builders and operators.

Includes:
- verify_cover: surface structure checks (2 face sides per edge, χ parity)
- face_statistics: face-size statistics and the per-period table
- combinatorics: closed-form V, E, F and genus
"""

from .verify_cover import verify_surface_structure
from .face_statistics import (
    FaceStatistics,
    compute_face_statistics,
    face_counts_table,
    format_table,
)
from .combinatorics import (
    MarkedCycleCombinatorics,
    DynatomicCombinatorics,
    moebius,
    euler_totient,
)
