"""
Surface Verification
====================

Check that a built cover really is a closed surface, using the face-side
incidence N (operators/incidence.py).

    - every edge has exactly FACES_PER_EDGE[surface] = 2 face sides
    - Σ N = 2E
    - χ = V - E + F is even

These functions are in the analysis/ layer because they depend on operators.

Date: Jan 2026
"""

from typing import Dict

import numpy as np

from ..spec.constants import COMPLEX_SURFACE, FACES_PER_EDGE
from ..operators.incidence import build_operators_from_mesh


def verify_surface_structure(cover) -> Dict:
    """
    Verify the surface structure of a cover.

    Args:
        cover: MarkedCycleCover or DynatomicCover

    Returns:
        dict with verification results
    """
    mesh = cover.as_mesh()
    ops = build_operators_from_mesh(mesh)
    counts = ops['faces_per_edge']
    k = FACES_PER_EDGE[COMPLEX_SURFACE]
    E = mesh['n_E']

    if E > 0:
        min_bound = int(np.min(counts))
        max_bound = int(np.max(counts))
    else:
        min_bound = max_bound = k

    chi = cover.euler_characteristic()
    face_size_sum = int(sum(cover.face_sizes()))

    return {
        'is_surface': bool(np.all(counts == k)),
        'min_faces_per_edge': min_bound,
        'max_faces_per_edge': max_bound,
        'side_trace': ops['traces']['sides'],
        'expected_side_trace': k * E,
        'chi': chi,
        'chi_is_even': chi % 2 == 0,
        'face_size_sum': face_size_sum,
    }
