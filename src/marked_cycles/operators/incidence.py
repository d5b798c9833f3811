"""
Incidence Matrices of a Cover
=============================

Pure combinatorics on the integer-indexed cover mesh (Cover.as_mesh()).

DEFINITIONS:
    d₀: E × V  oriented edge-vertex incidence
    N:  F × E  face-side counts, N[f, e] = number of steps of face f along e

Faces of a cover may run along the same edge more than once (a face can
touch itself), so N counts sides instead of storing signs.

TRACE IDENTITIES:
    1. column sums of N = faces_per_edge = 2  (every edge has two sides)
    2. Σ N = Σ_f (real steps of f) = 2E
    3. Tr(d₀ᵀd₀) = 2E                        (no edge is a loop)

Matrices are scipy.sparse: face walks at period 13 already have about
10^4 edges, and each face touches a handful of them.

Date: Jan 2026
"""

import numpy as np
from typing import Dict, List, Sequence, Tuple

from scipy.sparse import csr_matrix, lil_matrix


def build_vertex_edge_incidence(edges: Sequence[Tuple[int, int]], num_vertices: int) -> csr_matrix:
    """
    Build d₀: C⁰ → C¹.

    DEFINITION:
        d₀[e, v] = -1 if v is the start of edge e
        d₀[e, v] = +1 if v is the end of edge e

    Returns:
        d0: (E, V) sparse matrix
    """
    d0 = lil_matrix((len(edges), num_vertices), dtype=np.int64)
    for e_idx, (i, j) in enumerate(edges):
        d0[e_idx, i] = -1
        d0[e_idx, j] = +1
    return d0.tocsr()


def build_face_edge_incidence(face_sides: Sequence[Sequence[int]], num_edges: int) -> csr_matrix:
    """
    Build the face-side count matrix N.

    Args:
        face_sides: per face, the edge index of every step (-1 = satellite
                    step that runs along no edge)
        num_edges: E

    Returns:
        N: (F, E) sparse matrix of side counts

    FAIL-FAST:
        Raises ValueError if a side index is out of range.
    """
    N = lil_matrix((len(face_sides), num_edges), dtype=np.int64)
    for f_idx, sides in enumerate(face_sides):
        for e_idx in sides:
            if e_idx < 0:
                continue
            if e_idx >= num_edges:
                raise ValueError(
                    f"Face {f_idx} uses edge {e_idx}, but there are only {num_edges} edges"
                )
            N[f_idx, e_idx] += 1
    return N.tocsr()


def faces_per_edge(N: csr_matrix) -> np.ndarray:
    """Number of face sides on each edge (column sums of N)."""
    return np.asarray(N.sum(axis=0)).ravel()


def build_operators_from_mesh(mesh: dict) -> Dict[str, object]:
    """
    Build both incidence matrices from a cover mesh dict.

    Returns:
        dict with d0, N, faces_per_edge (array) and traces
    """
    edges = mesh['E']
    d0 = build_vertex_edge_incidence(edges, len(mesh['V']))
    N = build_face_edge_incidence(mesh['F_sides'], len(edges))
    counts = faces_per_edge(N)

    return {
        'd0': d0,
        'N': N,
        'faces_per_edge': counts,
        'traces': {
            'd0td0': int((d0.T @ d0).diagonal().sum()),
            'sides': int(counts.sum()),
        },
    }


def satellite_steps(face_sides: Sequence[Sequence[int]]) -> List[int]:
    """Number of satellite steps (-1 sides) in each face."""
    return [sum(1 for s in sides if s < 0) for sides in face_sides]
