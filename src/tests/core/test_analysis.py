"""
Incidence and Face Statistics Tests
===================================

Sparse incidence operators, surface verification and the face counts
table.

Run: python -m pytest tests/core/test_analysis.py -v
"""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from scipy import sparse

from marked_cycles.builders import DynatomicCover, MarkedCycleCover
from marked_cycles.operators.incidence import (
    build_face_edge_incidence,
    build_operators_from_mesh,
    build_vertex_edge_incidence,
    faces_per_edge,
    satellite_steps,
)
from marked_cycles.analysis.face_statistics import (
    SERDE_HEADER,
    TABLE_HEADER,
    compute_face_statistics,
    face_counts_table,
    format_table,
)
from marked_cycles.analysis.verify_cover import verify_surface_structure


# =============================================================================
# Incidence operators
# =============================================================================

def test_vertex_edge_incidence():
    d0 = build_vertex_edge_incidence([(0, 1), (1, 2), (2, 2)], 3)
    assert sparse.issparse(d0)
    dense = d0.toarray()
    assert dense.tolist() == [[-1, 1, 0], [0, -1, 1], [0, 0, 0]]
    assert np.all(dense.sum(axis=1) == 0)


def test_face_edge_incidence_counts_repeats():
    N = build_face_edge_incidence([[0, 1, 0, -1], [1]], 3)
    assert N.shape == (2, 3)
    assert N.toarray().tolist() == [[2, 1, 0], [0, 1, 0]]
    assert faces_per_edge(N).tolist() == [2, 2, 0]


def test_face_edge_incidence_bad_side():
    with pytest.raises(ValueError, match="only 2 edges"):
        build_face_edge_incidence([[0, 5]], 2)


def test_satellite_steps():
    assert satellite_steps([[0, -1, -1], [2]]) == [2, 0]


def test_operators_from_cover_mesh():
    mesh = DynatomicCover.build(5, 1).as_mesh()
    ops = build_operators_from_mesh(mesh)
    E = mesh['n_E']
    assert ops['N'].shape == (mesh['n_F'], E)
    assert ops['d0'].shape == (E, mesh['n_V'])
    assert np.all(ops['faces_per_edge'] == 2)
    assert ops['traces']['sides'] == 2 * E


def test_d0_trace_counts_edge_ends():
    mesh = MarkedCycleCover.build(6, 1).as_mesh()
    ops = build_operators_from_mesh(mesh)
    assert all(i != j for i, j in mesh['E'])
    assert ops['traces']['d0td0'] == 2 * mesh['n_E']


# =============================================================================
# Surface verification
# =============================================================================

def test_verify_surface_structure_fields():
    cover = MarkedCycleCover.build(5, 1)
    result = verify_surface_structure(cover)
    assert result['is_surface']
    assert result['min_faces_per_edge'] == result['max_faces_per_edge'] == 2
    assert result['chi'] == cover.euler_characteristic()
    assert result['face_size_sum'] == sum(cover.face_sizes())


def test_verify_surface_without_edges():
    """MC_2 has no edges at all; it is trivially a surface."""
    result = verify_surface_structure(MarkedCycleCover.build(2))
    assert result['is_surface']
    assert result['side_trace'] == 0


# =============================================================================
# Face statistics
# =============================================================================

def test_statistics_period_3():
    stats = compute_face_statistics(MarkedCycleCover.build(3, 1))
    assert stats.row() == (3, 4, 4, 4, 1, 1, 1, 0, 0)
    assert stats.mean_face == 4.0
    assert stats.histogram.tolist() == [0, 0, 0, 0, 1]


def test_statistics_consistent():
    cover = DynatomicCover.build(6, 2)
    stats = compute_face_statistics(cover)
    assert stats.max_face == max(cover.face_sizes())
    assert stats.histogram.sum() == cover.num_faces()
    assert stats.num_reflexive == sum(1 for f in cover.faces if f.is_reflexive)
    assert stats.histogram[stats.max_face] == stats.num_max


def test_face_counts_table():
    rows = face_counts_table(8, 1)
    assert [r.period for r in rows] == list(range(1, 9))
    assert [r.max_face for r in rows[3:]] == [6, 10, 12, 18, 22]


def test_format_table_headers():
    rows = face_counts_table(3, 2)
    text = format_table(rows)
    assert text.splitlines()[0] == TABLE_HEADER
    assert len(text.splitlines()) == 4
    machine = format_table(rows, serde_header=True)
    assert machine.splitlines()[0] == SERDE_HEADER
    assert SERDE_HEADER.startswith("period,max_face,min_face")
