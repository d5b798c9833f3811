"""
Cover Construction Tests
========================

Hand-checked small covers, topology against closed forms, face walk
invariants and the summary text.

Run: python -m pytest tests/core/test_covers.py -v
Slow (periods 11-14): python -m pytest tests/core/test_covers.py -v -m slow
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from marked_cycles.builders import (
    DynatomicCover,
    DynatomicCoverBuilder,
    MarkedCycleCover,
    MarkedCycleCoverBuilder,
)
from marked_cycles.analysis.combinatorics import DynatomicCombinatorics, MarkedCycleCombinatorics
from marked_cycles.analysis.verify_cover import verify_surface_structure
from marked_cycles.dynamics.abstract_cycles import AbstractCycle, ShiftedCycle
from marked_cycles.spec.structures import validate_cover_mesh

MC_GENUS = {
    1: [0, 0, 2, 4, 16, 32, 79, 162],
    2: [-1, 0, 0, 2, 7, 17, 42, 93],
}
DYN_GENUS = {
    1: [0, 2, 14, 34, 124, 285, 745, 1690],
    2: [-1, 0, 4, 15, 61, 151, 412, 964],
}
MC_MAX_FACE = {
    1: [6, 10, 12, 18, 22, 28, 32],
    2: [6, 8, 12, 15, 21, 25, 31],
}


@pytest.fixture(scope="module")
def mc3():
    return MarkedCycleCover.build(3, 1)


@pytest.fixture(scope="module")
def dyn3():
    return DynatomicCover.build(3, 1)


# =============================================================================
# Small covers, checked by hand
# =============================================================================

class TestMarkedCyclePeriod3:
    """MC_3(Per_1): cycles (1) and (3), one real arc 3/7 <-> 4/7, two satellites."""

    def test_vertices(self, mc3):
        assert [str(v) for v in mc3.vertices] == ["(1)", "(3)"]

    def test_one_edge(self, mc3):
        assert mc3.num_edges() == 1
        edge = mc3.edges[0]
        assert (str(edge.start), str(edge.end)) == ("(3)", "(1)")
        assert (edge.wake.angle0, edge.wake.angle1) == (3, 4)
        assert edge.start != edge.end

    def test_satellite_wakes_have_no_edge(self, mc3):
        assert len(mc3.wakes) == 3
        assert len(mc3.satellite_wakes()) == 2

    def test_single_face(self, mc3):
        assert mc3.num_faces() == 1
        face = mc3.faces[0]
        assert [str(v) for v in face.vertices] == ["(1)", "(1)", "(3)", "(3)"]
        assert face.sides == (None, 0, None, 0)
        assert face.degree == 2
        assert face.crossings == (3,)
        assert str(face.vertices[face.crossings[0]]) == "(3)"
        assert str(face.label) == "<1>"
        assert not face.is_reflexive

    def test_face_shifts(self, mc3):
        # real steps (1)->(3) via 4->3 and (3)->(1) via 3->4
        assert mc3.face_shifts(mc3.faces[0]) == [0, 0]

    def test_topology(self, mc3):
        assert mc3.euler_characteristic() == 2
        assert mc3.genus() == 0


@pytest.mark.parametrize("crit_period", [1, 2])
def test_face_shifts_one_per_real_step(crit_period):
    for period in range(3, 9):
        cover = MarkedCycleCover.build(period, crit_period)
        for face in cover.faces:
            shifts = cover.face_shifts(face)
            assert len(shifts) == sum(1 for s in face.sides if s is not None)
            assert all(0 <= s < period for s in shifts)


def test_face_shifts_of_satellite_only_face_is_empty():
    cover = MarkedCycleCover.build(2)
    assert cover.face_shifts(cover.faces[0]) == []


def test_marked_cycle_period_1_has_alpha():
    cover = MarkedCycleCover.build(1)
    assert [str(v) for v in cover.vertices] == ["(0)", "(1)"]
    assert (cover.num_vertices(), cover.num_edges(), cover.num_faces()) == (2, 1, 1)
    assert cover.faces[0].degree == 2
    assert cover.genus() == 0


def test_marked_cycle_period_2_is_one_vertex_face():
    """The only arc is a satellite: one face that walks around it once."""
    cover = MarkedCycleCover.build(2)
    assert (cover.num_vertices(), cover.num_edges(), cover.num_faces()) == (1, 0, 1)
    assert len(cover.faces[0]) == 1
    assert cover.faces[0].sides == (None,)


def test_marked_cycle_period_3_crit_2_has_negative_genus():
    cover = MarkedCycleCover.build(3, 2)
    assert (cover.num_vertices(), cover.num_edges(), cover.num_faces()) == (2, 0, 2)
    assert cover.genus() == -1


class TestDynatomicSmall:
    """Dyn_2 and Dyn_3 over Per_1."""

    def test_period_2(self):
        cover = DynatomicCover.build(2)
        assert (cover.num_vertices(), cover.num_edges()) == (2, 2)
        assert len(cover.primitive_faces) == 1
        assert len(cover.satellite_faces) == 1
        face = cover.primitive_faces[0]
        assert [str(v) for v in face.vertices] == ["[1; 0]", "[1; 1]"]
        assert face.sides == (0, 1)
        assert cover.genus() == 0

    def test_period_3_counts(self, dyn3):
        assert (dyn3.num_vertices(), dyn3.num_edges()) == (6, 9)
        assert len(dyn3.primitive_faces) == 3
        assert len(dyn3.satellite_faces) == 2
        assert dyn3.genus() == 0

    def test_satellite_faces_are_whole_cycles(self, dyn3):
        """gcd(s, 3) = 1: each satellite wake gives one face of length 3."""
        for face in dyn3.satellite_faces:
            assert len(face) == 3
            assert isinstance(face.label, ShiftedCycle)
            assert len({v.shift for v in face.vertices}) == 3

    def test_vertices_in_angle_order(self, dyn3):
        angles = [v.to_point().angle for v in dyn3.vertices]
        assert angles == [1, 2, 3, 4, 5, 6]

    def test_faces_is_primitive_then_satellite(self, dyn3):
        assert dyn3.faces == dyn3.primitive_faces + dyn3.satellite_faces


def test_dynatomic_period_1_has_alpha():
    cover = DynatomicCover.build(1)
    assert cover.num_vertices() == 2
    assert cover.vertices[-1].rep.angle == 1
    assert cover.genus() == 0


# =============================================================================
# Topology against closed forms (periods 3-10)
# =============================================================================

@pytest.mark.parametrize("crit_period", [1, 2])
def test_marked_cycle_genus(crit_period):
    comb = MarkedCycleCombinatorics(crit_period)
    for i, period in enumerate(range(3, 11)):
        cover = MarkedCycleCover.build(period, crit_period)
        assert cover.genus() == MC_GENUS[crit_period][i], f"MC_{period}(Per_{crit_period})"
        assert cover.genus() == comb.genus(period)
        assert cover.num_vertices() == comb.vertices(period)
        assert cover.num_edges() == comb.edges(period)
        assert cover.num_faces() == comb.faces(period)


@pytest.mark.parametrize("crit_period", [1, 2])
def test_dynatomic_genus(crit_period):
    comb = DynatomicCombinatorics(crit_period)
    for i, period in enumerate(range(3, 11)):
        cover = DynatomicCover.build(period, crit_period)
        assert cover.genus() == DYN_GENUS[crit_period][i], f"Dyn_{period}(Per_{crit_period})"
        assert cover.genus() == comb.genus(period)
        assert cover.num_vertices() == comb.vertices(period)
        assert cover.num_edges() == comb.edges(period)
        assert len(cover.primitive_faces) == comb.primitive_faces(period)
        assert len(cover.satellite_faces) == comb.satellite_faces(period)


@pytest.mark.parametrize("crit_period", [1, 2])
def test_marked_cycle_max_face(crit_period):
    sizes = [max(MarkedCycleCover.build(n, crit_period).face_sizes()) for n in range(4, 11)]
    assert sizes == MC_MAX_FACE[crit_period]


# =============================================================================
# Face walk invariants
# =============================================================================

@pytest.mark.parametrize("builder", [MarkedCycleCoverBuilder, DynatomicCoverBuilder])
@pytest.mark.parametrize("crit_period", [1, 2])
def test_every_edge_has_two_sides(builder, crit_period):
    for period in range(3, 9):
        result = verify_surface_structure(builder(period, crit_period).build())
        assert result['is_surface'], f"period {period}: {result}"
        assert result['side_trace'] == result['expected_side_trace']
        assert result['chi_is_even']


@pytest.mark.parametrize("cls", [MarkedCycleCover, DynatomicCover])
@pytest.mark.parametrize("crit_period", [1, 2])
def test_no_edge_is_a_loop(cls, crit_period):
    for period in (1, 3, 6, 8):
        cover = cls.build(period, crit_period)
        assert all(e.start != e.end for e in cover.edges), f"period {period}"


@pytest.mark.parametrize("cls", [MarkedCycleCover, DynatomicCover])
def test_mesh_export_is_valid(cls):
    mesh = cls.build(7, 1).as_mesh()
    ok, errors = validate_cover_mesh(mesh, strict=False)
    assert ok, errors
    assert mesh['n_V'] == len(mesh['V'])
    assert mesh['faces_per_edge'] == 2


def test_marked_cycle_arc_gives_edge_or_satellite():
    cover = MarkedCycleCover.build(8, 1)
    real = [w for w in cover.wakes if w.is_real]
    assert len(real) == cover.num_edges()
    assert len(real) + len(cover.satellite_wakes()) == len(cover.wakes)
    assert all(w.start != w.end for w in real)


def test_satellite_wakes_walked_once():
    """Face sides: two per real edge, one per satellite wake."""
    for period in range(3, 9):
        cover = MarkedCycleCover.build(period, 1)
        satellite_steps = sum(s is None for f in cover.faces for s in f.sides)
        assert satellite_steps == len(cover.satellite_wakes())
        assert sum(cover.face_sizes()) == 2 * cover.num_edges() + satellite_steps


def test_face_degree_counts_crossings():
    cover = DynatomicCover.build(6, 1)
    for face in cover.primitive_faces:
        assert face.degree == len(face.crossings) + 1


def test_face_sizes_restartable(mc3):
    assert list(mc3.face_sizes()) == list(mc3.face_sizes()) == [4]
    assert mc3.num_odd_faces() == 0
    assert mc3.largest_face() is mc3.smallest_face()


def test_builds_are_deterministic():
    a = MarkedCycleCover.build(6, 2)
    b = MarkedCycleCover.build(6, 2)
    assert a.faces == b.faces
    assert a.edges == b.edges


# =============================================================================
# Summary text
# =============================================================================

class TestSummarize:

    def test_sections(self, mc3):
        text = mc3.summarize()
        assert "2 vertices:" in text
        assert "    (1)" in text
        assert "1 edges:" in text
        assert "(3) -- (1)   wake = 3 <-> 4   KS = 01*" in text
        assert "<1> = ((1), (1), (3), (3)); deg = 2" in text
        assert "Largest face: 4" in text
        assert text.rstrip().endswith("Genus is 0")

    def test_binary_and_indent(self, mc3):
        text = mc3.summarize(indent=2, binary=True)
        assert "\n  (001)" in text
        assert "wake = 011 <-> 100" in text

    def test_long_lists_collapse(self):
        cover = DynatomicCover.build(8, 1)
        text = cover.summarize()
        assert "\n240 vertices\n" in text
        assert "240 vertices:" not in text
        assert "\n960 edges\n" in text
        assert "Face sizes:" not in text
        assert "Genus is 285" in text

    def test_dynatomic_sections(self, dyn3):
        text = dyn3.summarize()
        assert "3 primitive faces:" in text
        assert "2 satellite faces:" in text
        assert "6 vertices:" in text


def test_repr(mc3):
    assert repr(mc3) == "MarkedCycleCover(period=3, crit_period=1, V=2, E=1, F=1, genus=0)"


# =============================================================================
# Slow: the published numbers
# =============================================================================

@pytest.mark.slow
def test_max_face_period_13():
    assert max(MarkedCycleCover.build(13, 1).face_sizes()) == 58
    assert max(MarkedCycleCover.build(13, 2).face_sizes()) == 52


@pytest.mark.slow
def test_genus_period_13():
    assert MarkedCycleCover.build(13, 1).genus() == 1570
    assert MarkedCycleCover.build(13, 2).genus() == 940


@pytest.mark.slow
def test_genus_period_14():
    assert MarkedCycleCover.build(14, 1).genus() == 3154
    assert MarkedCycleCover.build(14, 2).genus() == 1912


@pytest.mark.slow
@pytest.mark.parametrize("crit_period", [1, 2])
def test_closed_forms_periods_11_to_14(crit_period):
    mc = MarkedCycleCombinatorics(crit_period)
    dyn = DynatomicCombinatorics(crit_period)
    for period in range(11, 15):
        assert mc.cover_genus(period) == mc.genus(period)
        assert mc.cover_faces(period) == mc.faces(period)
        assert dyn.cover_genus(period) == dyn.genus(period)
