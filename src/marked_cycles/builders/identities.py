"""
Vertex Identity Strategies
==========================

The cover builder is generic: everything that differs between the marked
cycle cover and the dynatomic cover lives in one of these two strategies.

                      MarkedCycleIdentity        ShiftedCycleIdentity
    vertex            AbstractCycle              ShiftedCycle (phase kept)
    adjacency key     the cycle                  cycle rep (phase dropped)
    successor         other endpoint cycle       other.rotate(node.shift - own_shift)
    visited key       cycle class                the shifted cycle itself
    face label        AbstractCycleClass         AbstractPointClass
    satellite wake    repeated vertex in walk    gcd(s, n) satellite faces
    edges per wake    1 (0 if satellite)         n (one per phase)

Date: Jan 2026
"""

from math import gcd
from typing import Hashable, List, NamedTuple, Optional

from ..spec.constants import VERTEX_MARKED_CYCLE, VERTEX_SHIFTED_CYCLE
from ..spec.structures import Edge, Face, Wake
from ..dynamics.abstract_cycles import AbstractCycle, AbstractPoint, ShiftedCycle
from .covers import Cover, DynatomicCover, MarkedCycleCover


class AdjacencyEntry(NamedTuple):
    """One dart of the rotation system: leave `own` along wake `wake` towards `other`."""
    other: object
    own_shift: int
    tag: int
    wake: int
    is_real: bool


class VertexIdentity:
    """Interface of a vertex identity strategy."""

    kind: str = ""

    def __init__(self, period: int):
        self.period = period

    def vertex(self, rep: AbstractPoint, shift: int):
        raise NotImplementedError

    def dedupe_vertices(self, vertices: list) -> list:
        """Final vertex list from per-angle identities (angle order)."""
        raise NotImplementedError

    def is_satellite(self, start, end) -> bool:
        raise NotImplementedError

    def adjacency_key(self, vertex) -> Hashable:
        raise NotImplementedError

    def own_shift(self, vertex) -> int:
        raise NotImplementedError

    def successor(self, node, entry: AdjacencyEntry):
        raise NotImplementedError

    def visit_key(self, vertex) -> Hashable:
        raise NotImplementedError

    def face_label(self, vertex):
        raise NotImplementedError

    def edges_for_wake(self, wake: Wake) -> List[Edge]:
        raise NotImplementedError

    def side(self, node, entry: AdjacencyEntry, offset: Optional[int]) -> Optional[int]:
        """Edge index used when leaving `node` through `entry`."""
        raise NotImplementedError

    def satellite_faces(self, wake: Wake, offset: int) -> List[Face]:
        return []

    def make_cover(self, crit_period: int, vertices, wakes, edges,
                   primitive_faces, satellite_faces) -> Cover:
        raise NotImplementedError


class MarkedCycleIdentity(VertexIdentity):
    """Vertices are whole cycles."""

    kind = VERTEX_MARKED_CYCLE

    def vertex(self, rep, shift):
        return AbstractCycle(rep)

    def dedupe_vertices(self, vertices):
        return sorted(set(vertices))

    def is_satellite(self, start, end):
        return start == end

    def adjacency_key(self, vertex):
        return vertex

    def own_shift(self, vertex):
        return 0

    def successor(self, node, entry):
        return entry.other

    def visit_key(self, vertex):
        return vertex.cycle_class()

    def face_label(self, vertex):
        return vertex.cycle_class()

    def edges_for_wake(self, wake):
        if wake.is_satellite:
            return []
        return [Edge(wake.start, wake.end, wake)]

    def side(self, node, entry, offset):
        return offset

    def make_cover(self, crit_period, vertices, wakes, edges,
                   primitive_faces, satellite_faces):
        return MarkedCycleCover(
            period=self.period,
            crit_period=crit_period,
            vertices=vertices,
            wakes=wakes,
            edges=edges,
            faces=primitive_faces + satellite_faces,
        )


class ShiftedCycleIdentity(VertexIdentity):
    """Vertices are points of cycles: (cycle rep, phase)."""

    kind = VERTEX_SHIFTED_CYCLE

    def vertex(self, rep, shift):
        return ShiftedCycle(rep, shift)

    def dedupe_vertices(self, vertices):
        return list(vertices)

    def is_satellite(self, start, end):
        return start.matches(end)

    def adjacency_key(self, vertex):
        return vertex.rep

    def own_shift(self, vertex):
        return vertex.shift

    def successor(self, node, entry):
        return entry.other.rotate(node.shift - entry.own_shift)

    def visit_key(self, vertex):
        return vertex

    def face_label(self, vertex):
        return vertex.to_point_class()

    def edges_for_wake(self, wake):
        # One lamination arc gives one edge per phase
        return [
            Edge(wake.start.rotate(i), wake.end.rotate(i), wake)
            for i in range(self.period)
        ]

    def side(self, node, entry, offset):
        return offset + (node.shift - entry.own_shift) % self.period

    def satellite_faces(self, wake, offset):
        """
        Faces pinched at a single cycle.

        With relative shift s between the two ends of the wake there are
        g = gcd(s, n) faces, each of length n / g, obtained by rotating a
        base point by multiples of s.
        """
        start = wake.start
        shift = wake.end.relative_shift(start)
        num_faces = gcd(shift, self.period)
        face_period = self.period // num_faces

        faces = []
        for i in range(num_faces):
            base = start.with_shift(0).rotate(i)
            vertices = tuple(base.rotate(j * shift) for j in range(face_period))
            sides = tuple(offset + (v.shift - start.shift) % self.period for v in vertices)
            faces.append(Face(label=base, vertices=vertices, degree=1, sides=sides))
        return faces

    def make_cover(self, crit_period, vertices, wakes, edges,
                   primitive_faces, satellite_faces):
        return DynatomicCover(
            period=self.period,
            crit_period=crit_period,
            vertices=vertices,
            wakes=wakes,
            edges=edges,
            primitive_faces=primitive_faces,
            satellite_faces=satellite_faces,
        )
