"""
Generic Cover Builder
=====================

One builder for both covers, parameterized by a vertex identity strategy
(see identities.py).

PIPELINE:
    1. Classify every integer angle of period n into orbits (numpy table).
       Exact-period angles get a vertex identity. Period 1 also gets the
       α fixed point at angle 1.
    2. Scale every period-n lamination arc to integer angles and join its
       two endpoint vertices with a Wake. Both endpoints enter the
       rotation system (adjacency map) with tag = larger angle.
    3. Trace primitive faces through the rotation system.
    4. Add satellite faces (dynatomic cover only).
    5. Check that χ = V - E + F is even.

FACE WALK (rotation system):
    At a node with current angle `cur`, leave through the entry minimizing
    (tag - cur - 1) mod max_angle, i.e. the first arc counter-clockwise
    after cur (first inserted wins ties). A step with tag <= cur wraps past
    angle 0: the walk crossed the real axis. Wrapping at the start node
    closes the face; wrapping anywhere else marks that node as visited and
    raises the face degree.

    Walks are bounded by the number of darts; exceeding it raises
    FaceTracingError instead of looping forever.

Date: Jan 2026
"""

import warnings
from typing import Dict, List, Optional

from ..spec.constants import WARN_PERIOD
from ..spec.errors import (
    AdjacencyError,
    EulerCharacteristicError,
    FaceTracingError,
    UnassignedAngleError,
)
from ..spec.structures import Edge, Face, Wake
from ..dynamics.arithmetic import AngleContext, validate_crit_period
from ..dynamics.abstract_cycles import AbstractPoint
from ..dynamics.orbits import OrbitTable, classify_orbits
from .lamination import Lamination
from .identities import (
    AdjacencyEntry,
    MarkedCycleIdentity,
    ShiftedCycleIdentity,
    VertexIdentity,
)
from .covers import Cover, DynatomicCover, MarkedCycleCover


class CoverBuilder:
    """
    Build one cover for (period, crit_period).

    Usage:
        cover = CoverBuilder(8, 1, MarkedCycleIdentity(8)).build()
    """

    def __init__(self, period: int, crit_period: int, identity: VertexIdentity):
        self.ctx = AngleContext.from_period(period)
        self.period = self.ctx.period
        self.crit_period = validate_crit_period(crit_period)
        if identity.period != self.period:
            raise ValueError(
                f"identity built for period {identity.period}, builder has period {self.period}"
            )
        self.identity = identity

    def build(self) -> Cover:
        if self.period > WARN_PERIOD:
            warnings.warn(
                f"Building a period-{self.period} cover needs O(2^{self.period}) memory "
                f"and may take minutes",
                UserWarning,
            )

        table = classify_orbits(self.ctx)
        vertices = self._vertices(table)
        wakes = self._wakes(table)
        adjacency = self._adjacency(wakes)
        edges, offsets = self._edges(wakes)

        primitive_faces = self._trace_faces(vertices, wakes, adjacency, offsets)
        satellite_faces = []
        for index, wake in enumerate(wakes):
            if wake.is_satellite:
                satellite_faces.extend(self.identity.satellite_faces(wake, offsets[index]))

        cover = self.identity.make_cover(
            self.crit_period, vertices, wakes, edges, primitive_faces, satellite_faces
        )

        chi = cover.euler_characteristic()
        if chi % 2 != 0:
            raise EulerCharacteristicError(
                f"V - E + F = {cover.num_vertices()} - {cover.num_edges()} + "
                f"{cover.num_faces()} = {chi} is odd",
                period=self.period, crit_period=self.crit_period,
            )
        return cover

    # ═══════════════════════════════════════════════════════════════════════
    # Vertices
    # ═══════════════════════════════════════════════════════════════════════

    def _vertex_at(self, table: OrbitTable, angle: int):
        """Vertex identity of an integer angle (UnassignedAngleError if none)."""
        # α fixed point: angle 1/1 only exists at period 1
        if self.period == 1 and angle == self.ctx.max_angle:
            return self.identity.vertex(AbstractPoint(angle, self.ctx), 0)
        if not table.is_periodic(angle):
            raise UnassignedAngleError(
                f"Angle {angle} is not on a period-{self.period} cycle",
                period=self.period, crit_period=self.crit_period,
            )
        rep = AbstractPoint(int(table.reps[angle]), self.ctx)
        return self.identity.vertex(rep, int(table.shifts[angle]))

    def _vertices(self, table: OrbitTable) -> list:
        angles = [int(a) for a in table.periodic_mask.nonzero()[0]]
        if self.period == 1:
            angles.append(self.ctx.max_angle)
        return self.identity.dedupe_vertices([self._vertex_at(table, a) for a in angles])

    # ═══════════════════════════════════════════════════════════════════════
    # Wakes, adjacency, edges
    # ═══════════════════════════════════════════════════════════════════════

    def _wakes(self, table: OrbitTable) -> List[Wake]:
        arcs = Lamination(self.crit_period).into_arcs_of_period(self.period)
        wakes = []
        for ratio0, ratio1 in arcs:
            angle0 = self.ctx.scale_ratio(ratio0)
            angle1 = self.ctx.scale_ratio(ratio1)
            for ratio, angle in ((ratio0, angle0), (ratio1, angle1)):
                if self.ctx.to_ratio(angle) != ratio:
                    raise UnassignedAngleError(
                        f"Arc endpoint {ratio} is not an integer angle of period {self.period}",
                        period=self.period, crit_period=self.crit_period,
                    )
            start = self._vertex_at(table, angle0)
            end = self._vertex_at(table, angle1)
            satellite = self.identity.is_satellite(start, end)
            wakes.append(Wake(start, end, angle0, angle1, satellite))
        return wakes

    def _adjacency(self, wakes: List[Wake]) -> Dict[object, List[AdjacencyEntry]]:
        ident = self.identity
        adjacency: Dict[object, List[AdjacencyEntry]] = {}
        for index, wake in enumerate(wakes):
            for own, other in ((wake.start, wake.end), (wake.end, wake.start)):
                entry = AdjacencyEntry(
                    other=other,
                    own_shift=ident.own_shift(own),
                    tag=wake.tag,
                    wake=index,
                    is_real=wake.is_real,
                )
                adjacency.setdefault(ident.adjacency_key(own), []).append(entry)
        return adjacency

    def _edges(self, wakes: List[Wake]):
        """All edges, plus the index of each wake's first edge (None if it has none)."""
        edges: List[Edge] = []
        offsets: List[Optional[int]] = []
        for wake in wakes:
            produced = self.identity.edges_for_wake(wake)
            offsets.append(len(edges) if produced else None)
            edges.extend(produced)
        return edges, offsets

    # ═══════════════════════════════════════════════════════════════════════
    # Faces
    # ═══════════════════════════════════════════════════════════════════════

    def _trace_faces(self, vertices, wakes, adjacency, offsets) -> List[Face]:
        ident = self.identity
        visited = set()
        faces = []
        for start in vertices:
            if ident.visit_key(start) in visited:
                continue
            faces.append(self._trace_face(start, wakes, adjacency, offsets, visited))
        return faces

    def _trace_face(self, start, wakes, adjacency, offsets, visited) -> Face:
        ident = self.identity
        max_angle = self.ctx.max_angle
        label = ident.face_label(start)

        # Isolated vertex: one-vertex face
        if ident.adjacency_key(start) not in adjacency:
            return Face(label=label, vertices=(start,))

        guard = 2 * len(wakes) * self.period + 2
        node = start
        cur = 0
        degree = 1
        walk = []
        sides = []
        crossings = []

        while True:
            entries = adjacency.get(ident.adjacency_key(node))
            if not entries:
                raise AdjacencyError(
                    f"No adjacency entry for {node} while tracing from {start}",
                    period=self.period, crit_period=self.crit_period,
                )
            entry = min(entries, key=lambda e: (e.tag - cur - 1) % max_angle)

            if cur >= entry.tag:
                if node == start:
                    break
                visited.add(ident.visit_key(node))
                degree += 1
                crossings.append(len(walk))

            walk.append(node)
            sides.append(ident.side(node, entry, offsets[entry.wake]))
            if len(walk) > guard:
                raise FaceTracingError(
                    f"Face from {start} did not close within {guard} steps",
                    period=self.period, crit_period=self.crit_period,
                )
            node = ident.successor(node, entry)
            cur = entry.tag

        return Face(
            label=label,
            vertices=tuple(walk),
            degree=degree,
            sides=tuple(sides),
            crossings=tuple(crossings),
        )


class MarkedCycleCoverBuilder(CoverBuilder):
    """Builder for MC_n(Per_c)."""

    def __init__(self, period: int, crit_period: int = 1):
        super().__init__(period, crit_period, MarkedCycleIdentity(period))

    def build(self) -> MarkedCycleCover:
        return super().build()


class DynatomicCoverBuilder(CoverBuilder):
    """Builder for Dyn_n(Per_c)."""

    def __init__(self, period: int, crit_period: int = 1):
        super().__init__(period, crit_period, ShiftedCycleIdentity(period))

    def build(self) -> DynatomicCover:
        return super().build()
