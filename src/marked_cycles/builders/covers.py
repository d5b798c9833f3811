"""
Cover Result Objects
====================

Immutable results of one build() call.

    MarkedCycleCover  MC_n(Per_c): vertices are period-n cycles
    DynatomicCover    Dyn_n(Per_c): vertices are period-n points

TOPOLOGY:
    χ = V - E + F        (always even, checked at build time)
    genus = 1 - χ/2      (negative for covers with several components,
                          e.g. MC_3(Per_2) has genus -1)

Build with MarkedCycleCover.build(period, crit_period) or the builders in
cover_builder.py.

Date: Jan 2026
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from ..dynamics.arithmetic import AngleContext
from ..spec.constants import (
    COMPLEX_SURFACE,
    DEFAULT_INDENT,
    MAX_DISPLAY_ITEMS,
    VERTEX_MARKED_CYCLE,
    VERTEX_SHIFTED_CYCLE,
)
from ..spec.structures import Edge, Face, Wake, create_cover_mesh


class Cover:
    """Common read-only interface of both covers."""

    vertex_kind = ""
    short_name = "cover"

    def __init__(self, period: int, crit_period: int,
                 vertices: Sequence, wakes: Sequence[Wake],
                 edges: Sequence[Edge], faces: Sequence[Face]):
        self.period = period
        self.crit_period = crit_period
        self.vertices: Tuple = tuple(vertices)
        self.wakes: Tuple[Wake, ...] = tuple(wakes)
        self.edges: Tuple[Edge, ...] = tuple(edges)
        self.faces: Tuple[Face, ...] = tuple(faces)

    @classmethod
    def build(cls, period: int, crit_period: int = 1) -> "Cover":
        raise NotImplementedError

    # ═══════════════════════════════════════════════════════════════════════
    # Counts and topology
    # ═══════════════════════════════════════════════════════════════════════

    def num_vertices(self) -> int:
        return len(self.vertices)

    def num_edges(self) -> int:
        return len(self.edges)

    def num_faces(self) -> int:
        return len(self.faces)

    def euler_characteristic(self) -> int:
        return self.num_vertices() - self.num_edges() + self.num_faces()

    def genus(self) -> int:
        return 1 - self.euler_characteristic() // 2

    def face_sizes(self) -> Iterator[int]:
        """Boundary length of each face. A fresh iterator on every call."""
        return (len(f) for f in self.faces)

    def num_odd_faces(self) -> int:
        return sum(1 for s in self.face_sizes() if s % 2 == 1)

    def largest_face(self) -> Optional[Face]:
        """First face of maximal size (None if there are no faces)."""
        return max(self.faces, key=len, default=None)

    def smallest_face(self) -> Optional[Face]:
        return min(self.faces, key=len, default=None)

    # ═══════════════════════════════════════════════════════════════════════
    # Export
    # ═══════════════════════════════════════════════════════════════════════

    def as_mesh(self) -> dict:
        """Integer-indexed cover mesh dict (see spec/structures.py)."""
        index = {v: i for i, v in enumerate(self.vertices)}
        E = [(index[e.start], index[e.end]) for e in self.edges]
        F = [[index[v] for v in f.vertices] for f in self.faces]
        F_sides = [[-1 if s is None else s for s in f.sides] for f in self.faces]
        return create_cover_mesh(
            V=self.vertices,
            E=E,
            F=F,
            F_sides=F_sides,
            complex_type=COMPLEX_SURFACE,
            name=f"{self.short_name}_{self.period}_per{self.crit_period}",
            period=self.period,
            crit_period=self.crit_period,
            vertex_kind=self.vertex_kind,
        )

    # ═══════════════════════════════════════════════════════════════════════
    # Display
    # ═══════════════════════════════════════════════════════════════════════

    def _display_vertices(self) -> Sequence:
        return self.vertices

    def _face_sections(self) -> List[Tuple[str, Sequence[Face]]]:
        return [("faces", self.faces)]

    def summarize(self, indent: int = DEFAULT_INDENT, binary: bool = False) -> str:
        """
        Human-readable dump of the cover.

        Any list longer than MAX_DISPLAY_ITEMS is collapsed to its count.
        """
        pad = " " * indent
        spec = "b" if binary else ""
        lines = []

        def section(title, items):
            if len(items) > MAX_DISPLAY_ITEMS:
                lines.append(f"\n{len(items)} {title}")
                return
            lines.append(f"\n{len(items)} {title}:")
            for item in items:
                lines.append(f"{pad}{format(item, spec)}")

        section("vertices", self._display_vertices())
        section("edges", self.edges)
        for title, faces in self._face_sections():
            section(title, faces)

        sizes = list(self.face_sizes())
        if len(sizes) <= MAX_DISPLAY_ITEMS:
            lines.append("\nFace sizes:")
            lines.append(f"{pad}{sizes}")

        if sizes:
            lines.append(f"\nSmallest face: {min(sizes)}")
            lines.append(f"\nLargest face: {max(sizes)}")
        lines.append(f"\nGenus is {self.genus()}")
        return "\n".join(lines)

    def __repr__(self):
        return (
            f"{type(self).__name__}(period={self.period}, crit_period={self.crit_period}, "
            f"V={self.num_vertices()}, E={self.num_edges()}, F={self.num_faces()}, "
            f"genus={self.genus()})"
        )


class MarkedCycleCover(Cover):
    """
    Marked cycle cover MC_n(Per_c).

    Vertices: AbstractCycle. Faces: labeled by AbstractCycleClass. A step of
    a face walk along a satellite wake repeats the vertex (side None).
    """

    vertex_kind = VERTEX_MARKED_CYCLE
    short_name = "mc"

    @classmethod
    def build(cls, period: int, crit_period: int = 1) -> "MarkedCycleCover":
        from .cover_builder import MarkedCycleCoverBuilder
        return MarkedCycleCoverBuilder(period, crit_period).build()

    def satellite_wakes(self) -> List[Wake]:
        return [w for w in self.wakes if w.is_satellite]

    def face_shifts(self, face: Face) -> List[int]:
        """
        Relative shifts along the real steps of a face.

        A real step leaves a cycle at one wake angle and arrives at the next
        cycle at the other. The k-th shift is the number of doublings from
        the arrival angle of real step k to the departure angle of real
        step k + 1 (cyclically). Satellite steps stay on one cycle and are
        skipped.
        """
        steps = []
        for vertex, side in zip(face.vertices, face.sides):
            if side is None:
                continue
            wake = self.edges[side].wake
            if vertex == self.edges[side].start:
                steps.append((wake.angle0, wake.angle1))
            else:
                steps.append((wake.angle1, wake.angle0))

        ctx = AngleContext.from_period(self.period)
        return [
            ctx.relative_shift(arrival, steps[(k + 1) % len(steps)][0])
            for k, (_, arrival) in enumerate(steps)
        ]


class DynatomicCover(Cover):
    """
    Dynatomic cover Dyn_n(Per_c).

    Vertices: ShiftedCycle. Faces: primitive (traced, labeled by
    AbstractPointClass) followed by satellite (labeled by base ShiftedCycle).
    """

    vertex_kind = VERTEX_SHIFTED_CYCLE
    short_name = "dyn"

    def __init__(self, period: int, crit_period: int,
                 vertices: Sequence, wakes: Sequence[Wake], edges: Sequence[Edge],
                 primitive_faces: Sequence[Face], satellite_faces: Sequence[Face]):
        self.primitive_faces: Tuple[Face, ...] = tuple(primitive_faces)
        self.satellite_faces: Tuple[Face, ...] = tuple(satellite_faces)
        super().__init__(period, crit_period, vertices, wakes, edges,
                         self.primitive_faces + self.satellite_faces)

    @classmethod
    def build(cls, period: int, crit_period: int = 1) -> "DynatomicCover":
        from .cover_builder import DynatomicCoverBuilder
        return DynatomicCoverBuilder(period, crit_period).build()

    def _display_vertices(self):
        return [v.to_point() for v in self.vertices]

    def _face_sections(self):
        return [
            ("primitive faces", self.primitive_faces),
            ("satellite faces", self.satellite_faces),
        ]
