"""
TikZ Rendering of Faces
=======================

Draw faces of a cover as regular polygons with a fixed edge length.

    face label     node in the polygon center ($\\abr{...}$ for a cycle class)
    vertices       nodes around the polygon ($\\del{...}$ for a cycle)
    real step      plain line
    satellite step double line (the walk stays at the same cycle)
    crossing       dashed spoke from the vertex to the face label

LAYOUT:
    For an n-gon with edge length ℓ the circumradius is ℓ / (2 sin(π/n)).
    Node 0 sits at angle 180/n from the center; node i is placed from node
    i-1 by a step of length ℓ, turning 360/n each time.

The output uses the macros \\abr and \\del, which the including document
must define.

Date: Jan 2026
"""

import math
import re
from typing import List, Sequence

from ..spec.constants import TIKZ_EDGE_LENGTH, TIKZ_EDGE_LENGTH_DEF
from ..spec.structures import Face

_RE_CYCLE = re.compile(r"^\((.*)\)$")
_RE_CLASS = re.compile(r"^<(.*)>$")


def _vertex_label(vertex, binary: bool) -> str:
    text = format(vertex, "b" if binary else "")
    return _RE_CYCLE.sub(r"$\\del{\1}$", text)


def _face_label(label, binary: bool) -> str:
    text = format(label, "b" if binary else "")
    match = _RE_CLASS.match(text)
    if match:
        return rf"$\abr{{{match.group(1)}}}$"
    return f"${text}$"


class TikzRenderer:
    """
    Collect faces and emit one tikzpicture.

    Usage:
        tex = TikzRenderer(cover.faces).draw_largest_face()
    """

    def __init__(self, faces: Sequence[Face], binary: bool = False,
                 edge_length: float = TIKZ_EDGE_LENGTH):
        self.faces = list(faces)
        self.binary = binary
        self.edge_length = edge_length
        self.commands: List[str] = [
            r"\begin{tikzpicture}",
            rf"    \def\edgelength{{{TIKZ_EDGE_LENGTH_DEF}}}",
        ]
        self._drawn = 0

    def draw_face(self, face: Face):
        n = len(face)
        face_id = f"face{self._drawn}"
        self._drawn += 1

        half_angle = math.pi / n
        radius = self.edge_length / (2.0 * math.sin(half_angle)) if n > 1 else 0.0
        offset_x = radius * math.cos(half_angle)

        cmd = self.commands
        cmd.append("")
        cmd.append(rf"    \def\baseangle{{180/{n}}}")
        cmd.append(rf"    \def\anchorx{{{offset_x:.4f}}}")
        cmd.append("")
        cmd.append(rf"    \node ({face_id}) at (\anchorx, 0) {{{_face_label(face.label, self.binary)}}};")

        cmd.append(
            rf"    \node ({face_id}-0) at ($({face_id})+(\baseangle:{radius:.4f})$) "
            rf"{{{_vertex_label(face.vertices[0], self.binary)}}};"
        )
        for i in range(1, n):
            angle = (-90.0 + (180.0 - 360.0 * i) / n) % 360.0
            cmd.append(
                rf"    \node ({face_id}-{i}) at ($({face_id}-{i - 1})+({angle:.4f} + \baseangle:{self.edge_length})$) "
                rf"{{{_vertex_label(face.vertices[i], self.binary)}}};"
            )

        crossings = set(face.crossings)
        for i in range(n):
            nxt = (i + 1) % n
            satellite = i < len(face.sides) and face.sides[i] is None
            if n > 1:
                style = "[double,double distance=2pt]" if satellite else ""
                cmd.append(rf"    \draw{style} ({face_id}-{i}) -- ({face_id}-{nxt});")
            if i in crossings:
                cmd.append(rf"    \draw[dashed] ({face_id}-{i}) -- ({face_id});")

    def _finish(self) -> str:
        self.commands.append(r"\end{tikzpicture}")
        return "\n".join(self.commands)

    def generate(self) -> str:
        """Draw every face."""
        for face in self.faces:
            self.draw_face(face)
        return self._finish()

    def draw_largest_face(self) -> str:
        """Draw the first face of maximal size."""
        if self.faces:
            self.draw_face(max(self.faces, key=len))
        return self._finish()

    def draw_smallest_face(self) -> str:
        if self.faces:
            self.draw_face(min(self.faces, key=len))
        return self._finish()
