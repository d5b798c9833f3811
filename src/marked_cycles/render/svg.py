"""
SVG Polygon
===========

Standalone SVG of a labeled regular n-gon, e.g. for a face boundary:

    svg = generate_ngon_svg([str(v) for v in face.vertices])

Date: Jan 2026
"""

import html
import math
from typing import Sequence

from ..spec.constants import SVG_LABEL_OFFSET, SVG_MARGIN, SVG_RADIUS


def generate_ngon_svg(point_labels: Sequence[str], radius: float = SVG_RADIUS) -> str:
    """
    Regular polygon with one label per corner.

    Raises:
        ValueError: no labels
    """
    n = len(point_labels)
    if n == 0:
        raise ValueError("generate_ngon_svg needs at least one label")

    cx = cy = radius + SVG_MARGIN
    parts = []
    for i, label in enumerate(point_labels):
        angle = 2.0 * math.pi * i / n
        next_angle = 2.0 * math.pi * ((i + 1) % n) / n
        x, y = cx + radius * math.cos(angle), cy + radius * math.sin(angle)
        x2, y2 = cx + radius * math.cos(next_angle), cy + radius * math.sin(next_angle)
        parts.append(
            f'<line x1="{x:.3f}" y1="{y:.3f}" x2="{x2:.3f}" y2="{y2:.3f}" '
            f'style="stroke:black;stroke-width:2" />'
        )
        lx = cx + (radius + SVG_LABEL_OFFSET) * math.cos(angle)
        ly = cy + (radius + SVG_LABEL_OFFSET) * math.sin(angle)
        parts.append(
            f'<text x="{lx:.3f}" y="{ly:.3f}" style="font-family:Arial;font-size:10px;">'
            f'{html.escape(label, quote=False)}</text>'
        )

    size = 2.0 * (radius + 2 * SVG_MARGIN)
    return (
        f'<svg width="{size:g}" height="{size:g}" xmlns="http://www.w3.org/2000/svg">'
        + "".join(parts)
        + "</svg>"
    )
