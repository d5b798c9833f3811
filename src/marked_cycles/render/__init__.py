"""TikZ and SVG output for faces."""

from .tikz import TikzRenderer
from .svg import generate_ngon_svg
