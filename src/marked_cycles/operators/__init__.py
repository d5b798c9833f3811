"""Sparse incidence operators on cover meshes."""

from .incidence import (
    build_vertex_edge_incidence,
    build_face_edge_incidence,
    faces_per_edge,
    build_operators_from_mesh,
    satellite_steps,
)
