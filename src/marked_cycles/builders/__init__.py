"""
Builders - lamination and covers.

Layering:
    lamination -> cover_builder -> covers
    identities plug the vertex type into the generic builder
"""

from .lamination import Lamination
from .covers import Cover, MarkedCycleCover, DynatomicCover
from .identities import MarkedCycleIdentity, ShiftedCycleIdentity
from .cover_builder import CoverBuilder, MarkedCycleCoverBuilder, DynatomicCoverBuilder
