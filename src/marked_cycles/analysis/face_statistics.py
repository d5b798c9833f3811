"""
Face Statistics
===============

Face-size statistics of a cover, and the per-period table of them.

A face is REFLEXIVE when its walk crosses the real axis once (degree 1);
otherwise it is irreducible here, and the "irr" columns only look at those.

TABLE COLUMNS (one row per period):
    period, max_face, min_face, min_face_irr, num_max, num_min,
    num_min_irr, num_reflexive, num_odd_irr

Missing values (no irreducible faces) are reported as 0.

Date: Jan 2026
"""

import numpy as np
from dataclasses import dataclass, fields
from typing import List

from ..dynamics.arithmetic import validate_crit_period, validate_period


@dataclass
class FaceStatistics:
    """Face-size statistics of one cover."""
    period: int
    max_face: int
    min_face: int
    min_face_irr: int
    num_max: int
    num_min: int
    num_min_irr: int
    num_reflexive: int
    num_odd_irr: int
    mean_face: float
    histogram: np.ndarray  # histogram[s] = number of faces of size s

    def row(self) -> tuple:
        """Integer table columns (without mean and histogram)."""
        return tuple(getattr(self, f.name) for f in fields(self)[:9])


TABLE_HEADER = (
    "Period, Max face, Min face, Min irr. face, # max faces, # min faces, "
    "# min irr. faces, # refl. faces, # odd irr. faces"
)
SERDE_HEADER = ",".join(f.name for f in fields(FaceStatistics)[:9])


def compute_face_statistics(cover) -> FaceStatistics:
    """
    Compute face statistics of a built cover.

    Returns:
        FaceStatistics object
    """
    sizes = np.fromiter(cover.face_sizes(), dtype=np.int64)
    if sizes.size == 0:
        raise ValueError("Cover has no faces")
    reflexive = np.array([f.is_reflexive for f in cover.faces], dtype=bool)
    irr = sizes[~reflexive]

    max_face = int(sizes.max())
    min_face = int(sizes.min())
    min_face_irr = int(irr.min()) if irr.size else 0

    return FaceStatistics(
        period=cover.period,
        max_face=max_face,
        min_face=min_face,
        min_face_irr=min_face_irr,
        num_max=int(np.count_nonzero(sizes == max_face)),
        num_min=int(np.count_nonzero(sizes == min_face)),
        num_min_irr=int(np.count_nonzero(irr == min_face_irr)) if irr.size else 0,
        num_reflexive=int(np.count_nonzero(reflexive)),
        num_odd_irr=int(np.count_nonzero(irr % 2 == 1)),
        mean_face=float(np.mean(sizes)),
        histogram=np.bincount(sizes),
    )


def face_counts_table(max_period: int, crit_period: int = 1) -> List[FaceStatistics]:
    """
    Face statistics of MC_n(Per_c) for n = 1..max_period.

    One independent cover is built per period.
    """
    from ..builders.covers import MarkedCycleCover

    max_period = validate_period(max_period)
    crit_period = validate_crit_period(crit_period)
    return [
        compute_face_statistics(MarkedCycleCover.build(n, crit_period))
        for n in range(1, max_period + 1)
    ]


def format_table(rows: List[FaceStatistics], serde_header: bool = False) -> str:
    """CSV text of a face counts table."""
    lines = [SERDE_HEADER if serde_header else TABLE_HEADER]
    lines.extend(",".join(str(x) for x in r.row()) for r in rows)
    return "\n".join(lines) + "\n"
