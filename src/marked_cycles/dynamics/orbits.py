"""
Orbits of the Doubling Map
==========================

Classify every integer angle of period n by its orbit under θ ↦ 2θ mod (2^n - 1).

    get_orbit(angle)     - explicit orbit, in doubling order, for one angle
    classify_orbits(ctx) - vectorized table over ALL angles [0, 2^n - 1)

For each angle the table stores:
    reps[a]    orbit minimum (canonical cycle representative)
    lengths[a] exact orbit length (divides n)
    shifts[a]  phase k with rep · 2^k ≡ a, i.e. position after the minimum

Only orbits with lengths[a] == n are true period-n cycles. Shorter orbits
belong to lower periods and are ignored by the cover builders.

Memory: three int64 arrays of length 2^n - 1.

Date: Jan 2026
"""

import numpy as np
from dataclasses import dataclass
from typing import List

from ..spec.errors import CoverError
from .arithmetic import AngleContext, IntAngle


def get_orbit(angle: IntAngle, ctx: AngleContext) -> List[IntAngle]:
    """
    Orbit of `angle`, starting at `angle`, in doubling order.

    The α fixed point (angle == max_angle, period 1 only) is its own orbit.
    """
    if angle == ctx.max_angle:
        return [angle]

    orbit = [angle]
    theta = ctx.double(angle)
    while theta != angle:
        orbit.append(theta)
        theta = ctx.double(theta)
    return orbit


@dataclass
class OrbitTable:
    """Per-angle orbit data for one period."""
    ctx: AngleContext
    reps: np.ndarray
    lengths: np.ndarray
    shifts: np.ndarray

    @property
    def periodic_mask(self) -> np.ndarray:
        """True where the angle lies on an orbit of exact length `period`."""
        return self.lengths == self.ctx.period

    def num_periodic_points(self) -> int:
        return int(np.count_nonzero(self.periodic_mask))

    def cycle_reps(self) -> np.ndarray:
        """Sorted orbit minima of all exact-period cycles."""
        return np.unique(self.reps[self.periodic_mask])

    def is_periodic(self, angle: IntAngle) -> bool:
        return 0 <= angle < self.ctx.max_angle and bool(self.periodic_mask[angle])


def classify_orbits(ctx: AngleContext) -> OrbitTable:
    """
    Build the OrbitTable for every angle in [0, max_angle).

    Equivalent to scanning angles in increasing order and assigning each
    unseen orbit to its first (= minimal) member, but done as `period`
    vectorized doubling passes.
    """
    N = ctx.max_angle
    angles = np.arange(N, dtype=np.int64)

    # Pass 1: orbit minimum and first-return time
    theta = angles.copy()
    reps = angles.copy()
    lengths = np.zeros(N, dtype=np.int64)
    for step in range(1, ctx.period + 1):
        theta = (theta * 2) % N
        np.minimum(reps, theta, out=reps)
        returned = (lengths == 0) & (theta == angles)
        lengths[returned] = step

    # Pass 2: phase of each angle relative to its orbit minimum
    shifts = np.full(N, -1, dtype=np.int64)
    theta = reps.copy()
    for k in range(ctx.period):
        hit = (shifts < 0) & (theta == angles)
        shifts[hit] = k
        theta = (theta * 2) % N

    # 2^period ≡ 1 mod max_angle: every orbit closes within `period` steps
    if np.any(lengths == 0) or np.any(shifts < 0):
        raise CoverError("Orbit classification incomplete", period=ctx.period)

    return OrbitTable(ctx=ctx, reps=reps, lengths=lengths, shifts=shifts)
