"""
Lavaurs Lamination Builder
==========================

Non-crossing chords ("arcs") between periodic rational angles, built one
period at a time by a single stack sweep per period.

ALGORITHM (period k, N = 2^k - 1):
    1. Candidates j/N for j = 1..N-1, skipping angles that are already
       endpoints of lower-period arcs. For critical period 2 the open
       middle third (N/3, 2N/3) is skipped as well.
    2. Sweep candidates in increasing order, merged (two pointers) with the
       sorted list of known endpoints:
         - left endpoint of a known arc   → push its marker
         - right endpoint of a known arc  → pop, must be the same marker
         - candidate j: if the stack top is a pending candidate j', the
           arc (j'/N, j/N) is born and j' is popped; otherwise push j
    3. The stack must be empty at the end of the sweep.

Each period costs one pass over its candidates and the known endpoints.

STRUCTURE:
    arcs are stored in creation order; period_cutoffs[p] is the end index
    of the arcs of period p. Period 1 is the single arc (0, 1).

INVARIANTS:
    - Arcs of one period never cross.
    - Endpoints of period-k arcs have denominator dividing 2^k - 1.
    - Extending never changes the arcs of earlier periods.

Violations raise LaminationError; they are construction bugs, never user
errors.

Date: Jan 2026
"""

import heapq
from fractions import Fraction
from typing import List, Tuple

from ..spec.constants import DEGREE
from ..spec.errors import LaminationError
from ..dynamics.arithmetic import RatAngle, validate_period, validate_crit_period

Arc = Tuple[RatAngle, RatAngle]

# Endpoint record: (angle, arc index, is_left). Angles are unique, so tuples
# sort by angle.
Endpoint = Tuple[Fraction, int, bool]


def _middle_third(j: int, N: int) -> bool:
    """True if N/3 < j < 2N/3 (excluded for critical period 2)."""
    return N < 3 * j < 2 * N


class Lamination:
    """
    Incrementally extended Lavaurs lamination.

    Usage:
        arcs = Lamination().into_arcs_of_period(8)
        arcs = Lamination().with_crit_period(2).into_arcs_of_period(8)
    """

    def __init__(self, crit_period: int = 1):
        self.crit_period = validate_crit_period(crit_period)
        self._arcs: List[Arc] = [(Fraction(0), Fraction(1))]
        self._period_cutoffs = [0, 1]
        self._endpoints: List[Endpoint] = [
            (Fraction(0), 0, True),
            (Fraction(1), 0, False),
        ]

    def with_crit_period(self, crit_period: int) -> "Lamination":
        """Fresh lamination (period 1 only) for another critical period."""
        return Lamination(crit_period)

    @property
    def max_period(self) -> int:
        return len(self._period_cutoffs) - 1

    @property
    def num_arcs(self) -> int:
        return len(self._arcs)

    def extend_to_period(self, period: int) -> "Lamination":
        """Add the arcs of every period up to `period` (no-op if already there)."""
        period = validate_period(period)
        while self.max_period < period:
            self._extend()
        return self

    def arcs_of_period(self, period: int) -> List[Arc]:
        """
        Arcs of one period, sorted by first endpoint.

        Raises:
            ValueError: period not computed yet (call extend_to_period)
        """
        period = validate_period(period)
        if period > self.max_period:
            raise ValueError(
                f"Lamination only extends to period {self.max_period}, "
                f"asked for {period}; call extend_to_period() first"
            )
        start = self._period_cutoffs[period - 1]
        end = self._period_cutoffs[period]
        return sorted(self._arcs[start:end])

    def into_arcs_of_period(self, period: int) -> List[Arc]:
        """Extend as needed, then return arcs_of_period(period)."""
        return self.extend_to_period(period).arcs_of_period(period)

    def endpoints_of_period(self, period: int) -> List[RatAngle]:
        """Sorted endpoint angles of one period's arcs."""
        return sorted(a for arc in self.arcs_of_period(period) for a in arc)

    # ═══════════════════════════════════════════════════════════════════════
    # Sweep
    # ═══════════════════════════════════════════════════════════════════════

    def _extend(self):
        period = self.max_period + 1
        N = DEGREE ** period - 1
        endpoints = self._endpoints
        n_known = len(endpoints)
        first_new = len(self._arcs)

        # Stack entries: candidate numerator j >= 1, or -(arc + 1) for a
        # marker of a known arc.
        stack: List[int] = []
        new_arcs: List[Arc] = []
        i = 0

        def replay(endpoint: Endpoint):
            _, arc, is_left = endpoint
            marker = -(arc + 1)
            if is_left:
                stack.append(marker)
                return
            if not stack or stack[-1] != marker:
                top = stack[-1] if stack else None
                raise LaminationError(
                    f"Right endpoint of arc {arc} found stack top {top}, "
                    f"expected marker {marker}",
                    period=period, crit_period=self.crit_period,
                )
            stack.pop()

        for j in range(1, N):
            # Replay known endpoints strictly before j/N (cross-multiplied)
            while i < n_known and endpoints[i][0].numerator * N < j * endpoints[i][0].denominator:
                replay(endpoints[i])
                i += 1

            if i < n_known and endpoints[i][0].numerator * N == j * endpoints[i][0].denominator:
                continue  # already an endpoint of a lower period
            if self.crit_period == 2 and _middle_third(j, N):
                continue

            if stack and stack[-1] > 0:
                partner = stack.pop()
                new_arcs.append((Fraction(partner, N), Fraction(j, N)))
            else:
                stack.append(j)

        while i < n_known:
            replay(endpoints[i])
            i += 1

        if stack:
            raise LaminationError(
                f"Sweep ended with {len(stack)} unmatched stack entries",
                period=period, crit_period=self.crit_period,
            )

        new_endpoints = []
        for offset, (a, b) in enumerate(new_arcs):
            arc = first_new + offset
            new_endpoints.append((a, arc, True))
            new_endpoints.append((b, arc, False))
        new_endpoints.sort()

        self._arcs.extend(new_arcs)
        self._period_cutoffs.append(len(self._arcs))
        self._endpoints = list(heapq.merge(endpoints, new_endpoints))
