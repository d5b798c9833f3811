"""
Closed-Form Combinatorics
=========================

Counts of vertices, edges, faces and the genus of both covers, from
number theory alone (no construction). Used to cross-check the builders.

NOTATION (c = critical period, μ = Möbius, φ = totient, ⋆ = Dirichlet):
    P_div(n) = 2^n - 1            (c = 1)
             = 2^n - (-1)^n       (c = 2)     points of period dividing n
    periodic = μ ⋆ P_div                      points of exact period n
    H_div(n) = 2^(n-1)            (c = 1)
             = (2^n - (-1)^n)/3   (c = 2)     components of period dividing n
    H        = μ ⋆ H_div                      hyperbolic components of period n
    prim(n)  = 2H(n) - (φ ⋆ H)(n)             primitive components
    sat(n)   = (φ ⋆ H)(n) - H(n)              satellite components

MARKED CYCLE COVER:
    V = periodic/n,  E = prim,  F = (V + c·sc)/(c+1)
    genus = 1 + (2E - 3V - sc)/4          (c = 1)
          = 1 + (3E - 4V - 2sc)/6         (c = 2)
    sc = self-conjugate faces (0 unless (c+1) | n)

DYNATOMIC COVER:
    V = periodic,  E = n·H(n),  F = periodic/(c+1) + F_sat
    F_sat = Σ_{d|n} d·H(d)·φ(n/d) - n·H(n)
    genus = 1 + (nH - 3V/2 - F_sat)/2     (c = 1)
          = 1 - 2V/3 + (nH - F_sat)/2     (c = 2)

All divisions truncate toward zero (the genus may be negative, e.g.
MC_3(Per_2) has genus -1, and floor division would differ there).

Date: Jan 2026
"""

from math import gcd
from typing import Callable, Dict, List

from ..dynamics.arithmetic import validate_crit_period, validate_period


# ═══════════════════════════════════════════════════════════════════════════
# Arithmetic functions
# ═══════════════════════════════════════════════════════════════════════════

def tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def divisors(n: int) -> List[int]:
    """Divisors of n in increasing order."""
    small, large = [], []
    d = 1
    while d * d <= n:
        if n % d == 0:
            small.append(d)
            if d * d != n:
                large.append(n // d)
        d += 1
    return small + large[::-1]


def euler_totient(n: int) -> int:
    return sum(1 for x in range(1, n + 1) if gcd(x, n) == 1)


def moebius(n: int) -> int:
    if n == 1:
        return 1
    result = 1
    i = 2
    while i * i <= n:
        if n % i == 0:
            result = -result
            n //= i
            if n % i == 0:
                return 0
        i += 1
    if n > 1:
        result = -result
    return result


def dirichlet_convolution(f: Callable[[int], int], g: Callable[[int], int], n: int,
                          keep: Callable[[int], bool] = None) -> int:
    """(f ⋆ g)(n) = Σ_{d|n} f(d)·g(n/d), optionally over divisors passing `keep`."""
    return sum(f(d) * g(n // d) for d in divisors(n) if keep is None or keep(d))


def moebius_inversion(f: Callable[[int], int], n: int) -> int:
    return dirichlet_convolution(moebius, f, n)


# ═══════════════════════════════════════════════════════════════════════════
# Shared counts
# ═══════════════════════════════════════════════════════════════════════════

class Combinatorics:
    """Counts shared by both covers. Subclasses give V, E, F and genus."""

    def __init__(self, crit_period: int = 1):
        self.crit_period = validate_crit_period(crit_period)
        self._covers: Dict[int, object] = {}

    def points_of_period_dividing_n(self, n: int) -> int:
        if self.crit_period == 1:
            return 2 ** n - 1
        return 2 ** n - (-1) ** n

    def periodic_points(self, n: int) -> int:
        return moebius_inversion(self.points_of_period_dividing_n, n)

    def cycles(self, n: int) -> int:
        return tdiv(self.periodic_points(n), n)

    def hyp_components_dividing_n(self, n: int) -> int:
        if self.crit_period == 1:
            return 2 ** (n - 1)
        return tdiv(2 ** n - (-1) ** n, 3)

    def hyperbolic_components(self, n: int) -> int:
        return moebius_inversion(self.hyp_components_dividing_n, n)

    def satellite_components(self, n: int) -> int:
        return (dirichlet_convolution(euler_totient, self.hyperbolic_components, n)
                - self.hyperbolic_components(n))

    def primitive_components(self, n: int) -> int:
        return (2 * self.hyperbolic_components(n)
                - dirichlet_convolution(euler_totient, self.hyperbolic_components, n))

    def self_conjugate_faces(self, n: int) -> int:
        """Faces whose label class is fixed by conjugation."""
        c = self.crit_period
        symmetry_order = c + 1
        if n % symmetry_order:
            return 0
        k = n // symmetry_order
        u = 1 - c
        total = dirichlet_convolution(
            moebius,
            lambda d: 2 ** d - u ** d,
            k,
            keep=lambda d: d % symmetry_order > 0,
        )
        return tdiv(c * total, n)

    # Interface
    def vertices(self, n: int) -> int:
        raise NotImplementedError

    def edges(self, n: int) -> int:
        raise NotImplementedError

    def faces(self, n: int) -> int:
        raise NotImplementedError

    def genus(self, n: int) -> int:
        raise NotImplementedError

    def euler_characteristic(self, n: int) -> int:
        return self.vertices(n) - self.edges(n) + self.faces(n)

    # Built covers, for comparison
    def _build(self, n: int):
        raise NotImplementedError

    def cover(self, n: int):
        """Built cover of period n (cached per instance)."""
        n = validate_period(n)
        if n not in self._covers:
            self._covers[n] = self._build(n)
        return self._covers[n]

    def cover_vertices(self, n: int) -> int:
        return self.cover(n).num_vertices()

    def cover_edges(self, n: int) -> int:
        return self.cover(n).num_edges()

    def cover_faces(self, n: int) -> int:
        return self.cover(n).num_faces()

    def cover_genus(self, n: int) -> int:
        return self.cover(n).genus()


class MarkedCycleCombinatorics(Combinatorics):
    """Closed forms for MC_n(Per_c)."""

    def vertices(self, n):
        return self.cycles(n)

    def edges(self, n):
        return self.primitive_components(n)

    def faces(self, n):
        c = self.crit_period
        return tdiv(self.cycles(n) + c * self.self_conjugate_faces(n), c + 1)

    def genus(self, n):
        prim = self.primitive_components(n)
        cyc = self.cycles(n)
        selfconj = self.self_conjugate_faces(n)
        if self.crit_period == 1:
            return 1 + tdiv(2 * prim - 3 * cyc - selfconj, 4)
        return 1 + tdiv(3 * prim - 4 * cyc - 2 * selfconj, 6)

    def _build(self, n):
        from ..builders.covers import MarkedCycleCover
        return MarkedCycleCover.build(n, self.crit_period)


class DynatomicCombinatorics(Combinatorics):
    """Closed forms for Dyn_n(Per_c)."""

    def primitive_faces(self, n: int) -> int:
        return tdiv(self.periodic_points(n), self.crit_period + 1)

    def satellite_faces(self, n: int) -> int:
        return (dirichlet_convolution(lambda d: d * self.hyperbolic_components(d),
                                      euler_totient, n)
                - n * self.hyperbolic_components(n))

    def vertices(self, n):
        return self.periodic_points(n)

    def edges(self, n):
        return n * self.hyperbolic_components(n)

    def faces(self, n):
        return self.primitive_faces(n) + self.satellite_faces(n)

    def genus(self, n):
        hyp = self.hyperbolic_components(n)
        per = self.periodic_points(n)
        satf = self.satellite_faces(n)
        if self.crit_period == 1:
            return 1 + tdiv(n * hyp - tdiv(3 * per, 2) - satf, 2)
        return 1 - tdiv(2 * per, 3) + tdiv(n * hyp - satf, 2)

    def _build(self, n):
        from ..builders.covers import DynatomicCover
        return DynatomicCover.build(n, self.crit_period)
