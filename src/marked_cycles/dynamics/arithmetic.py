"""
Angle Arithmetic
================

Angles on the circle R/Z under the doubling map θ ↦ 2θ.

    IntAngle: int a in [0, 2^n - 1), standing for the point a / (2^n - 1)
    RatAngle: Fraction p/q in [0, 1], independent of the period

For period n the doubling map on integer angles is multiplication by 2
modulo max_angle = 2^n - 1, and conjugation θ ↦ 1 - θ is the bit complement
within n bits.

The (period, max_angle) pair travels explicitly as an AngleContext. There is
no module-level "current period".

Date: Jan 2026
"""

import numbers
from dataclasses import dataclass, field
from fractions import Fraction

from ..spec.constants import DEGREE, MIN_PERIOD, MAX_PERIOD, SUPPORTED_CRIT_PERIODS
from ..spec.errors import AngleRangeError

IntAngle = int
RatAngle = Fraction


def validate_period(period) -> int:
    """
    Check a period before any construction work.

    Raises:
        ValueError: not an integer, or below MIN_PERIOD
        AngleRangeError: above MAX_PERIOD
    """
    if isinstance(period, bool) or not isinstance(period, numbers.Integral):
        raise ValueError(f"period must be an integer, got {period!r}")
    period = int(period)
    if period < MIN_PERIOD:
        raise ValueError(f"period must be >= {MIN_PERIOD}, got {period}")
    if period > MAX_PERIOD:
        raise AngleRangeError(
            f"period {period} exceeds MAX_PERIOD={MAX_PERIOD}; "
            f"integer angles would not fit the orbit table",
            period=period,
        )
    return period


def validate_crit_period(crit_period) -> int:
    """Critical period must be one of SUPPORTED_CRIT_PERIODS."""
    if isinstance(crit_period, bool) or not isinstance(crit_period, numbers.Integral):
        raise ValueError(f"crit_period must be an integer, got {crit_period!r}")
    if int(crit_period) not in SUPPORTED_CRIT_PERIODS:
        raise ValueError(
            f"crit_period must be one of {SUPPORTED_CRIT_PERIODS}, got {crit_period}"
        )
    return int(crit_period)


@dataclass(frozen=True)
class AngleContext:
    """
    Immutable (period, max_angle) pair shared by every angle of one cover.

    Build with AngleContext.from_period(n); the raw constructor does not
    validate.
    """
    period: int
    max_angle: int

    @classmethod
    def from_period(cls, period: int) -> "AngleContext":
        period = validate_period(period)
        return cls(period=period, max_angle=DEGREE ** period - 1)

    def double(self, angle: IntAngle) -> IntAngle:
        """One step of the doubling map."""
        return (angle * DEGREE) % self.max_angle

    def rotate(self, angle: IntAngle, shift: int) -> IntAngle:
        """
        Apply the doubling map `shift` times.

        2^period ≡ 1 (mod max_angle), so shift is reduced mod period and may
        be negative. The value max_angle itself is the α fixed point of
        period 1 and is left in place.
        """
        if angle == self.max_angle:
            return angle
        return (angle << (shift % self.period)) % self.max_angle

    def relative_shift(self, start: IntAngle, end: IntAngle) -> int:
        """
        Number of doublings taking `start` to `end`, in range(period).

        Raises:
            ValueError: the angles are on different cycles
        """
        for shift in range(self.period):
            if self.rotate(start, shift) == end:
                return shift
        raise ValueError(f"Angles {start} and {end} are not on the same cycle")

    def flip(self, angle: IntAngle) -> IntAngle:
        """Conjugation θ ↦ 1 - θ: complement within `period` bits."""
        return self.max_angle & ~angle

    def scale_ratio(self, ratio: RatAngle) -> IntAngle:
        """
        Integer angle of a rational angle (truncating).

        Exact only when the denominator of ratio divides max_angle; callers
        that need exactness compare to_ratio() of the result with ratio.
        """
        scaled = ratio * self.max_angle
        return scaled.numerator // scaled.denominator

    def to_ratio(self, angle: IntAngle) -> RatAngle:
        return Fraction(angle, self.max_angle)

    def format_angle(self, angle: IntAngle, binary: bool = False) -> str:
        if binary:
            return f"{angle:0{self.period}b}"
        return str(angle)


@dataclass(frozen=True)
class IntegerMod:
    """
    Residue class modulo a fixed modulus.

    Used for phase shifts inside a cycle (modulus = period).

    Example:
        >>> IntegerMod(5, 4) + 3
        IntegerMod(value=0, modulus=4)
    """
    value: int
    modulus: int = field(default=1)

    def __post_init__(self):
        if self.modulus < 1:
            raise ValueError(f"modulus must be >= 1, got {self.modulus}")
        object.__setattr__(self, "value", self.value % self.modulus)

    def _coerce(self, other) -> int:
        if isinstance(other, IntegerMod):
            if other.modulus != self.modulus:
                raise ValueError(
                    f"Cannot combine residues mod {self.modulus} and mod {other.modulus}"
                )
            return other.value
        if isinstance(other, numbers.Integral):
            return int(other)
        return NotImplemented

    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return rhs
        return IntegerMod(self.value + rhs, self.modulus)

    __radd__ = __add__

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return rhs
        return IntegerMod(self.value - rhs, self.modulus)

    def __rsub__(self, other):
        lhs = self._coerce(other)
        if lhs is NotImplemented:
            return lhs
        return IntegerMod(lhs - self.value, self.modulus)

    def __mul__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return rhs
        return IntegerMod(self.value * rhs, self.modulus)

    __rmul__ = __mul__

    def __neg__(self):
        return IntegerMod(-self.value, self.modulus)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __str__(self):
        return str(self.value)
