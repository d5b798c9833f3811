"""
Abstract Cycle Model
====================

Points, cycles and their conjugate classes under angle doubling.

    AbstractPoint       one integer angle (ordering/equality by angle only)
    AbstractPointClass  {p, conj(p)}, represented by the smaller angle
    AbstractCycle       a periodic orbit, represented by its minimal angle
    AbstractCycleClass  {cycle, conj(cycle)}, represented by the smaller rep
    ShiftedCycle        a point of a cycle, as (cycle rep, phase shift)

Conjugation is the bit complement within `period` bits (θ ↦ 1 - θ).

TEXT FORMAT:
    str(x) is decimal, format(x, "b") is binary zero-padded to the period:

        AbstractPoint        13        001101
        AbstractPointClass   [13]      [001101]
        AbstractCycle        (13)      (001101)
        AbstractCycleClass   <13>      <001101>
        ShiftedCycle         [13; 2]   [001101; 2]

    Any remaining format spec (width, alignment) applies to the whole text,
    e.g. f"{cycle:>10b}".

Date: Jan 2026
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..spec.constants import KNEADING_ZERO, KNEADING_ONE, KNEADING_STAR
from .arithmetic import AngleContext, IntAngle, IntegerMod
from .orbits import get_orbit


def _split_format_spec(spec: str) -> Tuple[bool, str]:
    """Return (binary?, remaining spec)."""
    if spec.endswith("b"):
        return True, spec[:-1]
    return False, spec


@dataclass(frozen=True)
class KneadingSequence:
    """
    Itinerary of an orbit relative to the critical partition.

    One symbol per orbit step: '0' inside the arc (θ/2, (1+θ)/2), '1'
    outside it, '*' on one of its endpoints (a preimage of θ).
    """
    symbols: str

    @property
    def is_periodic(self) -> bool:
        """True when the orbit returns to a preimage of θ (trailing '*')."""
        return self.symbols.endswith(KNEADING_STAR)

    def __len__(self):
        return len(self.symbols)

    def __str__(self):
        return self.symbols

    def __format__(self, spec: str) -> str:
        return format(self.symbols, spec)


@dataclass(frozen=True, order=True)
class AbstractPoint:
    """Integer angle in the context of a fixed period."""
    angle: IntAngle
    ctx: AngleContext = field(compare=False, repr=False)

    @property
    def period(self) -> int:
        return self.ctx.period

    def with_angle(self, angle: IntAngle) -> "AbstractPoint":
        return AbstractPoint(angle, self.ctx)

    def orbit(self) -> List["AbstractPoint"]:
        """Orbit in doubling order, starting at self."""
        return [self.with_angle(a) for a in get_orbit(self.angle, self.ctx)]

    def orbit_min(self) -> "AbstractPoint":
        return self.with_angle(min(get_orbit(self.angle, self.ctx)))

    def rotate(self, shift: int) -> "AbstractPoint":
        """Apply the doubling map `shift` times."""
        return self.with_angle(self.ctx.rotate(self.angle, shift))

    def bit_flip(self) -> "AbstractPoint":
        """Complex conjugate: complement within `period` bits."""
        return self.with_angle(self.ctx.flip(self.angle))

    def kneading_sequence(self) -> KneadingSequence:
        return self.orbit_min_and_kneading_sequence()[1]

    def orbit_min_and_kneading_sequence(self) -> Tuple["AbstractPoint", KneadingSequence]:
        """
        Walk the orbit once, returning its minimum and the kneading sequence of self.

        For x on the orbit of θ = self.angle (max = 2^n - 1):
            2x ≡ θ (mod max)      → '*'   (x = θ/2 or (max+θ)/2)
            θ < 2x < max + θ      → '0'
            otherwise             → '1'

        Example: angle 13 at period 6 has orbit 13, 26, 52, 41, 19, 38 and
        kneading sequence "00110*".
        """
        theta = self.angle
        max_angle = self.ctx.max_angle
        symbols = []
        min_angle = theta
        x = theta
        for _ in range(self.ctx.period):
            twice = 2 * x
            if twice % max_angle == theta % max_angle:
                symbols.append(KNEADING_STAR)
            elif theta < twice < max_angle + theta:
                symbols.append(KNEADING_ZERO)
            else:
                symbols.append(KNEADING_ONE)
            min_angle = min(min_angle, x)
            x = self.ctx.rotate(x, 1)
        return self.with_angle(min_angle), KneadingSequence("".join(symbols))

    def _text(self, binary: bool) -> str:
        return self.ctx.format_angle(self.angle, binary)

    def __str__(self):
        return self._text(False)

    def __format__(self, spec: str) -> str:
        binary, rest = _split_format_spec(spec)
        return format(self._text(binary), rest)


@dataclass(frozen=True, order=True)
class AbstractPointClass:
    """Conjugate pair {p, bit_flip(p)}."""
    rep: AbstractPoint

    @classmethod
    def from_point(cls, point: AbstractPoint) -> "AbstractPointClass":
        return cls(min(point, point.bit_flip()))

    def __str__(self):
        return f"[{self.rep._text(False)}]"

    def __format__(self, spec: str) -> str:
        binary, rest = _split_format_spec(spec)
        return format(f"[{self.rep._text(binary)}]", rest)


@dataclass(frozen=True, order=True)
class AbstractCycle:
    """Periodic orbit, named by its minimal angle."""
    rep: AbstractPoint

    @classmethod
    def from_point(cls, point: AbstractPoint) -> "AbstractCycle":
        return cls(point.orbit_min())

    @property
    def period(self) -> int:
        return self.rep.period

    def cycle_class(self) -> "AbstractCycleClass":
        return AbstractCycleClass.from_cycle(self)

    def conjugate(self) -> "AbstractCycle":
        return AbstractCycle(self.rep.bit_flip().orbit_min())

    def __str__(self):
        return f"({self.rep._text(False)})"

    def __format__(self, spec: str) -> str:
        binary, rest = _split_format_spec(spec)
        return format(f"({self.rep._text(binary)})", rest)


@dataclass(frozen=True, order=True)
class AbstractCycleClass:
    """Cycle together with its conjugate cycle. Labels faces of the marked cycle cover."""
    rep: AbstractPoint

    @classmethod
    def from_cycle(cls, cycle: AbstractCycle) -> "AbstractCycleClass":
        dual_rep = cycle.rep.bit_flip().orbit_min()
        return cls(min(cycle.rep, dual_rep))

    @property
    def is_self_conjugate(self) -> bool:
        return self.rep.bit_flip().orbit_min() == self.rep

    def __str__(self):
        return f"<{self.rep._text(False)}>"

    def __format__(self, spec: str) -> str:
        binary, rest = _split_format_spec(spec)
        return format(f"<{self.rep._text(binary)}>", rest)


@dataclass(frozen=True, order=True)
class ShiftedCycle:
    """
    Point of a cycle, remembered as a phase offset from the cycle minimum.

    The angle of the point is rep · 2^shift. `shift` is always reduced
    modulo the period.
    """
    rep: AbstractPoint
    shift: int = 0

    def __post_init__(self):
        object.__setattr__(self, "shift", int(IntegerMod(self.shift, self.rep.period)))

    @property
    def period(self) -> int:
        return self.rep.period

    def with_shift(self, shift: int) -> "ShiftedCycle":
        return ShiftedCycle(self.rep, shift)

    def matches(self, other: "ShiftedCycle") -> bool:
        """Same underlying cycle, any phase."""
        return self.rep == other.rep

    def relative_shift(self, other: "ShiftedCycle") -> int:
        """Shift of self relative to other, in [0, period)."""
        return int(IntegerMod(self.shift, self.period) - other.shift)

    def rotate(self, shift: int) -> "ShiftedCycle":
        return ShiftedCycle(self.rep, self.shift + shift)

    def cycle(self) -> AbstractCycle:
        return AbstractCycle(self.rep)

    def to_point(self) -> AbstractPoint:
        return self.rep.rotate(self.shift)

    def to_point_class(self) -> AbstractPointClass:
        return AbstractPointClass.from_point(self.to_point())

    def __str__(self):
        return f"[{self.rep._text(False)}; {self.shift}]"

    def __format__(self, spec: str) -> str:
        binary, rest = _split_format_spec(spec)
        return format(f"[{self.rep._text(binary)}; {self.shift}]", rest)
