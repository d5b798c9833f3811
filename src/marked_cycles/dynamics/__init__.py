"""Angle-doubling dynamics: integer angles, orbits, abstract cycles."""

from .arithmetic import (
    AngleContext,
    IntegerMod,
    validate_period,
    validate_crit_period,
)
from .orbits import get_orbit, classify_orbits, OrbitTable
from .abstract_cycles import (
    KneadingSequence,
    AbstractPoint,
    AbstractPointClass,
    AbstractCycle,
    AbstractCycleClass,
    ShiftedCycle,
)
