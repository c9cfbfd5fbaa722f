"""
Geometry primitives: profile measurements and circle center estimates.
"""
from typing import NamedTuple


class ProfileData(NamedTuple):
    """A single profile measurement. ``brightness`` is carried but never voted on."""
    x: int
    y: int
    brightness: int = 0


class HoughResult(NamedTuple):
    """
    Best circle center found by one accumulator pass.

    ``weight`` is the accumulated vote of the winning bin; higher values
    imply greater confidence. A weight of 0.0 means no circle was found, in
    which case ``x`` and ``y`` are both 0.
    """
    weight: float = 0.0
    x: int = 0
    y: int = 0

    @property
    def detected(self) -> bool:
        return self.weight > 0.0
