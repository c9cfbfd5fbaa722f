"""
Search grid for circle centers: per-axis bounds, step size and bin lookup.
"""
from typing import Any, Mapping

import numpy as np

from .errors import ConfigurationError


def as_integer(value, name: str) -> int:
    """Return ``value`` as an int, rejecting anything with a fractional part."""
    try:
        result = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None
    if result != value:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    return result


class AxisConstraint:
    """
    One axis of the search grid.

    Bins start at ``lower`` and are ``step_size`` apart; there are
    ``(upper - lower) // step_size`` of them, so ``upper`` itself is never a
    bin center.
    """
    def __init__(self, lower: int, upper: int, step_size: int):
        lower = as_integer(lower, "lower bound")
        upper = as_integer(upper, "upper bound")
        step_size = as_integer(step_size, "step size")
        if lower >= upper:
            raise ConfigurationError(f"lower bound {lower} must be less than upper bound {upper}")
        if step_size <= 0:
            raise ConfigurationError(f"step size must be positive, got {step_size}")
        self._lower = lower
        self._upper = upper
        self._step_size = step_size
        self._steps = (upper - lower) // step_size
        if self._steps < 1:
            raise ConfigurationError(
                f"step size {step_size} leaves no bins between {lower} and {upper}"
            )

    @property
    def lower(self) -> int:
        return self._lower

    @property
    def upper(self) -> int:
        return self._upper

    @property
    def step_size(self) -> int:
        return self._step_size

    @property
    def steps(self) -> int:
        """Number of bins along this axis."""
        return self._steps

    def coordinates(self) -> np.ndarray:
        """Bin-center coordinates, ``lower + i * step_size`` for each bin."""
        coords = self._lower + self._step_size * np.arange(self._steps, dtype=np.int64)
        coords.setflags(write=False)
        return coords

    def index_of(self, point: int) -> int:
        """
        Map ``point`` to a bin index, saturating at the grid edges.

        Points below the axis map to 0 and points above map to
        ``steps - 1``; this is used to turn search window edges into safe
        array indices.
        """
        i = (int(point) - self._lower) // self._step_size
        return min(max(i, 0), self._steps - 1)

    def __eq__(self, other):
        if not isinstance(other, AxisConstraint):
            return NotImplemented
        return (self._lower, self._upper, self._step_size) == (other.lower, other.upper, other.step_size)

    def __repr__(self):
        return (f"AxisConstraint(lower={self._lower}, upper={self._upper}, "
                f"step_size={self._step_size})")


class HoughConstraints:
    """
    Region of interest and resolution of the accumulator.

    Both axes share ``step_size``; the accumulator relies on this when it
    sizes its search windows and its radial kernel.

    Args:
        step_size: bin spacing, also the radial tolerance of a vote
        x_lower, x_upper: X region of interest (x_lower < x_upper)
        y_lower, y_upper: Y region of interest (y_lower < y_upper)
    """
    def __init__(self, step_size: int, x_lower: int, x_upper: int, y_lower: int, y_upper: int):
        self.step_size = as_integer(step_size, "step_size")
        self.x_lower = as_integer(x_lower, "x_lower")
        self.x_upper = as_integer(x_upper, "x_upper")
        self.y_lower = as_integer(y_lower, "y_lower")
        self.y_upper = as_integer(y_upper, "y_upper")

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "HoughConstraints":
        """Build constraints from a mapping with the constructor's keys."""
        if not isinstance(config, Mapping):
            raise ConfigurationError(f"constraints must be a mapping, got {type(config).__name__}")
        keys = ('step_size', 'x_lower', 'x_upper', 'y_lower', 'y_upper')
        missing = [k for k in keys if k not in config]
        if missing:
            raise ConfigurationError(f"missing constraint keys: {', '.join(missing)}")
        return cls(**{k: config[k] for k in keys})

    def to_dict(self) -> dict:
        return {
            'step_size': self.step_size,
            'x_lower': self.x_lower,
            'x_upper': self.x_upper,
            'y_lower': self.y_lower,
            'y_upper': self.y_upper,
        }

    def x_axis(self) -> AxisConstraint:
        return AxisConstraint(self.x_lower, self.x_upper, self.step_size)

    def y_axis(self) -> AxisConstraint:
        return AxisConstraint(self.y_lower, self.y_upper, self.step_size)

    def __repr__(self):
        return "HoughConstraints(" + ", ".join(f"{k}={v}" for k, v in self.to_dict().items()) + ")"


# Reference scanner setup, units of 1/1000 inch.
DEFAULT_RADIUS = 810
DEFAULT_CONSTRAINTS = {
    'step_size': 50,
    'x_lower': -15000,
    'x_upper': 15000,
    'y_lower': -30000,
    'y_upper': 30000,
}
