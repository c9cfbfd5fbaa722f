"""
CircleHough: weighted circle Hough transform for a circle of known radius.
"""
from typing import Optional, Union, Mapping

import numpy as np

from .distribution import SymTriangleDist
from .errors import ConfigurationError
from .geometry import HoughResult
from .grid import HoughConstraints, as_integer
from .logger import get_logger, LogLevel
from .pointcloud import Profile


class CircleHough:
    """
    Finds the center of a circle of fixed radius in a 2D profile.

    Every profile point votes for the grid bins lying roughly one radius away
    from it. A vote is weighted by a triangular kernel on the point-to-bin
    distance with a tolerance of one step size, and the bin with the most
    accumulated weight is reported as the circle center.

    Args:
        radius: Radius of the circle to find, in profile units
        constraints: HoughConstraints, or a mapping with the same keys
    Raises:
        ConfigurationError: if the radius or constraints are invalid
    """
    def __init__(self, radius: int, constraints: Union[HoughConstraints, Mapping]):
        self.logger = get_logger()
        if not isinstance(constraints, HoughConstraints):
            constraints = HoughConstraints.from_dict(constraints)
        radius = as_integer(radius, "radius")
        if radius <= 0:
            raise ConfigurationError(f"radius must be positive, got {radius}")

        self.radius = radius
        self.constraints = constraints
        self._cx = constraints.x_axis()
        self._cy = constraints.y_axis()
        self._dist = SymTriangleDist(radius, constraints.step_size)

        self._bx = self._cx.coordinates()
        self._by = self._cy.coordinates()
        self._bins = np.zeros((self._cy.steps, self._cx.steps), dtype=np.float64)

        self.logger.debug(
            f"[CircleHough] radius={radius}, step_size={constraints.step_size}, "
            f"grid={self._cx.steps}x{self._cy.steps} bins, "
            f"x=[{self._cx.lower}, {self._cx.upper}), y=[{self._cy.lower}, {self._cy.upper})"
        )

    @property
    def x_axis(self):
        return self._cx

    @property
    def y_axis(self):
        return self._cy

    @property
    def x_coordinates(self) -> np.ndarray:
        return self._bx

    @property
    def y_coordinates(self) -> np.ndarray:
        return self._by

    @property
    def distribution(self) -> SymTriangleDist:
        return self._dist

    @property
    def votes(self) -> np.ndarray:
        """Read-only view of the vote grid from the last pass, shaped (y bins, x bins)."""
        view = self._bins.view()
        view.setflags(write=False)
        return view

    def map(self, profile) -> HoughResult:
        """
        Run one accumulator pass over ``profile`` and return the best center.

        The vote grid is cleared first, so results never depend on earlier
        calls. Ties between bins keep the first one reached, scanning points
        in order and each point's window row by row.

        Args:
            profile: Profile, (N, 2) array of x/y, or iterable of ProfileData
        Returns:
            HoughResult; weight 0.0 with x = y = 0 when nothing voted
        """
        profile = Profile.coerce(profile)
        cx, cy = self._cx, self._cy
        bx, by = self._bx, self._by
        bins = self._bins
        # X and Y share the same step size
        step_size = cx.step_size
        radius = self.radius

        upper_lim = float(radius + step_size) ** 2
        lower_lim = float(radius - step_size) ** 2

        bins.fill(0.0)

        weight, best_x, best_y = 0.0, 0, 0
        voted = 0
        for px, py in profile.to_numpy().tolist():
            x_start = cx.index_of(px - radius - step_size)
            x_end = cx.index_of(px + radius + step_size)
            # only one step above the point: the scanner sees the circle from above
            y_start = cy.index_of(py - radius - step_size)
            y_end = cy.index_of(py + step_size)
            if x_start >= x_end or y_start >= y_end:
                continue

            a = (px - bx[x_start:x_end]).astype(np.float64)
            b = (py - by[y_start:y_end]).astype(np.float64)
            r_sqr = (a * a)[np.newaxis, :] + (b * b)[:, np.newaxis]

            in_range = (r_sqr >= lower_lim) & (r_sqr <= upper_lim)
            if not in_range.any():
                continue

            window = bins[y_start:y_end, x_start:x_end]
            window[in_range] += self._dist.pdf(np.sqrt(r_sqr[in_range]))
            voted += int(np.count_nonzero(in_range))

            # argmax returns the first maximum in row-major order, matching
            # a y-outer, x-inner scan
            candidates = np.where(in_range, window, -np.inf)
            k = int(np.argmax(candidates))
            peak = candidates.flat[k]
            if peak > weight:
                iy, ix = divmod(k, x_end - x_start)
                weight = float(peak)
                best_x = int(bx[x_start + ix])
                best_y = int(by[y_start + iy])

        result = HoughResult(weight, best_x, best_y)
        if self.logger.isEnabledFor(LogLevel.DEBUG):
            self.logger.debug(
                f"[map] camera={profile.camera}, points={len(profile)}, "
                f"votes={voted}, result=({result.x}, {result.y}) weight={result.weight:.6f}"
            )
        return result

    def close(self) -> None:
        """Release the vote grid and coordinate tables. The instance is unusable afterwards."""
        self._bins = None
        self._bx = None
        self._by = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self):
        return f"CircleHough(radius={self.radius}, constraints={self.constraints!r})"


def create(radius: int, constraints: Union[HoughConstraints, Mapping]) -> Optional[CircleHough]:
    """
    Create a CircleHough, returning None instead of raising if it cannot be built.

    Bad configuration and grids too large to allocate are both reported as a
    logged warning and a None result.

    Args:
        radius: Radius of the circle to find
        constraints: HoughConstraints or mapping of step_size and x/y bounds
    Returns:
        CircleHough, or None if the configuration was rejected
    """
    try:
        return CircleHough(radius, constraints)
    except (ValueError, TypeError) as e:
        get_logger().warning(f"[create] Rejected circle hough configuration: {e}")
        return None
    except MemoryError as e:
        get_logger().warning(f"[create] Not enough memory for circle hough grid: {e}")
        return None


def calculate(circle_hough: CircleHough, profile) -> HoughResult:
    """Run ``circle_hough`` over one profile. See CircleHough.map."""
    return circle_hough.map(profile)


def free(circle_hough: CircleHough) -> None:
    """Release the resources held by ``circle_hough``."""
    circle_hough.close()
