"""
Utility functions for profile inspection, unit conversion and center tracking.
"""
from collections import deque
from typing import Dict, Iterable, Optional

import numpy as np

from .geometry import HoughResult, ProfileData
from .pointcloud import Profile

# profile units per inch for the reference scanner
UNITS_PER_INCH = 1000.0


def to_inches(value):
    """Convert profile units (1/1000 inch) to inches. Works on scalars and arrays."""
    if np.ndim(value):
        return np.asarray(value, dtype=np.float64) / UNITS_PER_INCH
    return value / UNITS_PER_INCH


def find_highest_point(profiles: Iterable[Profile]) -> ProfileData:
    """
    Return the measurement with the greatest Y value across ``profiles``.

    Only points strictly above y = 0 can win; if there are none the result
    is ProfileData(0, 0, 0).
    """
    best = ProfileData(0, 0, 0)
    for profile in profiles:
        if len(profile) == 0:
            continue
        ys = profile.to_numpy()[:, 1]
        i = int(np.argmax(ys))
        if ys[i] > best.y:
            x, y = profile.to_numpy()[i].tolist()
            best = ProfileData(x, y, int(profile.brightness[i]))
    return best


class CenterHistory:
    """
    Scrolling buffer of circle center estimates, one buffer per camera.

    Each entry is (time, x, y, weight). Once ``max_size`` entries are stored
    for a camera the oldest is dropped.
    """
    def __init__(self, max_size: int = 2000):
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self._buffers: Dict[int, deque] = {}

    def add(self, camera: int, time: float, result: HoughResult) -> None:
        buf = self._buffers.setdefault(camera, deque(maxlen=self.max_size))
        buf.append((float(time), result.x, result.y, result.weight))

    @property
    def cameras(self):
        return sorted(self._buffers)

    def latest(self, camera: int) -> Optional[HoughResult]:
        buf = self._buffers.get(camera)
        if not buf:
            return None
        _, x, y, weight = buf[-1]
        return HoughResult(weight, x, y)

    def as_array(self, camera: int) -> np.ndarray:
        """Return the camera's history as an (N, 4) float array of time, x, y, weight."""
        buf = self._buffers.get(camera)
        if not buf:
            return np.empty((0, 4), dtype=np.float64)
        return np.array(buf, dtype=np.float64)

    def clear(self, camera: Optional[int] = None) -> None:
        if camera is None:
            self._buffers.clear()
        else:
            self._buffers.pop(camera, None)

    def __len__(self):
        return sum(len(b) for b in self._buffers.values())
