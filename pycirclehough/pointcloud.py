"""
Profile class holding one frame of 2D scan data.
"""
from typing import Iterable, Iterator, Union

import numpy as np

from .errors import ProfileError
from .geometry import ProfileData


class Profile:
    """
    Ordered 2D points measured by one camera during one scan.

    Points are stored as an (N, 2) int64 array in sensor units (1/1000 inch
    for the reference scanner). Non-integer input is rounded with
    ``np.rint``, so exact halves go to the even neighbour (2.5 -> 2,
    -3.5 -> -4). ``camera`` identifies the source channel and is passed
    through untouched.
    """
    def __init__(self, points, brightness=None, camera: int = 0):
        points = np.asarray(points)
        if points.size == 0:
            points = np.empty((0, 2), dtype=np.int64)
        if points.ndim != 2 or points.shape[1] != 2:
            raise ProfileError(f"profile points must have shape (N, 2), got {points.shape}")
        if not np.all(np.isfinite(points)):
            raise ProfileError("profile points must be finite")
        self._points = np.rint(points).astype(np.int64)
        if brightness is None:
            self._brightness = np.zeros(len(self._points), dtype=np.int64)
        else:
            self._brightness = np.asarray(brightness, dtype=np.int64).reshape(-1)
            if len(self._brightness) != len(self._points):
                raise ProfileError(
                    f"got {len(self._brightness)} brightness values for {len(self._points)} points"
                )
        self.camera = camera

    @classmethod
    def from_points(cls, data: Iterable[Union[ProfileData, tuple]], camera: int = 0) -> "Profile":
        """Build a profile from ProfileData records or (x, y[, brightness]) tuples."""
        records = [ProfileData(*d) for d in data]
        if not records:
            return cls(np.empty((0, 2), dtype=np.int64), camera=camera)
        points = [(r.x, r.y) for r in records]
        brightness = [r.brightness for r in records]
        return cls(points, brightness, camera=camera)

    @classmethod
    def from_file(cls, filename: str, scale: float = 1000.0, camera: int = 0) -> "Profile":
        """
        Load a profile from a point cloud file (PLY, XYZ, PCD, ...).

        The X and Y columns are kept and multiplied by ``scale`` before being
        rounded to integer sensor units; Z is dropped.
        """
        import open3d as o3d
        pcd = o3d.io.read_point_cloud(filename)
        xyz = np.asarray(pcd.points)
        if len(xyz) == 0:
            raise ProfileError(f"no points read from {filename}")
        return cls(xyz[:, :2] * scale, camera=camera)

    @classmethod
    def coerce(cls, profile) -> "Profile":
        """Accept a Profile, an (N, 2) array or an iterable of ProfileData."""
        if isinstance(profile, Profile):
            return profile
        if isinstance(profile, np.ndarray):
            return cls(profile)
        return cls.from_points(profile)

    def to_numpy(self) -> np.ndarray:
        """Return points as an (N, 2) int64 array."""
        return self._points

    @property
    def brightness(self) -> np.ndarray:
        return self._brightness

    def scaled(self, factor: float) -> np.ndarray:
        """Points multiplied by ``factor`` as float64, e.g. 1/1000 for inches."""
        return self._points.astype(np.float64) * factor

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[ProfileData]:
        for (x, y), b in zip(self._points.tolist(), self._brightness.tolist()):
            yield ProfileData(x, y, b)

    def __repr__(self):
        return f"Profile(camera={self.camera}, points={len(self)})"
