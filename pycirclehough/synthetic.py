"""
Synthetic profile generator for circles seen by a line scanner.
"""
import numpy as np

from .pointcloud import Profile


def generate_circle_profile(center, radius, n_points=200, arc=(0.0, np.pi), noise=0.0,
                            radial_dist=None, camera=0, seed=None):
    """
    Generate a synthetic profile sampled on a circular arc.

    Args:
        center: (2,) center of the circle, in profile units
        radius: float, circle radius
        n_points: int, number of points, evenly spaced along the arc
        arc: (start, stop) angles in radians; the default upper half is the
            side of the circle facing a scanner mounted above it
        noise: float, stddev of Gaussian noise added to x and y
        radial_dist: optional SymTriangleDist; when given each point's radius
            is drawn from it instead of using ``radius``
        camera: camera id stored on the profile
        seed: seed for numpy's random generator
    Returns:
        Profile
    """
    rng = np.random.default_rng(seed)
    angles = np.linspace(arc[0], arc[1], n_points)
    if radial_dist is not None:
        radii = radial_dist.to_scipy().rvs(size=n_points, random_state=rng)
    else:
        radii = np.full(n_points, float(radius))
    xs = center[0] + radii * np.cos(angles)
    ys = center[1] + radii * np.sin(angles)
    pts = np.stack([xs, ys], axis=1)
    if noise > 0:
        pts += rng.normal(scale=noise, size=pts.shape)
    return Profile(pts, camera=camera)
