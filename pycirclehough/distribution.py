"""
Symmetric triangular distribution used to weight Hough votes by radius.
"""
import numpy as np


class SymTriangleDist:
    """
    Triangular density centered on ``mu`` with half-width ``sigma``.

    The density peaks at ``1 / sigma`` for ``x == mu`` and falls linearly to
    zero at ``mu - sigma`` and ``mu + sigma``. The accumulator uses the circle
    radius as ``mu`` and the grid step size as ``sigma``.
    """
    def __init__(self, mu, sigma):
        self.mu = float(mu)
        self.sigma = float(sigma)
        self.one_over_sigma = 1.0 / self.sigma

    def pdf(self, x):
        """
        Evaluate the density at ``x``.

        Args:
            x: float or numpy array of distances
        Returns:
            float for scalar input, float64 array otherwise
        """
        if np.ndim(x) == 0:
            if abs(x - self.mu) >= self.sigma:
                return 0.0
            px = 1.0 - abs((x - self.mu) * self.one_over_sigma)
            return px * self.one_over_sigma

        x = np.asarray(x, dtype=np.float64)
        px = 1.0 - np.abs((x - self.mu) * self.one_over_sigma)
        px *= self.one_over_sigma
        px[np.abs(x - self.mu) >= self.sigma] = 0.0
        return px

    def to_scipy(self):
        """Return the equivalent frozen ``scipy.stats.triang`` distribution."""
        from scipy.stats import triang
        return triang(c=0.5, loc=self.mu - self.sigma, scale=2.0 * self.sigma)

    def __repr__(self):
        return f"SymTriangleDist(mu={self.mu}, sigma={self.sigma})"
