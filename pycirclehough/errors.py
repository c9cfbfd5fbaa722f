"""
Exceptions raised by pycirclehough.
"""


class HoughError(Exception):
    """Base class for all pycirclehough errors."""


class ConfigurationError(HoughError, ValueError):
    """Accumulator bounds, step size or radius are invalid."""


class ProfileError(HoughError, ValueError):
    """Profile data could not be interpreted as 2D points."""
