"""
pycirclehough: circle center detection in laser scan profiles
"""

from .hough import CircleHough, create, calculate, free
from .grid import AxisConstraint, HoughConstraints, DEFAULT_RADIUS, DEFAULT_CONSTRAINTS
from .distribution import SymTriangleDist
from .geometry import HoughResult, ProfileData
from .pointcloud import Profile
from .synthetic import generate_circle_profile
from .utils import CenterHistory, find_highest_point, to_inches
from .errors import HoughError, ConfigurationError, ProfileError
from .logger import HoughLogger, LogLevel, get_logger, set_logger

__all__ = [
    'CircleHough',
    'create',
    'calculate',
    'free',
    'AxisConstraint',
    'HoughConstraints',
    'DEFAULT_RADIUS',
    'DEFAULT_CONSTRAINTS',
    'SymTriangleDist',
    'HoughResult',
    'ProfileData',
    'Profile',
    'generate_circle_profile',
    'CenterHistory',
    'find_highest_point',
    'to_inches',
    'HoughError',
    'ConfigurationError',
    'ProfileError',
    'HoughLogger',
    'LogLevel',
    'get_logger',
    'set_logger',
]
