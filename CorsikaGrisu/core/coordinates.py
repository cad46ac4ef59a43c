"""Transformation from CORSIKA to GrIsu (kascade) coordinates.

- CORSIKA: x to north, y to west, z upwards, azimuth counter-clockwise
- kascade: x to east, y to south, z downwards, azimuth clockwise

All angles are in radians.
"""

import math
from typing import Tuple

from ..physics.constants import TWO_PI


def reduce_angle(angle: float) -> float:
    """Reduce an angle to the interval [0, 2*pi)."""
    reduced = math.fmod(angle, TWO_PI)
    if reduced < 0.0:
        reduced += TWO_PI
    # tiny negative angles round up to exactly 2*pi
    if reduced >= TWO_PI:
        reduced = 0.0
    return reduced


def transform_azimuth(azimuth: float) -> float:
    """CORSIKA azimuth to kascade azimuth."""
    return reduce_angle(1.5 * math.pi - reduce_angle(azimuth))


def transform_position(x: float, y: float) -> Tuple[float, float]:
    """CORSIKA (x, y) to kascade (x, y)."""
    return -y, -x


def transform_coordinates(azimuth: float, x: float, y: float) -> Tuple[float, float, float]:
    """Transform azimuth and planar position from CORSIKA to kascade coordinates.
    
    Args:
        azimuth: CORSIKA azimuth in radians
        x: CORSIKA x position (north)
        y: CORSIKA y position (west)
        
    Returns:
        Tuple (azimuth, x, y) in kascade coordinates
    """
    new_x, new_y = transform_position(x, y)
    return transform_azimuth(azimuth), new_x, new_y
