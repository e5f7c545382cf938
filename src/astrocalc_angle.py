"""
Angle Utilities

Unit conversion constants, degree/minute/second parsing, angle
normalisation and spherical angular separation. Every other astrocalc
module works in radians and leans on the helpers here.
"""

import math
import logging

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

TWO_PI = 2.0 * math.pi
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi
HOURS_TO_RAD = math.pi / 12.0
RAD_TO_HOURS = 12.0 / math.pi
ARCSEC_TO_DEG = 1.0 / 3600.0


# ============================================================================
# Conversions
# ============================================================================

def deg_from_dms(deg: float, minute: float, second: float) -> float:
    """
    Convert degrees, arcminutes and arcseconds to decimal degrees.

    The sign of the angle is taken from the first non-zero component, so
    -0° 30' 0" is written as ``deg_from_dms(0, -30, 0)``.

    Args:
        deg: Degrees
        minute: Arcminutes
        second: Arcseconds

    Returns:
        Angle in decimal degrees
    """
    magnitude = abs(deg) + abs(minute) / 60.0 + abs(second) / 3600.0

    if deg < 0 or (deg == 0 and (minute < 0 or (minute == 0 and second < 0))):
        return -magnitude
    return magnitude


def arcsec_to_rad(arcsec: float) -> float:
    """Convert arcseconds to radians."""
    return arcsec * ARCSEC_TO_DEG * DEG_TO_RAD


def limit_to_360(angle: float) -> float:
    """
    Normalize an angle to the range [0, 360) degrees.

    Args:
        angle: Angle in degrees

    Returns:
        Equivalent angle in [0, 360)
    """
    n = angle % 360.0
    # x % 360 rounds up to 360.0 for tiny negative x
    if n >= 360.0:
        n -= 360.0
    return n


def limit_to_two_pi(angle: float) -> float:
    """
    Normalize an angle to the range [0, 2*pi) radians.

    Args:
        angle: Angle in radians

    Returns:
        Equivalent angle in [0, 2*pi)
    """
    n = angle % TWO_PI
    if n >= TWO_PI:
        n -= TWO_PI
    return n


# ============================================================================
# Spherical Geometry
# ============================================================================

def angular_separation(long1: float, lat1: float, long2: float, lat2: float) -> float:
    """
    Calculate the angular separation between two points on a sphere.

    Works for any longitude/latitude style pair (right ascension and
    declination, ecliptic or geographic coordinates). Uses the haversine
    form, which stays accurate for very small separations where the plain
    law of cosines loses precision.

    Args:
        long1, lat1: First point (radians)
        long2, lat2: Second point (radians)

    Returns:
        Angular separation in radians, in [0, pi]
    """
    hav_lat = math.sin((lat2 - lat1) / 2.0) ** 2
    hav_long = math.sin((long2 - long1) / 2.0) ** 2

    h = hav_lat + math.cos(lat1) * math.cos(lat2) * hav_long

    # Rounding can push antipodal points just past 1
    if h > 1.0:
        h = 1.0

    return 2.0 * math.asin(math.sqrt(h))
