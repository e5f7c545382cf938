"""
Obliquity of the Ecliptic and Nutation

This module provides:
- Mean obliquity of the ecliptic (Laskar and IAU 1980 expressions)
- Low precision nutation in longitude and obliquity
- Apparent sidereal time for a Julian day, built from the two above
"""

import math
import logging
from typing import Tuple

import numpy as np

from astrocalc_angle import DEG_TO_RAD, arcsec_to_rad, deg_from_dms
from astrocalc_time import julian_century, mean_sidereal, apparent_sidereal

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# 23° 26' 21.448", the mean obliquity at J2000.0
OBLIQUITY_J2000_DEG = deg_from_dms(23, 26, 21.448)

# Laskar (1986), arcseconds, ascending powers of U = T / 100
LASKAR_COEFFS_ARCSEC = np.array([
    0.0, -4680.93, -1.55, 1999.25, -51.38, -249.67,
    -39.05, 7.12, 27.87, 5.79, 2.45,
])

# IAU 1980, arcseconds, ascending powers of T
IAU_1980_COEFFS_ARCSEC = np.array([0.0, -46.8150, -0.00059, 0.001813])


# ============================================================================
# Obliquity
# ============================================================================

def mean_obliquity_laskar(jd: float) -> float:
    """
    Calculate the mean obliquity of the ecliptic using J. Laskar's formula.

    Accurate to about 0.01" within 1000 years of J2000.0 and to a few
    arcseconds within 10000 years. Outside that span the series is not
    valid.

    Args:
        jd: Julian (Ephemeris) Day

    Returns:
        Mean obliquity in radians
    """
    u = julian_century(jd) / 100.0
    correction = np.polynomial.polynomial.polyval(u, LASKAR_COEFFS_ARCSEC)

    return (OBLIQUITY_J2000_DEG + float(correction) / 3600.0) * DEG_TO_RAD


def mean_obliquity_iau(jd: float) -> float:
    """
    Calculate the mean obliquity of the ecliptic using the IAU 1980 formula.

    The error reaches 1" over 2000 years from J2000.0 and about 10" over
    4000 years.

    Args:
        jd: Julian (Ephemeris) Day

    Returns:
        Mean obliquity in radians
    """
    t = julian_century(jd)
    correction = np.polynomial.polynomial.polyval(t, IAU_1980_COEFFS_ARCSEC)

    return (OBLIQUITY_J2000_DEG + float(correction) / 3600.0) * DEG_TO_RAD


# ============================================================================
# Nutation
# ============================================================================

def nutation(jd: float) -> Tuple[float, float]:
    """
    Calculate nutation in longitude and in obliquity.

    Uses the four largest periodic terms, good to 0.5" in longitude and
    0.1" in obliquity.

    Args:
        jd: Julian (Ephemeris) Day

    Returns:
        Tuple of (nutation_in_longitude, nutation_in_obliquity) in radians
    """
    t = julian_century(jd)

    # Longitude of the Moon's ascending node
    omega = (125.04452 - 1934.136261 * t + 0.0020708 * t * t +
             t * t * t / 450000.0) * DEG_TO_RAD
    # Mean longitudes of the Sun and Moon
    sun_l = (280.4665 + 36000.7698 * t) * DEG_TO_RAD
    moon_l = (218.3165 + 481267.8813 * t) * DEG_TO_RAD

    nut_long = (-17.20 * math.sin(omega) -
                1.32 * math.sin(2.0 * sun_l) -
                0.23 * math.sin(2.0 * moon_l) +
                0.21 * math.sin(2.0 * omega))

    nut_obl = (9.20 * math.cos(omega) +
               0.57 * math.cos(2.0 * sun_l) +
               0.10 * math.cos(2.0 * moon_l) -
               0.09 * math.cos(2.0 * omega))

    return arcsec_to_rad(nut_long), arcsec_to_rad(nut_obl)


def true_obliquity(jd: float) -> float:
    """Mean obliquity (Laskar) plus nutation in obliquity, in radians."""
    _, nut_obl = nutation(jd)
    return mean_obliquity_laskar(jd) + nut_obl


# ============================================================================
# Sidereal Time
# ============================================================================

def apparent_sidereal_from_jd(jd: float) -> float:
    """
    Calculate apparent sidereal time at Greenwich for a Julian Day.

    Nutation comes from nutation() and the true obliquity from Laskar's
    mean obliquity plus nutation in obliquity.

    Args:
        jd: Julian Day

    Returns:
        Apparent sidereal time in radians
    """
    nut_long, nut_obl = nutation(jd)
    obliquity = mean_obliquity_laskar(jd) + nut_obl

    return apparent_sidereal(mean_sidereal(jd), nut_long, obliquity)
