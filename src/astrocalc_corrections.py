"""
Small Correction Terms

This module provides:
- Atmospheric refraction for apparent or true altitudes
- Equatorial horizontal parallax and semidiameter of the Moon
"""

import math
import logging

from astrocalc_angle import DEG_TO_RAD, RAD_TO_DEG, arcsec_to_rad
from astrocalc_config import Config

logger = logging.getLogger(__name__)


# ============================================================================
# Refraction Corrections
# ============================================================================

def pressure_temperature_factor(pressure: float = 1010.0,
                                temperature: float = 10.0) -> float:
    """
    Scale factor for refraction at non-standard conditions.

    Args:
        pressure: Pressure in millibars (default 1010 mb)
        temperature: Temperature in Celsius (default 10°C)

    Returns:
        Multiplier for a refraction computed at 1010 mb and 10°C
    """
    return (pressure / 1010.0) * (283.0 / (273.0 + temperature))


def refraction_from_apparent_altitude_15(apparent_alt: float) -> float:
    """
    Calculate refraction for apparent altitudes above 15 degrees.

    Args:
        apparent_alt: Apparent altitude (radians)

    Returns:
        Refraction in radians, to subtract from the apparent altitude
    """
    tan_z = math.tan(math.pi / 2.0 - apparent_alt)

    return arcsec_to_rad(58.294) * tan_z - arcsec_to_rad(0.0668) * tan_z ** 3


def refraction_from_apparent_altitude(apparent_alt: float, pressure: float = 1010.0,
                                      temperature: float = 10.0) -> float:
    """
    Calculate refraction from an apparent altitude (Bennett).

    Good to 0.07' between the horizon and the zenith.

    Args:
        apparent_alt: Apparent altitude (radians)
        pressure: Pressure in millibars
        temperature: Temperature in Celsius

    Returns:
        Refraction in radians, to subtract from the apparent altitude
    """
    h0 = apparent_alt * RAD_TO_DEG
    r = 1.0 / math.tan((h0 + 7.31 / (h0 + 4.4)) * DEG_TO_RAD)  # arcminutes

    return r / 60.0 * DEG_TO_RAD * pressure_temperature_factor(pressure, temperature)


def refraction_from_true_altitude(true_alt: float, pressure: float = 1010.0,
                                  temperature: float = 10.0) -> float:
    """
    Calculate refraction from a true (airless) altitude (Saemundsson).

    Args:
        true_alt: True altitude (radians)
        pressure: Pressure in millibars
        temperature: Temperature in Celsius

    Returns:
        Refraction in radians, to add to the true altitude
    """
    h = true_alt * RAD_TO_DEG
    r = 1.02 / math.tan((h + 10.3 / (h + 5.11)) * DEG_TO_RAD)  # arcminutes

    return r / 60.0 * DEG_TO_RAD * pressure_temperature_factor(pressure, temperature)


# ============================================================================
# Moon
# ============================================================================

def horizontal_parallax(earth_moon_dist: float) -> float:
    """
    Calculate the equatorial horizontal parallax of the Moon.

    Args:
        earth_moon_dist: Earth-Moon distance (km)

    Returns:
        Parallax in radians
    """
    return math.asin(Config.MOON_PARALLAX_RADIUS_KM / earth_moon_dist)


def semidiameter(earth_moon_dist: float) -> float:
    """Geocentric semidiameter of the Moon in radians."""
    return math.asin(Config.MOON_EARTH_RADIUS_RATIO *
                     math.sin(horizontal_parallax(earth_moon_dist)))
