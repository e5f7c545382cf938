"""
Binary Star Orbit Module for astrocalc

Apparent position of the companion of a visual binary from the elements
of its true orbit: period P, time of periastron T, eccentricity e,
semimajor axis a, inclination i, longitude of periastron w and position
angle of the ascending node.
"""

import math
import logging

from astrocalc_angle import TWO_PI, limit_to_two_pi
from astrocalc_config import Config

logger = logging.getLogger(__name__)


def mean_annual_motion(period: float) -> float:
    """
    Calculate the mean annual motion of the companion.

    Args:
        period: Period of revolution (mean solar years)

    Returns:
        Mean motion in radians per year
    """
    return TWO_PI / period


def mean_anomaly(n: float, t: float, t_periastron: float) -> float:
    """
    Calculate the mean anomaly of the companion.

    Args:
        n: Mean annual motion (radians per year)
        t: Time as a decimal year, e.g. 1945.62
        t_periastron: Time of periastron passage as a decimal year

    Returns:
        Mean anomaly in radians
    """
    return n * (t - t_periastron)


def eccentric_anomaly(m: float, e: float) -> float:
    """
    Solve Kepler's equation E - e sin(E) = M by Newton iteration.

    Args:
        m: Mean anomaly (radians)
        e: Eccentricity of the true orbit (0 <= e < 1)

    Returns:
        Eccentric anomaly in radians
    """
    ecc_anom = m if e < 0.8 else math.pi

    for i in range(Config.KEPLER_MAX_ITERATIONS):
        step = (ecc_anom - e * math.sin(ecc_anom) - m) / (1.0 - e * math.cos(ecc_anom))
        ecc_anom -= step
        if abs(step) < Config.KEPLER_TOLERANCE:
            logger.debug(f"Kepler equation converged after {i + 1} iterations")
            return ecc_anom

    logger.warning(f"Kepler equation did not converge for M={m}, e={e}")
    return ecc_anom


def radius_vector(a: float, e: float, ecc_anom: float) -> float:
    """Radius vector of the companion, in the units of a."""
    return a * (1.0 - e * math.cos(ecc_anom))


def true_anomaly(e: float, ecc_anom: float) -> float:
    """
    Calculate the true anomaly of the companion.

    Args:
        e: Eccentricity of the true orbit
        ecc_anom: Eccentric anomaly (radians)

    Returns:
        True anomaly in radians
    """
    return 2.0 * math.atan(math.sqrt((1.0 + e) / (1.0 - e)) * math.tan(ecc_anom / 2.0))


def apparent_position_angle(asc_node: float, true_anom: float, w: float, i: float) -> float:
    """
    Calculate the apparent position angle of the companion.

    Args:
        asc_node: Position angle of the ascending node (radians)
        true_anom: True anomaly (radians)
        w: Longitude of periastron (radians)
        i: Inclination of the true orbit to the plane of the sky (radians)

    Returns:
        Position angle in radians, in [0, 2*pi)
    """
    x = math.atan2(math.sin(true_anom + w) * math.cos(i), math.cos(true_anom + w))
    return limit_to_two_pi(x + asc_node)


def angular_separation(rad_vec: float, true_anom: float, w: float, i: float) -> float:
    """
    Calculate the apparent angular separation of the pair.

    Args:
        rad_vec: Radius vector (same units as the semimajor axis)
        true_anom: True anomaly (radians)
        w: Longitude of periastron (radians)
        i: Inclination (radians)

    Returns:
        Separation in the units of the semimajor axis, usually arcseconds
    """
    return rad_vec * math.sqrt((math.sin(true_anom + w) * math.cos(i)) ** 2 +
                               math.cos(true_anom + w) ** 2)


def eccentricity_of_apparent_orbit(e: float, w: float, i: float) -> float:
    """
    Calculate the eccentricity of the apparent (projected) orbit.

    Args:
        e: Eccentricity of the true orbit
        w: Longitude of periastron (radians)
        i: Inclination (radians)

    Returns:
        Eccentricity of the apparent ellipse
    """
    cos_i = math.cos(i)
    e_cos_w = e * math.cos(w)

    a = (1.0 - e_cos_w ** 2) * cos_i ** 2
    b = e * math.sin(w) * e_cos_w * cos_i
    c = 1.0 - (e * math.sin(w)) ** 2
    d = math.sqrt((a - c) ** 2 + 4.0 * b ** 2)

    return math.sqrt(2.0 * d / (a + c + d))
