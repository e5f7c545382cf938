"""
Earth Model Module for astrocalc

This module provides calculations on the WGS-84 ellipsoid including:
- Ellipsoid constants (radii, flattening, meridian eccentricity)
- Geodesic distance between two points
- Geocentric position of an observer (rho sin phi', rho cos phi')
- Radius of a parallel, radius of curvature, linear velocity
- Equation of time
- Angle between a diurnal path and the horizon
"""

import math
import logging
from typing import Tuple

from astrocalc_angle import DEG_TO_RAD, arcsec_to_rad, limit_to_360
from astrocalc_config import Config
from astrocalc_coords import GeographicPoint
from astrocalc_time import julian_millennium

logger = logging.getLogger(__name__)


# ============================================================================
# Ellipsoid Constants
# ============================================================================

def flattening_factor() -> float:
    """Flattening of the Earth ellipsoid (WGS-84)"""
    return Config.EARTH_FLATTENING


def equatorial_radius() -> float:
    """Equatorial radius of the Earth in km (WGS-84)"""
    return Config.EARTH_EQUATORIAL_RADIUS_KM


def polar_radius() -> float:
    """Polar radius of the Earth in km"""
    return equatorial_radius() * (1.0 - flattening_factor())


def eccentricity_of_meridian() -> float:
    """Eccentricity of the Earth's meridian ellipse"""
    f = flattening_factor()
    return math.sqrt(f * (2.0 - f))


def rotational_angular_velocity() -> float:
    """Rotational angular velocity of the Earth in rad/s"""
    return Config.EARTH_ROTATION_RATE


# ============================================================================
# Distances
# ============================================================================

def approximate_geodesic_distance(p1: GeographicPoint, p2: GeographicPoint) -> float:
    """
    Calculate a low accuracy distance between two points, in km.

    The Earth is taken as a sphere of mean radius.
    """
    return Config.EARTH_MEAN_RADIUS_KM * p1.angular_separation(p2)


def geodesic_distance(p1: GeographicPoint, p2: GeographicPoint) -> float:
    """
    Calculate the distance between two points on the ellipsoid.

    Andoyer's method with Lambert's flattening correction, good to about
    50 m for any pair of points.

    Args:
        p1: First point
        p2: Second point

    Returns:
        Distance in km
    """
    f = (p1.latitude + p2.latitude) / 2.0
    g = (p1.latitude - p2.latitude) / 2.0
    lam = (p1.longitude - p2.longitude) / 2.0

    s = (math.sin(g) * math.cos(lam)) ** 2 + (math.cos(f) * math.sin(lam)) ** 2
    c = (math.cos(g) * math.cos(lam)) ** 2 + (math.sin(f) * math.sin(lam)) ** 2

    # Same point
    if s == 0.0:
        return 0.0

    omega = math.atan(math.sqrt(s / c))
    r = math.sqrt(s * c) / omega
    d = 2.0 * omega * equatorial_radius()

    h1 = (3.0 * r - 1.0) / (2.0 * c)
    h2 = (3.0 * r + 1.0) / (2.0 * s)

    fl = flattening_factor()
    return d * (1.0 +
                fl * h1 * (math.sin(f) * math.cos(g)) ** 2 -
                fl * h2 * (math.cos(f) * math.sin(g)) ** 2)


# ============================================================================
# Observer Position
# ============================================================================

def rho_sin_cos_phi(geograph_lat: float, height: float) -> Tuple[float, float]:
    """
    Calculate rho sin(phi') and rho cos(phi') for an observer.

    rho is the distance from the Earth's centre (in equatorial radii) and
    phi' the geocentric latitude. Both are needed for parallax corrections.

    Args:
        geograph_lat: Geographic latitude (radians)
        height: Height above sea level (meters)

    Returns:
        Tuple of (rho_sin_phi, rho_cos_phi)
    """
    ratio = polar_radius() / equatorial_radius()
    u = math.atan(ratio * math.tan(geograph_lat))
    x = height / (equatorial_radius() * 1000.0)

    rho_sin_phi = ratio * math.sin(u) + x * math.sin(geograph_lat)
    rho_cos_phi = math.cos(u) + x * math.cos(geograph_lat)

    return rho_sin_phi, rho_cos_phi


def distance_from_center(geograph_lat: float) -> float:
    """Distance from the Earth's centre at a latitude, in equatorial radii."""
    return (0.9983271 +
            0.0016764 * math.cos(2.0 * geograph_lat) -
            0.0000035 * math.cos(4.0 * geograph_lat))


def radius_of_parallel(geograph_lat: float) -> float:
    """
    Calculate the radius of the parallel of latitude.

    Args:
        geograph_lat: Geographic latitude (radians)

    Returns:
        Radius in km
    """
    e = eccentricity_of_meridian()
    return (equatorial_radius() * math.cos(geograph_lat) /
            math.sqrt(1.0 - (e * math.sin(geograph_lat)) ** 2))


def linear_velocity_at_lat(geograph_lat: float) -> float:
    """Linear velocity of a point at a latitude due to rotation, in km/s."""
    return rotational_angular_velocity() * radius_of_parallel(geograph_lat)


def radius_of_curvature(geograph_lat: float) -> float:
    """
    Calculate the radius of curvature of the meridian.

    Args:
        geograph_lat: Geographic latitude (radians)

    Returns:
        Radius of curvature in km
    """
    e = eccentricity_of_meridian()
    return (equatorial_radius() * (1.0 - e * e) /
            (1.0 - (e * math.sin(geograph_lat)) ** 2) ** 1.5)


def geograph_geocent_lat_diff(geograph_lat: float) -> float:
    """Geographic minus geocentric latitude, in radians."""
    return (arcsec_to_rad(692.73) * math.sin(2.0 * geograph_lat) -
            arcsec_to_rad(1.16) * math.sin(4.0 * geograph_lat))


# ============================================================================
# Time and Diurnal Motion
# ============================================================================

def equation_of_time(jd: float, sun_ra: float, nutation_in_longitude: float,
                     true_obliquity: float) -> float:
    """
    Calculate the equation of time (apparent minus mean solar time).

    Args:
        jd: Julian Ephemeris Day
        sun_ra: Apparent right ascension of the Sun (radians)
        nutation_in_longitude: Nutation in longitude (radians)
        true_obliquity: True obliquity of the ecliptic (radians)

    Returns:
        Equation of time in radians, in (-pi, pi]
    """
    t = julian_millennium(jd)

    # Mean longitude of the Sun
    l0 = limit_to_360(280.4664567 +
                      360007.6982779 * t +
                      0.03032028 * t**2 +
                      t**3 / 49931.0 -
                      t**4 / 15300.0 -
                      t**5 / 2000000.0)

    e = (l0 - 0.0057183 - math.degrees(sun_ra) +
         math.degrees(nutation_in_longitude) * math.cos(true_obliquity))

    e = limit_to_360(e)
    if e > 180.0:
        e -= 360.0

    return e * DEG_TO_RAD


def angle_between_diurnal_path_and_horizon(dec: float, observer_lat: float) -> float:
    """
    Calculate the angle between a body's diurnal path and the horizon at
    rising or setting.

    Args:
        dec: Declination (radians)
        observer_lat: Observer latitude (radians)

    Returns:
        Angle in radians
    """
    b = math.tan(dec) * math.tan(observer_lat)
    c = math.sqrt(1.0 - b * b)

    return math.atan2(c * math.cos(dec), math.tan(observer_lat))
