"""
Coordinate Transformation Module for astrocalc

This module provides transformations between celestial coordinate systems:
- Equatorial <-> ecliptic
- Equatorial <-> local horizontal
- Equatorial (B1950.0) <-> galactic
- Hour angle from sidereal time

All angles are in radians. Azimuth is measured westward from the south.
Geographic longitude is positive west of Greenwich.
"""

import math
import logging
from dataclasses import dataclass
from enum import Enum

from astrocalc_angle import DEG_TO_RAD, angular_separation
from astrocalc_config import Config

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

GALACTIC_POLE_RA = Config.GALACTIC_POLE_RA * DEG_TO_RAD
GALACTIC_POLE_DEC = Config.GALACTIC_POLE_DEC * DEG_TO_RAD
GALACTIC_LONGITUDE_OFFSET = Config.GALACTIC_LONGITUDE_OFFSET * DEG_TO_RAD
GALACTIC_NODE_LONGITUDE = Config.GALACTIC_NODE_LONGITUDE * DEG_TO_RAD
GALACTIC_RA_OFFSET = Config.GALACTIC_RA_OFFSET * DEG_TO_RAD


class DeclinationFormula(Enum):
    """
    Formula used by dec_from_horizontal().

    LEGACY is the cos(A)^2 expression of earlier releases and does not
    reproduce the spherical triangle. SPHERICAL is the textbook relation.
    """
    LEGACY = "legacy"
    SPHERICAL = "spherical"


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class GeographicPoint:
    """Point on the Earth's surface (radians, longitude positive west)"""
    longitude: float
    latitude: float

    def angular_separation(self, other: "GeographicPoint") -> float:
        return angular_separation(self.longitude, self.latitude,
                                  other.longitude, other.latitude)


@dataclass(frozen=True)
class EquatorialPoint:
    """Right ascension and declination (radians)"""
    ra: float
    dec: float

    def angular_separation(self, other: "EquatorialPoint") -> float:
        return angular_separation(self.ra, self.dec, other.ra, other.dec)


@dataclass(frozen=True)
class EclipticPoint:
    """Ecliptic longitude and latitude (radians)"""
    longitude: float
    latitude: float

    def angular_separation(self, other: "EclipticPoint") -> float:
        return angular_separation(self.longitude, self.latitude,
                                  other.longitude, other.latitude)


@dataclass(frozen=True)
class HorizontalPoint:
    """Azimuth (from south) and altitude (radians)"""
    azimuth: float
    altitude: float


@dataclass(frozen=True)
class GalacticPoint:
    """Galactic longitude and latitude (radians)"""
    longitude: float
    latitude: float


@dataclass(frozen=True)
class HourAngleDeclination:
    """Local hour angle and declination (radians)"""
    hour_angle: float
    dec: float


# ============================================================================
# Hour Angle
# ============================================================================

def hour_angle_from_longitude(greenwich_sidereal: float, observer_longitude: float,
                              ra: float) -> float:
    """
    Calculate hour angle from Greenwich sidereal time.

    Args:
        greenwich_sidereal: Sidereal time at Greenwich (radians)
        observer_longitude: Observer longitude (radians, west positive)
        ra: Right ascension (radians)

    Returns:
        Hour angle in radians
    """
    return greenwich_sidereal - observer_longitude - ra


def hour_angle_from_sidereal(local_sidereal: float, ra: float) -> float:
    """Hour angle from local sidereal time and right ascension (radians)."""
    return local_sidereal - ra


# ============================================================================
# Equatorial <-> Ecliptic
# ============================================================================

def ecliptic_long_from_eq(ra: float, dec: float, obliquity: float) -> float:
    """
    Calculate ecliptic longitude from equatorial coordinates.

    Args:
        ra: Right ascension (radians)
        dec: Declination (radians)
        obliquity: Obliquity of the ecliptic (radians). Use the true
            obliquity if ra and dec include nutation, otherwise the mean.

    Returns:
        Ecliptic longitude in radians
    """
    return math.atan2(math.sin(ra) * math.cos(obliquity) +
                      math.tan(dec) * math.sin(obliquity),
                      math.cos(ra))


def ecliptic_lat_from_eq(ra: float, dec: float, obliquity: float) -> float:
    """
    Calculate ecliptic latitude from equatorial coordinates.

    Args:
        ra: Right ascension (radians)
        dec: Declination (radians)
        obliquity: Obliquity of the ecliptic (radians)

    Returns:
        Ecliptic latitude in radians
    """
    return math.asin(math.sin(dec) * math.cos(obliquity) -
                     math.cos(dec) * math.sin(obliquity) * math.sin(ra))


def ecliptic_from_eq(ra: float, dec: float, obliquity: float) -> EclipticPoint:
    """Convert equatorial to ecliptic coordinates (radians)."""
    return EclipticPoint(ecliptic_long_from_eq(ra, dec, obliquity),
                         ecliptic_lat_from_eq(ra, dec, obliquity))


def asc_from_ecliptic(ecl_long: float, ecl_lat: float, obliquity: float) -> float:
    """
    Calculate right ascension from ecliptic coordinates.

    Args:
        ecl_long: Ecliptic longitude (radians)
        ecl_lat: Ecliptic latitude (radians)
        obliquity: Obliquity of the ecliptic (radians). Use the true
            obliquity if the coordinates include nutation, otherwise the mean.

    Returns:
        Right ascension in radians
    """
    return math.atan2(math.sin(ecl_long) * math.cos(obliquity) -
                      math.tan(ecl_lat) * math.sin(obliquity),
                      math.cos(ecl_long))


def dec_from_ecliptic(ecl_long: float, ecl_lat: float, obliquity: float) -> float:
    """
    Calculate declination from ecliptic coordinates.

    Args:
        ecl_long: Ecliptic longitude (radians)
        ecl_lat: Ecliptic latitude (radians)
        obliquity: Obliquity of the ecliptic (radians)

    Returns:
        Declination in radians
    """
    return math.asin(math.sin(ecl_lat) * math.cos(obliquity) +
                     math.cos(ecl_lat) * math.sin(obliquity) * math.sin(ecl_long))


def eq_from_ecliptic(ecl_long: float, ecl_lat: float, obliquity: float) -> EquatorialPoint:
    """Convert ecliptic to equatorial coordinates (radians)."""
    return EquatorialPoint(asc_from_ecliptic(ecl_long, ecl_lat, obliquity),
                           dec_from_ecliptic(ecl_long, ecl_lat, obliquity))


# ============================================================================
# Equatorial <-> Horizontal
# ============================================================================

def azimuth_from_eq(hour_angle: float, dec: float, observer_lat: float) -> float:
    """
    Calculate azimuth from equatorial coordinates.

    Args:
        hour_angle: Local hour angle (radians)
        dec: Declination (radians)
        observer_lat: Observer latitude (radians)

    Returns:
        Azimuth in radians, measured westward from the south
    """
    return math.atan2(math.sin(hour_angle),
                      math.cos(hour_angle) * math.sin(observer_lat) -
                      math.tan(dec) * math.cos(observer_lat))


def altitude_from_eq(hour_angle: float, dec: float, observer_lat: float) -> float:
    """
    Calculate altitude from equatorial coordinates.

    Args:
        hour_angle: Local hour angle (radians)
        dec: Declination (radians)
        observer_lat: Observer latitude (radians)

    Returns:
        Altitude in radians
    """
    return math.asin(math.sin(observer_lat) * math.sin(dec) +
                     math.cos(observer_lat) * math.cos(dec) * math.cos(hour_angle))


def horizontal_from_eq(hour_angle: float, dec: float, observer_lat: float) -> HorizontalPoint:
    """Convert hour angle and declination to azimuth and altitude (radians)."""
    return HorizontalPoint(azimuth_from_eq(hour_angle, dec, observer_lat),
                           altitude_from_eq(hour_angle, dec, observer_lat))


def hour_angle_from_horizontal(az: float, alt: float, observer_lat: float) -> float:
    """
    Calculate hour angle from horizontal coordinates.

    Args:
        az: Azimuth (radians, from the south)
        alt: Altitude (radians)
        observer_lat: Observer latitude (radians)

    Returns:
        Hour angle in radians
    """
    return math.atan2(math.sin(az),
                      math.cos(az) * math.sin(observer_lat) +
                      math.tan(alt) * math.cos(observer_lat))


def dec_from_horizontal(az: float, alt: float, observer_lat: float,
                        formula: DeclinationFormula = DeclinationFormula.LEGACY) -> float:
    """
    Calculate declination from horizontal coordinates.

    The default LEGACY formula squares cos(az) where the spherical triangle
    has cos(alt) * cos(az), and does not invert altitude_from_eq(). Pass
    DeclinationFormula.SPHERICAL for the exact inverse.

    Args:
        az: Azimuth (radians, from the south)
        alt: Altitude (radians)
        observer_lat: Observer latitude (radians)
        formula: Which declination formula to use

    Returns:
        Declination in radians
    """
    if formula is DeclinationFormula.SPHERICAL:
        return math.asin(math.sin(observer_lat) * math.sin(alt) -
                         math.cos(observer_lat) * math.cos(alt) * math.cos(az))

    return math.asin(math.sin(observer_lat) * math.sin(alt) -
                     math.cos(observer_lat) * math.cos(az) * math.cos(az))


def eq_from_horizontal(az: float, alt: float, observer_lat: float,
                       formula: DeclinationFormula = DeclinationFormula.LEGACY
                       ) -> HourAngleDeclination:
    """Convert azimuth and altitude to hour angle and declination (radians)."""
    return HourAngleDeclination(hour_angle_from_horizontal(az, alt, observer_lat),
                                dec_from_horizontal(az, alt, observer_lat, formula))


# ============================================================================
# Equatorial <-> Galactic (B1950.0)
# ============================================================================

def galactic_long_from_eq(ra: float, dec: float) -> float:
    """
    Calculate galactic longitude from equatorial coordinates.

    Args:
        ra: Right ascension, equinox B1950.0 (radians)
        dec: Declination, equinox B1950.0 (radians)

    Returns:
        Galactic longitude in radians (not normalised)
    """
    x = GALACTIC_POLE_RA - ra
    return GALACTIC_LONGITUDE_OFFSET - math.atan2(
        math.sin(x),
        math.sin(GALACTIC_POLE_DEC) * math.cos(x) -
        math.cos(GALACTIC_POLE_DEC) * math.tan(dec))


def galactic_lat_from_eq(ra: float, dec: float) -> float:
    """
    Calculate galactic latitude from equatorial coordinates.

    Args:
        ra: Right ascension, equinox B1950.0 (radians)
        dec: Declination, equinox B1950.0 (radians)

    Returns:
        Galactic latitude in radians
    """
    return math.asin(math.sin(dec) * math.sin(GALACTIC_POLE_DEC) +
                     math.cos(dec) * math.cos(GALACTIC_POLE_DEC) *
                     math.cos(GALACTIC_POLE_RA - ra))


def galactic_from_eq(ra: float, dec: float) -> GalacticPoint:
    """Convert B1950.0 equatorial to galactic coordinates (radians)."""
    return GalacticPoint(galactic_long_from_eq(ra, dec),
                         galactic_lat_from_eq(ra, dec))


def asc_from_galactic(gal_long: float, gal_lat: float) -> float:
    """
    Calculate right ascension from galactic coordinates.

    Args:
        gal_long: Galactic longitude (radians)
        gal_lat: Galactic latitude (radians)

    Returns:
        Right ascension, equinox B1950.0, in radians (not normalised)
    """
    x = gal_long - GALACTIC_NODE_LONGITUDE
    return GALACTIC_RA_OFFSET + math.atan2(
        math.sin(x),
        math.sin(GALACTIC_POLE_DEC) * math.cos(x) -
        math.cos(GALACTIC_POLE_DEC) * math.tan(gal_lat))


def dec_from_galactic(gal_long: float, gal_lat: float) -> float:
    """
    Calculate declination from galactic coordinates.

    Args:
        gal_long: Galactic longitude (radians)
        gal_lat: Galactic latitude (radians)

    Returns:
        Declination, equinox B1950.0, in radians
    """
    return math.asin(math.sin(gal_lat) * math.sin(GALACTIC_POLE_DEC) +
                     math.cos(gal_lat) * math.cos(GALACTIC_POLE_DEC) *
                     math.cos(gal_long - GALACTIC_NODE_LONGITUDE))


def eq_from_galactic(gal_long: float, gal_lat: float) -> EquatorialPoint:
    """Convert galactic to B1950.0 equatorial coordinates (radians)."""
    return EquatorialPoint(asc_from_galactic(gal_long, gal_lat),
                           dec_from_galactic(gal_long, gal_lat))


# ============================================================================
# Example Usage
# ============================================================================

if __name__ == "__main__":
    from astrocalc_time import CivilDate, julian_day, mean_sidereal
    from astrocalc_ecliptic import mean_obliquity_laskar

    # Vega, J2000.0
    vega = EquatorialPoint(279.2347 * DEG_TO_RAD, 38.7837 * DEG_TO_RAD)

    jd = julian_day(CivilDate.from_components(2024, 10, 2, 12))
    ecl = ecliptic_from_eq(vega.ra, vega.dec, mean_obliquity_laskar(jd))
    print(f"Vega ecliptic: lon {math.degrees(ecl.longitude):.4f}, "
          f"lat {math.degrees(ecl.latitude):.4f}")

    # La Silla, longitude positive west
    lon, lat = 70.7377 * DEG_TO_RAD, -29.2567 * DEG_TO_RAD
    ha = hour_angle_from_longitude(mean_sidereal(jd), lon, vega.ra)
    hz = horizontal_from_eq(ha, vega.dec, lat)
    print(f"Vega from La Silla: az {math.degrees(hz.azimuth):.2f}, "
          f"alt {math.degrees(hz.altitude):.2f}")
