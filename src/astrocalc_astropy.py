"""
Astronomical Calculation Module using Astropy

This module reimplements part of the astrocalc time and coordinate
functions on top of the astropy package, so the closed-form formulas can
be checked against an independent implementation:
- Civil date <-> Julian Day (proleptic Gregorian only)
- Mean and apparent sidereal time at Greenwich
- Equatorial <-> ecliptic for a given obliquity
- Equatorial (B1950.0) <-> galactic

All functions keep the same interface as their astrocalc counterparts.
"""

import math
import logging
from typing import Optional

from astropy import units as u
from astropy.time import Time
from astropy.coordinates import (
    FK4NoETerms, Galactic,
    UnitSphericalRepresentation,
)
from astropy.coordinates.matrix_utilities import rotation_matrix

from astrocalc_coords import EclipticPoint, EquatorialPoint, GalacticPoint
from astrocalc_time import CalendarType, CivilDate, Month

logger = logging.getLogger(__name__)


# ============================================================================
# Time Conversion Functions
# ============================================================================

def julian_day(date: CivilDate) -> float:
    """
    Calculate the Julian Day for a civil date using astropy.

    Args:
        date: CivilDate in the Gregorian calendar

    Returns:
        Julian Day

    Raises:
        ValueError: for Julian calendar dates, which astropy does not model
    """
    if date.calendar is not CalendarType.GREGORIAN:
        raise ValueError("astropy only supports the proleptic Gregorian calendar")

    day = math.floor(date.decimal_day)
    t = Time({'year': date.year, 'month': date.month.ordinal, 'day': day,
              'hour': 0, 'minute': 0, 'second': 0.0},
             format='ymdhms', scale='tt')

    return t.jd + (date.decimal_day - day)


def date_from_julian_day(jd: float) -> Optional[CivilDate]:
    """
    Convert a Julian Day to a civil date using astropy.

    The result is always in the proleptic Gregorian calendar.

    Args:
        jd: Julian Day

    Returns:
        CivilDate, or None if jd is negative
    """
    if jd < 0.0:
        logger.warning(f"Negative Julian Day {jd} cannot be converted to a date")
        return None

    ymdhms = Time(jd, format='jd', scale='tt').ymdhms
    day = (ymdhms['day'] + ymdhms['hour'] / 24.0 +
           ymdhms['minute'] / 1440.0 + ymdhms['second'] / 86400.0)

    return CivilDate(int(ymdhms['year']), Month.from_ordinal(int(ymdhms['month'])),
                     float(day), CalendarType.GREGORIAN)


def mean_sidereal(jd: float) -> float:
    """
    Calculate Greenwich Mean Sidereal Time using astropy (IAU 1982 model).

    Args:
        jd: Julian Day (UT1)

    Returns:
        Mean sidereal time in radians, in [0, 2*pi)
    """
    t = Time(jd, format='jd', scale='ut1')
    return t.sidereal_time('mean', 'greenwich', model='IAU1982').to_value(u.rad)


def apparent_sidereal_from_jd(jd: float) -> float:
    """
    Calculate Greenwich Apparent Sidereal Time using astropy (IAU 1994 model).

    Args:
        jd: Julian Day (UT1)

    Returns:
        Apparent sidereal time in radians, in [0, 2*pi)
    """
    t = Time(jd, format='jd', scale='ut1')
    return t.sidereal_time('apparent', 'greenwich', model='IAU1994').to_value(u.rad)


# ============================================================================
# Coordinate Transformation Functions
# ============================================================================

def _rotate_x(lon: float, lat: float, angle: float) -> UnitSphericalRepresentation:
    """Rotate the reference frame of a direction about the x axis (radians)."""
    rep = UnitSphericalRepresentation(lon=lon * u.rad, lat=lat * u.rad)
    cart = rep.to_cartesian().transform(rotation_matrix(angle * u.rad, 'x'))
    return UnitSphericalRepresentation.from_cartesian(cart)


def ecliptic_from_eq(ra: float, dec: float, obliquity: float) -> EclipticPoint:
    """
    Convert equatorial to ecliptic coordinates with an astropy rotation.

    Args:
        ra: Right ascension (radians)
        dec: Declination (radians)
        obliquity: Obliquity of the ecliptic (radians)

    Returns:
        EclipticPoint, longitude in [0, 2*pi)
    """
    ecl = _rotate_x(ra, dec, obliquity)
    return EclipticPoint(ecl.lon.to_value(u.rad), ecl.lat.to_value(u.rad))


def eq_from_ecliptic(ecl_long: float, ecl_lat: float, obliquity: float) -> EquatorialPoint:
    """Convert ecliptic to equatorial coordinates with an astropy rotation."""
    eq = _rotate_x(ecl_long, ecl_lat, -obliquity)
    return EquatorialPoint(eq.lon.to_value(u.rad), eq.lat.to_value(u.rad))


def galactic_from_eq(ra: float, dec: float) -> GalacticPoint:
    """
    Convert B1950.0 equatorial to galactic coordinates using astropy.

    The input frame is FK4 without E-terms, which is the frame the
    galactic pole (192.25, 27.4) is defined in.

    Args:
        ra: Right ascension, equinox B1950.0 (radians)
        dec: Declination, equinox B1950.0 (radians)

    Returns:
        GalacticPoint, longitude in [0, 2*pi)
    """
    fk4 = FK4NoETerms(ra=ra * u.rad, dec=dec * u.rad, equinox='B1950', obstime='B1950')
    gal = fk4.transform_to(Galactic())

    return GalacticPoint(gal.l.to_value(u.rad), gal.b.to_value(u.rad))


def eq_from_galactic(gal_long: float, gal_lat: float) -> EquatorialPoint:
    """Convert galactic to B1950.0 equatorial coordinates using astropy."""
    gal = Galactic(l=gal_long * u.rad, b=gal_lat * u.rad)
    fk4 = gal.transform_to(FK4NoETerms(equinox='B1950', obstime='B1950'))

    return EquatorialPoint(fk4.ra.to_value(u.rad), fk4.dec.to_value(u.rad))
