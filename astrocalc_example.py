"""
Example Usage of the astrocalc Modules

This file demonstrates how to use the astrocalc modules to:
1. Convert civil dates to Julian Days and back
2. Estimate Delta T and the Julian Ephemeris Day
3. Compute mean and apparent sidereal time
4. Transform a star between equatorial, ecliptic, horizontal and galactic
5. Apply Earth model, refraction and binary star calculations
"""

import sys
import logging
from datetime import datetime, timezone

# Add src to path if running from project root
sys.path.insert(0, 'src')

from astrocalc_angle import DEG_TO_RAD, RAD_TO_DEG, RAD_TO_HOURS, deg_from_dms
from astrocalc_time import (
    CalendarType, CivilDate, date_from_julian_day, decimal_year, delta_t,
    julian_day, julian_day_from_datetime, julian_ephemeris_day, mean_sidereal,
    weekday_from_date,
)
from astrocalc_ecliptic import (
    apparent_sidereal_from_jd, mean_obliquity_laskar, nutation, true_obliquity,
)
from astrocalc_coords import (
    DeclinationFormula, EquatorialPoint, GeographicPoint,
    ecliptic_from_eq, eq_from_horizontal, galactic_from_eq,
    hour_angle_from_longitude, horizontal_from_eq,
)
from astrocalc_earth import (
    approximate_geodesic_distance, geodesic_distance, rho_sin_cos_phi,
)
from astrocalc_corrections import refraction_from_true_altitude
import astrocalc_binary as binary

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# La Silla Observatory, longitude positive west
LA_SILLA = GeographicPoint(70.7377 * DEG_TO_RAD, -29.2567 * DEG_TO_RAD)
LA_SILLA_HEIGHT = 2400.0  # meters

# Sirius, equinox J2000.0
SIRIUS = EquatorialPoint(101.2872 * DEG_TO_RAD, -16.7161 * DEG_TO_RAD)


def format_hms(angle: float) -> str:
    """Format an angle in radians as hours, minutes and seconds"""
    hours = (angle * RAD_TO_HOURS) % 24.0
    h = int(hours)
    m = int((hours - h) * 60.0)
    s = ((hours - h) * 60.0 - m) * 60.0
    return f"{h:02d}h{m:02d}m{s:06.3f}s"


def demonstrate_calendar():
    """Demonstrate calendar conversions"""

    print("\n" + "="*60)
    print("CALENDAR CONVERSIONS")
    print("="*60)

    date = CivilDate.from_components(2025, 10, 3, 4, 30, 0.0, time_zone=-3.0)
    jd = julian_day(date)

    print(f"\n2025-10-03 04:30 local (UTC-3):")
    print(f"  Decimal day (UT): {date.decimal_day:.6f}")
    print(f"  Julian Day:       {jd:.6f}")
    print(f"  Decimal year:     {decimal_year(date):.6f}")
    print(f"  Weekday:          {weekday_from_date(date).name.title()}")

    back = date_from_julian_day(jd)
    print(f"  Back from JD:     {back.year}-{back.month.name} day {back.decimal_day:.6f} "
          f"({back.calendar.value})")

    reform = julian_day(CivilDate.from_components(1582, 10, 4, calendar=CalendarType.JULIAN))
    print(f"\nLast day of the Julian calendar (1582-10-04): JD {reform}")
    print(f"Following day: {date_from_julian_day(reform + 1.0)}")

    # Negative Julian Days are refused with a warning
    date_from_julian_day(-1.0)

    return jd


def demonstrate_time_scales(jd: float):
    """Demonstrate Delta T and sidereal time"""

    print("\n" + "="*60)
    print("TIME SCALES AND SIDEREAL TIME")
    print("="*60)

    dt = delta_t(2025, 10)
    jde = julian_ephemeris_day(jd, dt)
    print(f"\n  Delta T (2025-10):         {dt:.2f} s")
    print(f"  Julian Ephemeris Day:      {jde:.6f}")

    nut_long, nut_obl = nutation(jde)
    print(f"  Nutation in longitude:     {nut_long * RAD_TO_DEG * 3600:+.3f}\"")
    print(f"  Nutation in obliquity:     {nut_obl * RAD_TO_DEG * 3600:+.3f}\"")
    print(f"  Mean obliquity (Laskar):   {mean_obliquity_laskar(jde) * RAD_TO_DEG:.6f}°")
    print(f"  True obliquity:            {true_obliquity(jde) * RAD_TO_DEG:.6f}°")

    gmst = mean_sidereal(jd)
    gast = apparent_sidereal_from_jd(jd)
    print(f"\n  Greenwich mean sidereal time:     {format_hms(gmst)}")
    print(f"  Greenwich apparent sidereal time: {format_hms(gast)}")
    print(f"  Local sidereal time at La Silla:  {format_hms(gast - LA_SILLA.longitude)}")

    now = datetime.now(timezone.utc)
    print(f"\n  Julian Day now ({now:%Y-%m-%d %H:%M} UTC): {julian_day_from_datetime(now):.5f}")

    return gast


def demonstrate_coordinates(jd: float, gast: float):
    """Demonstrate coordinate transformations for Sirius"""

    print("\n" + "="*60)
    print("COORDINATE TRANSFORMATIONS (SIRIUS)")
    print("="*60)

    ecl = ecliptic_from_eq(SIRIUS.ra, SIRIUS.dec, mean_obliquity_laskar(jd))
    print(f"\n  Ecliptic:   lon {ecl.longitude * RAD_TO_DEG % 360:9.4f}°  "
          f"lat {ecl.latitude * RAD_TO_DEG:+8.4f}°")

    # Galactic frame is B1950.0, Sirius is given for J2000.0
    gal = galactic_from_eq(SIRIUS.ra, SIRIUS.dec)
    print(f"  Galactic:   lon {gal.longitude * RAD_TO_DEG % 360:9.4f}°  "
          f"lat {gal.latitude * RAD_TO_DEG:+8.4f}°")

    ha = hour_angle_from_longitude(gast, LA_SILLA.longitude, SIRIUS.ra)
    hz = horizontal_from_eq(ha, SIRIUS.dec, LA_SILLA.latitude)
    print(f"  Hour angle: {format_hms(ha)}")
    print(f"  Horizontal: az {hz.azimuth * RAD_TO_DEG % 360:9.4f}° (from south)  "
          f"alt {hz.altitude * RAD_TO_DEG:+8.4f}°")

    if hz.altitude > 0.0:
        refraction = refraction_from_true_altitude(hz.altitude)
        print(f"  Refraction: {refraction * RAD_TO_DEG * 60:.3f}'")
    else:
        logger.info("Sirius is below the horizon at La Silla")

    for formula in DeclinationFormula:
        back = eq_from_horizontal(hz.azimuth, hz.altitude, LA_SILLA.latitude, formula)
        print(f"  Declination back ({formula.value:9s}): {back.dec * RAD_TO_DEG:+8.4f}°")


def demonstrate_earth():
    """Demonstrate the Earth model"""

    print("\n" + "="*60)
    print("EARTH MODEL")
    print("="*60)

    paranal = GeographicPoint(deg_from_dms(70, 24, 15) * DEG_TO_RAD,
                              deg_from_dms(-24, 37, 38) * DEG_TO_RAD)

    print(f"\n  La Silla - Paranal (ellipsoid): {geodesic_distance(LA_SILLA, paranal):8.2f} km")
    print(f"  La Silla - Paranal (sphere):    "
          f"{approximate_geodesic_distance(LA_SILLA, paranal):8.2f} km")

    rho_sin, rho_cos = rho_sin_cos_phi(LA_SILLA.latitude, LA_SILLA_HEIGHT)
    print(f"  La Silla rho sin phi' = {rho_sin:+.6f}, rho cos phi' = {rho_cos:.6f}")


def demonstrate_binary_star():
    """Demonstrate a binary star ephemeris"""

    print("\n" + "="*60)
    print("BINARY STAR (ETA CORONAE BOREALIS)")
    print("="*60)

    period, t_peri, e, a = 41.623, 1934.008, 0.2763, 0.907
    i, node, w = 59.025 * DEG_TO_RAD, 23.717 * DEG_TO_RAD, 212.007 * DEG_TO_RAD
    n = binary.mean_annual_motion(period)

    print(f"\n{'Epoch':>8} {'PA(deg)':>9} {'Sep(arcsec)':>12}")
    print("-" * 31)
    for epoch in (1980.0, 1990.0, 2000.0, 2010.0, 2020.0):
        ecc_anom = binary.eccentric_anomaly(binary.mean_anomaly(n, epoch, t_peri), e)
        v = binary.true_anomaly(e, ecc_anom)
        r = binary.radius_vector(a, e, ecc_anom)
        theta = binary.apparent_position_angle(node, v, w, i)
        rho = binary.angular_separation(r, v, w, i)
        print(f"{epoch:8.1f} {theta * RAD_TO_DEG:9.2f} {rho:12.3f}")

    print(f"\nApparent orbit eccentricity: "
          f"{binary.eccentricity_of_apparent_orbit(e, w, i):.4f}")


def main():
    """Main demonstration function"""

    print("\n" + "="*80)
    print(" " * 20 + "ASTROCALC DEMONSTRATION")
    print("="*80)

    jd = demonstrate_calendar()
    gast = demonstrate_time_scales(jd)
    demonstrate_coordinates(jd, gast)
    demonstrate_earth()
    demonstrate_binary_star()

    print("\n" + "="*80)
    print(" " * 25 + "DEMONSTRATION COMPLETE")
    print("="*80 + "\n")


if __name__ == "__main__":
    main()
