#!/usr/bin/env python3
"""
Test script for the supporting astrocalc modules
Covers angle helpers, obliquity and nutation, the Earth model, refraction
and lunar corrections, and binary star orbits.
"""

import sys
import os
import math

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from numpy.testing import assert_allclose

from astrocalc_angle import (
    DEG_TO_RAD, RAD_TO_DEG, TWO_PI,
    arcsec_to_rad, deg_from_dms, limit_to_360, limit_to_two_pi,
)
from astrocalc_coords import GeographicPoint
import astrocalc_binary as binary
import astrocalc_corrections as corrections
import astrocalc_earth as earth
import astrocalc_ecliptic as ecliptic

# 1987 April 10, 0h TD
JDE_1987 = 2446895.5


def arcmin(rad):
    return rad * RAD_TO_DEG * 60.0


def test_angle_helpers():
    """Degree parsing and normalisation"""
    print("\n" + "="*70)
    print("TESTING ANGLE HELPERS")
    print("="*70)

    assert deg_from_dms(0, -30, 0) == -0.5
    assert deg_from_dms(-13, 30, 0) == -13.5
    assert deg_from_dms(0, 0, -36) == -0.01
    assert_allclose(deg_from_dms(23, 26, 21.448), 23.43929111, rtol=0, atol=1e-8)

    assert limit_to_360(725.0) == 5.0
    assert limit_to_360(-90.0) == 270.0
    assert limit_to_360(-1e-15) < 360.0
    assert limit_to_360(360.0) == 0.0

    assert_allclose(limit_to_two_pi(-math.pi / 2.0), 1.5 * math.pi)
    assert 0.0 <= limit_to_two_pi(-1e-18) < TWO_PI
    assert_allclose(arcsec_to_rad(3600.0), DEG_TO_RAD)


def test_mean_obliquity():
    """Laskar and IAU 1980 mean obliquity"""
    print("\n" + "="*70)
    print("TESTING OBLIQUITY AND NUTATION")
    print("="*70)

    at_j2000 = ecliptic.mean_obliquity_laskar(2451545.0) * RAD_TO_DEG
    print(f"  Mean obliquity J2000.0 (Laskar): {at_j2000:.7f}")
    assert_allclose(at_j2000, 23.4392911, rtol=0, atol=1e-7)
    assert_allclose(ecliptic.mean_obliquity_iau(2451545.0) * RAD_TO_DEG,
                    23.4392911, rtol=0, atol=1e-7)

    # 23 deg 26' 27.407"
    expected = deg_from_dms(23, 26, 27.407)
    laskar = ecliptic.mean_obliquity_laskar(JDE_1987) * RAD_TO_DEG
    iau = ecliptic.mean_obliquity_iau(JDE_1987) * RAD_TO_DEG
    print(f"  Mean obliquity 1987-04-10: Laskar {laskar:.7f}, IAU {iau:.7f}")
    assert_allclose(laskar, expected, rtol=0, atol=1e-6)
    assert_allclose(iau, expected, rtol=0, atol=1e-6)

    # The two expressions drift apart far from J2000.0
    far = 2451545.0 + 36525.0 * 30
    assert abs(ecliptic.mean_obliquity_laskar(far) - ecliptic.mean_obliquity_iau(far)) > \
        arcsec_to_rad(1.0)


def test_nutation():
    """Low precision nutation against the full series"""
    nut_long, nut_obl = ecliptic.nutation(JDE_1987)
    print(f"  Nutation 1987-04-10: dpsi {nut_long / arcsec_to_rad(1):+.3f}\", "
          f"deps {nut_obl / arcsec_to_rad(1):+.3f}\"")

    assert abs(nut_long - arcsec_to_rad(-3.788)) < arcsec_to_rad(0.5)
    assert abs(nut_obl - arcsec_to_rad(9.443)) < arcsec_to_rad(0.1)

    assert_allclose(ecliptic.true_obliquity(JDE_1987),
                    ecliptic.mean_obliquity_laskar(JDE_1987) + nut_obl,
                    rtol=0, atol=1e-15)


def test_apparent_sidereal_from_jd():
    """Apparent sidereal time, 1987 April 10, 0h UT"""
    theta = ecliptic.apparent_sidereal_from_jd(JDE_1987) * RAD_TO_DEG
    expected = (13 + 10 / 60 + 46.1351 / 3600) * 15.0
    print(f"  Apparent sidereal time: {theta:.6f} (expected {expected:.6f})")
    assert_allclose(theta, expected, rtol=0, atol=1e-4)


def test_ellipsoid():
    """WGS-84 constants"""
    print("\n" + "="*70)
    print("TESTING EARTH MODEL")
    print("="*70)

    assert earth.equatorial_radius() == 6378.137
    assert_allclose(earth.polar_radius(), 6356.7523, rtol=0, atol=1e-4)
    assert_allclose(earth.eccentricity_of_meridian(), 0.0818191908, rtol=0, atol=1e-9)
    assert_allclose(earth.rotational_angular_velocity(), 7.292114992e-5, rtol=1e-12)


def test_geodesic_distance():
    """Paris to Washington"""
    paris = GeographicPoint(deg_from_dms(-2, 20, 14) * DEG_TO_RAD,
                            deg_from_dms(48, 50, 11) * DEG_TO_RAD)
    washington = GeographicPoint(deg_from_dms(77, 3, 56) * DEG_TO_RAD,
                                 deg_from_dms(38, 55, 17) * DEG_TO_RAD)

    dist = earth.geodesic_distance(paris, washington)
    approx = earth.approximate_geodesic_distance(paris, washington)
    print(f"  Paris - Washington: {dist:.2f} km (sphere: {approx:.1f} km)")

    assert_allclose(dist, 6181.63, rtol=0, atol=0.05)
    assert abs(approx - dist) / dist < 0.005
    assert_allclose(earth.geodesic_distance(washington, paris), dist, rtol=1e-12)

    assert earth.geodesic_distance(paris, paris) == 0.0


def test_observer_position():
    """Palomar Observatory, and a parallel at 42 deg"""
    lat = deg_from_dms(33, 21, 22) * DEG_TO_RAD
    rho_sin, rho_cos = earth.rho_sin_cos_phi(lat, 1706.0)
    print(f"  Palomar: rho sin phi' {rho_sin:.6f}, rho cos phi' {rho_cos:.6f}")
    assert_allclose(rho_sin, 0.546861, rtol=0, atol=1e-6)
    assert_allclose(rho_cos, 0.836339, rtol=0, atol=1e-6)

    lat = 42.0 * DEG_TO_RAD
    assert_allclose(earth.radius_of_parallel(lat), 4747.001, rtol=0, atol=0.01)
    assert_allclose(earth.linear_velocity_at_lat(lat), 0.34616, rtol=0, atol=1e-5)
    assert_allclose(earth.radius_of_curvature(lat), 6364.033, rtol=0, atol=0.01)
    assert_allclose(earth.distance_from_center(lat), 0.998506, rtol=0, atol=1e-6)

    assert_allclose(earth.distance_from_center(0.0), 1.0, rtol=0, atol=1e-7)
    assert_allclose(earth.geograph_geocent_lat_diff(45.0 * DEG_TO_RAD),
                    arcsec_to_rad(692.73), rtol=1e-12)
    assert earth.geograph_geocent_lat_diff(0.0) == 0.0


def test_equation_of_time():
    """Equation of time, 1992 October 13.0 TD"""
    eot = earth.equation_of_time(2448908.5,
                                 198.378178 * DEG_TO_RAD,
                                 arcsec_to_rad(15.908),
                                 deg_from_dms(23, 26, 24.83) * DEG_TO_RAD)
    minutes = eot * RAD_TO_DEG * 4.0
    print(f"  Equation of time: {eot * RAD_TO_DEG:.6f} deg = {minutes:.2f} min")

    assert_allclose(eot * RAD_TO_DEG, 3.427351, rtol=0, atol=1e-5)
    assert -math.pi < eot <= math.pi


def test_diurnal_path():
    """A body on the equator crosses the horizon at 90 deg - latitude"""
    angle = earth.angle_between_diurnal_path_and_horizon(0.0, 40.0 * DEG_TO_RAD)
    assert_allclose(angle * RAD_TO_DEG, 50.0, rtol=0, atol=1e-9)


def test_refraction():
    """Refraction near the horizon and high in the sky"""
    print("\n" + "="*70)
    print("TESTING REFRACTION AND LUNAR CORRECTIONS")
    print("="*70)

    r_app = corrections.refraction_from_apparent_altitude(0.5 * DEG_TO_RAD)
    print(f"  Refraction at apparent altitude 0.5 deg: {arcmin(r_app):.3f}'")
    assert_allclose(arcmin(r_app), 28.754, rtol=0, atol=0.01)

    # Saemundsson at the true altitude agrees with Bennett
    r_true = corrections.refraction_from_true_altitude(0.5 * DEG_TO_RAD - r_app)
    print(f"  Refraction at the matching true altitude: {arcmin(r_true):.3f}'")
    assert abs(arcmin(r_true) - arcmin(r_app)) < 0.1

    zenith = corrections.refraction_from_apparent_altitude(90.0 * DEG_TO_RAD)
    assert abs(zenith) < arcsec_to_rad(0.1)

    high = corrections.refraction_from_apparent_altitude_15(45.0 * DEG_TO_RAD)
    assert_allclose(high, arcsec_to_rad(58.294 - 0.0668), rtol=0, atol=1e-10)

    assert corrections.pressure_temperature_factor() == 1.0
    assert_allclose(corrections.pressure_temperature_factor(2020.0, 10.0), 2.0)
    doubled = corrections.refraction_from_apparent_altitude(5.0 * DEG_TO_RAD, pressure=2020.0)
    assert_allclose(doubled,
                    2.0 * corrections.refraction_from_apparent_altitude(5.0 * DEG_TO_RAD))


def test_lunar_parallax():
    """Moon at 368409.7 km"""
    parallax = corrections.horizontal_parallax(368409.7)
    semi = corrections.semidiameter(368409.7)
    print(f"  Moon parallax {parallax * RAD_TO_DEG:.6f} deg, "
          f"semidiameter {semi / arcsec_to_rad(1):.1f}\"")

    assert_allclose(parallax * RAD_TO_DEG, 0.991990, rtol=0, atol=1e-5)
    assert_allclose(semi / arcsec_to_rad(1.0), 973.1, rtol=0, atol=0.5)
    assert corrections.horizontal_parallax(400000.0) < parallax


def test_kepler_equation():
    """Newton iteration solves E - e sin E = M"""
    print("\n" + "="*70)
    print("TESTING BINARY STAR ORBITS")
    print("="*70)

    for e in (0.0, 0.1, 0.5, 0.8, 0.95):
        for m in (0.01, 0.5, 1.5, 3.0, 5.0):
            ecc_anom = binary.eccentric_anomaly(m, e)
            assert abs(ecc_anom - e * math.sin(ecc_anom) - m) < 1e-10, (m, e)

    assert binary.eccentric_anomaly(1.2, 0.0) == 1.2


def test_circular_face_on_orbit():
    """A circular orbit seen face-on shows its true geometry"""
    a = 2.5
    node = 40.0 * DEG_TO_RAD
    w = 10.0 * DEG_TO_RAD

    n = binary.mean_annual_motion(50.0)
    assert_allclose(n, TWO_PI / 50.0)

    m = binary.mean_anomaly(n, 2010.0, 2000.0)
    assert_allclose(m, TWO_PI / 5.0)

    ecc_anom = binary.eccentric_anomaly(m, 0.0)
    v = binary.true_anomaly(0.0, ecc_anom)
    r = binary.radius_vector(a, 0.0, ecc_anom)
    assert_allclose(v, m, rtol=0, atol=1e-12)
    assert r == a

    theta = binary.apparent_position_angle(node, v, w, 0.0)
    rho = binary.angular_separation(r, v, w, 0.0)
    assert_allclose(theta, limit_to_two_pi(v + w + node), rtol=0, atol=1e-12)
    assert_allclose(rho, a, rtol=0, atol=1e-12)


def test_eta_coronae_borealis():
    """Apparent position of eta CrB in 1980.0"""
    period, t_peri, e, a = 41.623, 1934.008, 0.2763, 0.907
    i = 59.025 * DEG_TO_RAD
    node = 23.717 * DEG_TO_RAD
    w = 212.007 * DEG_TO_RAD

    m = binary.mean_anomaly(binary.mean_annual_motion(period), 1980.0, t_peri)
    ecc_anom = binary.eccentric_anomaly(m, e)
    r = binary.radius_vector(a, e, ecc_anom)
    v = binary.true_anomaly(e, ecc_anom)

    theta = binary.apparent_position_angle(node, v, w, i)
    rho = binary.angular_separation(r, v, w, i)
    print(f"  eta CrB 1980.0: theta {theta * RAD_TO_DEG:.2f} deg, rho {rho:.3f}\"")

    assert 0.0 <= theta < TWO_PI
    assert 0.0 < rho <= r <= a * (1.0 + e)
    # The projection never lengthens the radius vector
    assert rho <= r


def test_apparent_orbit_eccentricity():
    """Face-on orbits keep their eccentricity; edge-on ones flatten to a line"""
    for e in (0.0, 0.3, 0.7):
        for w_deg in (0.0, 45.0, 120.0):
            e_app = binary.eccentricity_of_apparent_orbit(e, w_deg * DEG_TO_RAD, 0.0)
            assert_allclose(e_app, e, rtol=0, atol=1e-9)

    assert_allclose(binary.eccentricity_of_apparent_orbit(0.0, 0.0, math.pi / 2.0), 1.0)

    tilted = binary.eccentricity_of_apparent_orbit(0.2763, 212.007 * DEG_TO_RAD,
                                                    59.025 * DEG_TO_RAD)
    assert 0.0 < tilted < 1.0


def main():
    """Main test function"""
    print("\n" + "="*70)
    print(" TEST: astrocalc angle, ecliptic, earth, corrections, binary")
    print("="*70)

    test_angle_helpers()
    test_mean_obliquity()
    test_nutation()
    test_apparent_sidereal_from_jd()
    test_ellipsoid()
    test_geodesic_distance()
    test_observer_position()
    test_equation_of_time()
    test_diurnal_path()
    test_refraction()
    test_lunar_parallax()
    test_kepler_equation()
    test_circular_face_on_orbit()
    test_eta_coronae_borealis()
    test_apparent_orbit_eccentricity()

    print("\n" + "="*70)
    print(" All tests passed!")
    print("="*70 + "\n")


if __name__ == "__main__":
    main()
