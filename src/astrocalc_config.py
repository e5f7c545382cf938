"""
Configuration constants for the astronomical calculation modules.

Everything here is a plain class attribute; nothing is read from disk or
the environment and nothing is mutated at run time.
"""


class Config:
    """Configuration constants for astrocalc"""

    # Epochs
    JD_EPOCH_2000 = 2451545.0  # JD for 2000-01-01 12:00 TT
    DAYS_PER_JULIAN_CENTURY = 36525.0
    DAYS_PER_JULIAN_MILLENNIUM = 365250.0
    SECONDS_PER_DAY = 86400.0

    # First day of the Gregorian calendar (1582-10-15), as an integer day
    # number after adding 0.5 to the JD
    GREGORIAN_REFORM_DAY = 2299161

    # Galactic frame, equinox B1950.0 (degrees)
    GALACTIC_POLE_RA = 192.25
    GALACTIC_POLE_DEC = 27.4
    GALACTIC_LONGITUDE_OFFSET = 303.0
    GALACTIC_NODE_LONGITUDE = 123.0
    GALACTIC_RA_OFFSET = 12.25

    # Earth model (WGS-84)
    EARTH_EQUATORIAL_RADIUS_KM = 6378.137
    EARTH_FLATTENING = 1.0 / 298.257223563
    EARTH_MEAN_RADIUS_KM = 6371.0
    EARTH_ROTATION_RATE = 0.00007292114992  # rad/s

    # Moon
    MOON_PARALLAX_RADIUS_KM = 6378.14
    MOON_EARTH_RADIUS_RATIO = 0.272481

    # Kepler equation solver
    KEPLER_TOLERANCE = 1e-12  # radians
    KEPLER_MAX_ITERATIONS = 50
