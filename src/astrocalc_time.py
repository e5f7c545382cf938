"""
Time Conversion Module for astrocalc

This module provides calendar and time-scale calculations including:
- Civil date <-> Julian Day (Julian and Gregorian calendars)
- Weekday, leap year and decimal year
- Julian centuries/millennia and the Julian Ephemeris Day
- Delta T (TT - UT) approximation
- Mean and apparent sidereal time at Greenwich
"""

import math
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from astrocalc_angle import DEG_TO_RAD, limit_to_360
from astrocalc_config import Config

logger = logging.getLogger(__name__)


class CalendarConsistencyError(RuntimeError):
    """Date reconstruction produced a month or year outside its valid range."""


# ============================================================================
# Enumerations
# ============================================================================

class CalendarType(Enum):
    """Calendar a civil date is expressed in"""
    JULIAN = "julian"
    GREGORIAN = "gregorian"


class Month(Enum):
    """Months of the Julian and Gregorian calendars"""
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12

    @property
    def ordinal(self) -> int:
        """Month number, 1 for January through 12 for December"""
        return self.value

    @classmethod
    def from_ordinal(cls, number: int) -> "Month":
        return cls(number)


class Weekday(Enum):
    """Days of the week, numbered from Sunday"""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


# Days in each month of a common year
MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ============================================================================
# Data Classes
# ============================================================================

@dataclass
class DayOfMonth:
    """Day of a month with time of day and time zone"""
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0
    time_zone: float = 0.0  # decimal hours, e.g. -8.0 for Pacific


@dataclass(frozen=True)
class CivilDate:
    """
    Calendar date with the time of day folded into the day.

    decimal_day holds the day of the month plus the fraction of the day
    elapsed (UT), so 1999-01-01 18:00 UT is day 1.75. The calendar is part
    of the value and is never guessed from the date itself.
    """
    year: int
    month: Month
    decimal_day: float
    calendar: CalendarType = CalendarType.GREGORIAN

    @classmethod
    def from_components(cls, year: int, month: int, day: int,
                        hour: int = 0, minute: int = 0, second: float = 0.0,
                        time_zone: float = 0.0,
                        calendar: CalendarType = CalendarType.GREGORIAN) -> "CivilDate":
        """
        Build a CivilDate from separate date and time fields.

        Args:
            year: Year (astronomical numbering, 0 = 1 BC)
            month: Month (1-12)
            day: Day of month
            hour, minute, second: Local time of day
            time_zone: Time zone offset in hours (east positive)
            calendar: Calendar the date is written in

        Returns:
            CivilDate with the time converted to a UT decimal day
        """
        dom = DayOfMonth(day, hour, minute, second, time_zone)
        return cls(year, Month.from_ordinal(month), decimal_day(dom), calendar)


# ============================================================================
# Calendar Functions
# ============================================================================

def decimal_day(day: DayOfMonth) -> float:
    """
    Fold hours, minutes, seconds and time zone into a decimal day (UT).

    Args:
        day: DayOfMonth

    Returns:
        Decimal day of the month
    """
    return (day.day +
            day.hour / 24.0 +
            day.minute / 1440.0 +
            day.second / 86400.0 -
            day.time_zone / 24.0)


def is_leap_year(year: int, calendar: CalendarType) -> bool:
    """
    Check whether a year is a leap year.

    Args:
        year: Year
        calendar: Calendar whose rule applies

    Returns:
        True for a leap year
    """
    if calendar is CalendarType.JULIAN:
        return year % 4 == 0

    if year % 100 == 0:
        return year % 400 == 0
    return year % 4 == 0


def decimal_year(date: CivilDate) -> float:
    """
    Convert a date to a year with decimals.

    Args:
        date: CivilDate

    Returns:
        Year with decimals, e.g. 1987.45
    """
    leap = is_leap_year(date.year, date.calendar)
    days_in_year = 366.0 if leap else 365.0

    days_before = sum(MONTH_LENGTHS[:date.month.ordinal - 1])
    if leap and date.month.ordinal > 2:
        days_before += 1

    return date.year + (days_before + date.decimal_day) / days_in_year


def julian_day(date: CivilDate) -> float:
    """
    Calculate the Julian Day for a civil date.

    Args:
        date: CivilDate (either calendar)

    Returns:
        Julian Day
    """
    year = date.year
    month = date.month.ordinal

    # January and February count as months 13 and 14 of the previous year
    if month <= 2:
        year -= 1
        month += 12

    if date.calendar is CalendarType.GREGORIAN:
        a = math.floor(year / 100.0)
        b = 2 - a + math.floor(a / 4.0)
    else:
        b = 0

    return (math.floor(365.25 * (year + 4716)) +
            math.floor(30.6001 * (month + 1)) +
            date.decimal_day + b - 1524.5)


def date_from_julian_day(jd: float) -> Optional[CivilDate]:
    """
    Convert a Julian Day back to a civil date.

    Days from 1582-10-15 (JD 2299160.5) onwards come back in the Gregorian
    calendar, earlier days in the Julian calendar; the result's calendar
    field says which.

    Args:
        jd: Julian Day, must not be negative

    Returns:
        CivilDate, or None if jd is negative

    Raises:
        CalendarConsistencyError: if the algorithm yields an impossible
            month or year (a bug, never an input problem)
    """
    if jd < 0.0:
        logger.warning(f"Negative Julian Day {jd} cannot be converted to a date")
        return None

    jd += 0.5
    z = int(jd)
    f = jd - z

    if z < Config.GREGORIAN_REFORM_DAY:
        a = z
        calendar = CalendarType.JULIAN
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4.0)
        calendar = CalendarType.GREGORIAN

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = (b - d) - math.floor(30.6001 * e) + f

    if not 1 <= e <= 15:
        raise CalendarConsistencyError(
            f"Intermediate month term {e} out of range for JD {jd - 0.5}")

    month = e - 1 if e < 14 else e - 13
    if not 1 <= month <= 12:
        raise CalendarConsistencyError(
            f"Month {month} out of range for JD {jd - 0.5}")

    year = c - 4716 if month > 2 else c - 4715

    return CivilDate(year, Month.from_ordinal(month), day, calendar)


def weekday_from_date(date: CivilDate) -> Weekday:
    """
    Find the day of the week for a date.

    The time of day is dropped and the date is read as Gregorian.

    Args:
        date: CivilDate

    Returns:
        Weekday
    """
    date_0ut = CivilDate(date.year, date.month, math.floor(date.decimal_day),
                         CalendarType.GREGORIAN)
    jd = julian_day(date_0ut)

    return Weekday(math.floor(jd + 1.5) % 7)


# ============================================================================
# datetime Conversions
# ============================================================================

def julian_day_from_datetime(dt: datetime) -> float:
    """
    Calculate the Julian Day for a datetime.

    Naive datetimes are taken as UT; aware ones are converted to UTC first.

    Args:
        dt: datetime

    Returns:
        Julian Day
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)

    dom = DayOfMonth(dt.day, dt.hour, dt.minute,
                     dt.second + dt.microsecond / 1e6)
    return julian_day(CivilDate(dt.year, Month.from_ordinal(dt.month),
                                decimal_day(dom)))


def datetime_from_julian_day(jd: float) -> Optional[datetime]:
    """
    Convert a Julian Day to a naive UT datetime.

    Args:
        jd: Julian Day

    Returns:
        datetime, or None if jd is negative

    Raises:
        ValueError: if jd falls before the Gregorian reform, which datetime
            cannot represent faithfully
    """
    date = date_from_julian_day(jd)
    if date is None:
        return None

    if date.calendar is not CalendarType.GREGORIAN:
        raise ValueError(f"JD {jd} is a Julian calendar date")

    day_int = int(date.decimal_day)
    microseconds = round((date.decimal_day - day_int) * 86400.0 * 1e6)

    return (datetime(date.year, date.month.ordinal, day_int) +
            timedelta(microseconds=microseconds))


# ============================================================================
# Time Scales
# ============================================================================

def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0"""
    return (jd - Config.JD_EPOCH_2000) / Config.DAYS_PER_JULIAN_CENTURY


def julian_millennium(jd: float) -> float:
    """Julian millennia since J2000.0"""
    return (jd - Config.JD_EPOCH_2000) / Config.DAYS_PER_JULIAN_MILLENNIUM


def julian_ephemeris_day(jd: float, delta_t_seconds: float) -> float:
    """
    Convert a Julian Day (UT) to a Julian Ephemeris Day (TT).

    Args:
        jd: Julian Day
        delta_t_seconds: Delta T in seconds, see delta_t()

    Returns:
        Julian Ephemeris Day
    """
    return jd + delta_t_seconds / Config.SECONDS_PER_DAY


def delta_t(year: int, month: int) -> float:
    """
    Approximate Delta T (TT - UT) for a year and month.

    Uses the polynomial expressions of Espenak and Meeus published on the
    NASA eclipse web site, which cover -1999 to +3000. Each era has its own
    empirical fit; the values jump slightly where the fits meet.

    Args:
        year: Year
        month: Month (1-12)

    Returns:
        Delta T in seconds
    """
    y = year + (month - 0.5) / 12.0

    if y < -500.0:
        u = (y - 1820.0) / 100.0
        return -20.0 + 32.0 * u * u

    elif y < 500.0:
        u = y / 100.0
        return (10583.6 - 1014.41 * u + 33.78311 * u**2 - 5.952053 * u**3 -
                0.1798452 * u**4 + 0.022174192 * u**5 + 0.0090316521 * u**6)

    elif y < 1600.0:
        u = (y - 1000.0) / 100.0
        return (1574.2 - 556.01 * u + 71.23472 * u**2 + 0.319781 * u**3 -
                0.8503463 * u**4 - 0.005050998 * u**5 + 0.0083572073 * u**6)

    elif y < 1700.0:
        t = y - 1600.0
        return 120.0 - 0.9808 * t - 0.01532 * t**2 + t**3 / 7129.0

    elif y < 1800.0:
        t = y - 1700.0
        return (8.83 + 0.1603 * t - 0.0059285 * t**2 + 0.00013336 * t**3 -
                t**4 / 1174000.0)

    elif y < 1860.0:
        t = y - 1800.0
        return (13.72 - 0.332447 * t + 0.0068612 * t**2 + 0.0041116 * t**3 -
                0.00037436 * t**4 + 0.0000121272 * t**5 -
                0.0000001699 * t**6 + 0.000000000875 * t**7)

    elif y < 1900.0:
        t = y - 1860.0
        return (7.62 + 0.5737 * t - 0.251754 * t**2 + 0.01680668 * t**3 -
                0.0004473624 * t**4 + t**5 / 233174.0)

    elif y < 1920.0:
        t = y - 1900.0
        return (-2.79 + 1.494119 * t - 0.0598939 * t**2 + 0.0061966 * t**3 -
                0.000197 * t**4)

    elif y < 1941.0:
        t = y - 1920.0
        return 21.20 + 0.84493 * t - 0.076100 * t**2 + 0.0020936 * t**3

    elif y < 1961.0:
        t = y - 1950.0
        return 29.07 + 0.407 * t - t**2 / 233.0 + t**3 / 2547.0

    elif y < 1986.0:
        t = y - 1975.0
        return 45.45 + 1.067 * t - t**2 / 260.0 - t**3 / 718.0

    elif y < 2005.0:
        t = y - 2000.0
        return (63.86 + 0.3345 * t - 0.060374 * t**2 + 0.0017275 * t**3 +
                0.000651814 * t**4 + 0.00002373599 * t**5)

    elif y < 2050.0:
        t = y - 2000.0
        return 62.92 + 0.32217 * t + 0.005589 * t**2

    elif y <= 2150.0:
        u = (y - 1820.0) / 100.0
        return -20.0 + 32.0 * u * u - 0.5628 * (2150.0 - y)

    u = (y - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


# ============================================================================
# Sidereal Time
# ============================================================================

def mean_sidereal(jd: float) -> float:
    """
    Calculate Greenwich Mean Sidereal Time.

    Args:
        jd: Julian Day (UT)

    Returns:
        Mean sidereal time in radians, in [0, 2*pi)
    """
    t = julian_century(jd)

    theta = (280.46061837 +
             360.98564736629 * (jd - Config.JD_EPOCH_2000) +
             t * t * (0.000387933 - t / 38710000.0))

    return limit_to_360(theta) * DEG_TO_RAD


def apparent_sidereal(mean_sidereal_time: float, nutation_in_longitude: float,
                      true_obliquity: float) -> float:
    """
    Correct mean sidereal time for nutation.

    Args:
        mean_sidereal_time: Mean sidereal time (radians)
        nutation_in_longitude: Nutation in longitude (radians)
        true_obliquity: True obliquity of the ecliptic (radians)

    Returns:
        Apparent sidereal time in radians
    """
    return mean_sidereal_time + nutation_in_longitude * math.cos(true_obliquity)
