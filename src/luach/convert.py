"""Public conversion functions. Julian day numbers are the common interchange value."""

import datetime

from luach import gregorian, hebrew, hebrew_year
from luach.models import GregorianDate, HebrewDate


def gregorian_to_jdn(day: int, month: int, year: int) -> int:
    return gregorian.to_jdn(day, month, year)


def jdn_to_gregorian(jdn: int) -> GregorianDate:
    return gregorian.from_jdn(jdn)


def hebrew_is_leap_year(year: int) -> bool:
    return hebrew_year.is_leap_year(year)


def hebrew_rosh_hashanah(year: int) -> int:
    return hebrew_year.rosh_hashanah(year)


def hebrew_to_jdn(day: int, month: int, year: int) -> int:
    return hebrew.to_jdn(day, month, year)


def jdn_to_hebrew(jdn: int) -> HebrewDate:
    return hebrew.from_jdn(jdn)


def gregorian_to_hebrew(day: int, month: int, year: int) -> HebrewDate:
    """Hebrew date falling on the given Gregorian date.

    Raises:
        InvalidDateError: If the Gregorian date is invalid or precedes the
            Hebrew epoch (7 September 3761 BCE).
    """
    return hebrew.from_jdn(gregorian.to_jdn(day, month, year))


def hebrew_to_gregorian(day: int, month: int, year: int) -> GregorianDate:
    return gregorian.from_jdn(hebrew.to_jdn(day, month, year))


def date_to_hebrew(value: datetime.date) -> HebrewDate:
    """Hebrew date for a standard library ``date``.

    The Hebrew day begins at the preceding sunset; this returns the date of
    the afternoon of ``value``.
    """
    return hebrew.from_jdn(gregorian.from_date(value))
