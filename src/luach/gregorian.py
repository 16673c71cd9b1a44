"""Proleptic Gregorian calendar ↔ Julian day number.

Years use astronomical numbering (0 is 1 BCE). The conversion decomposes the
year into 400-year eras, 100-year centuries and 4-year olympiads, so it is
closed-form in both directions.
"""

import datetime

from luach.arith import floor_divmod
from luach.config import get_settings
from luach.errors import InvalidDateError, YearOutOfRangeError
from luach.models import GregorianDate

EPOCH = 1721426  # Julian day of Gregorian 1 January 1 CE
_ORDINAL_OFFSET = EPOCH - 1  # datetime.date ordinal 1 is 1 January 1 CE

_ERA_DAYS = 146097
_CENTURY_DAYS = 36524
_OLYMPIAD_DAYS = 1461

#          Jan Feb Mar Apr May Jun Jul Aug Sep Oct Nov Dec
_MONTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _check_year(year: int) -> None:
    limit = get_settings().max_abs_year
    if abs(year) > limit:
        raise YearOutOfRangeError(f"Gregorian year {year} outside ±{limit}")


def _has_leap_day(century: int, olympiad: int, year: int) -> bool:
    # The last year of every olympiad is leap, except at the end of a
    # century that does not also close an era.
    return year == 3 and (olympiad != 24 or century == 3)


def _with_february(leap: bool) -> tuple[int, ...]:
    return _MONTHS[:1] + (29 if leap else 28,) + _MONTHS[2:]


def _decompose(year: int) -> tuple[int, int, int, int]:
    """Split ``year - 1`` into (era, century, olympiad, year-in-olympiad)."""
    era, rest = floor_divmod(year - 1, 400)
    century, rest = divmod(rest, 100)
    olympiad, rest = divmod(rest, 4)
    return era, century, olympiad, rest


def is_leap_year(year: int) -> bool:
    _, century, olympiad, rest = _decompose(year)
    return _has_leap_day(century, olympiad, rest)


def month_lengths(year: int) -> tuple[int, ...]:
    """Days in each month of ``year``, January first. A new tuple on every call."""
    return _with_february(is_leap_year(year))


def days_in_month(month: int, year: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Gregorian month {month} not in 1..12")
    return month_lengths(year)[month - 1]


def to_jdn(day: int, month: int, year: int) -> int:
    """Translate a Gregorian date to a Julian day number.

    Args:
        day: Day of month, 1-based.
        month: Month, 1..12.
        year: Astronomical year (0 = 1 BCE, -1 = 2 BCE).

    Returns:
        Julian day number of the date.

    Raises:
        InvalidDateError: If month or day is out of range.
        YearOutOfRangeError: If |year| exceeds the configured limit.
    """
    _check_year(year)
    era, century, olympiad, rest = _decompose(year)
    months = _with_february(_has_leap_day(century, olympiad, rest))
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Gregorian month {month} not in 1..12")
    if not 1 <= day <= months[month - 1]:
        raise InvalidDateError(
            f"Day {day} not in 1..{months[month - 1]} for {year}-{month:02d}"
        )

    jdn = EPOCH
    jdn += era * _ERA_DAYS + century * _CENTURY_DAYS + olympiad * _OLYMPIAD_DAYS
    jdn += rest * 365
    jdn += sum(months[: month - 1])
    return jdn + day - 1


def from_jdn(jdn: int) -> GregorianDate:
    """Translate a Julian day number to a Gregorian date. Inverts ``to_jdn``.

    Raises:
        YearOutOfRangeError: If the resulting year exceeds the configured limit.
    """
    era, day = floor_divmod(jdn - EPOCH, _ERA_DAYS)

    # The final day of an era is the leap day closing its fourth century.
    if day == _ERA_DAYS - 1:
        century, day = 3, _CENTURY_DAYS
    else:
        century, day = divmod(day, _CENTURY_DAYS)

    olympiad, day = divmod(day, _OLYMPIAD_DAYS)

    if day == _OLYMPIAD_DAYS - 1:
        year, day = 3, 365
    else:
        year, day = divmod(day, 365)

    month = 1
    for length in _with_february(_has_leap_day(century, olympiad, year)):
        if day < length:
            break
        day -= length
        month += 1

    year += 1 + 4 * olympiad + 100 * century + 400 * era
    _check_year(year)
    return GregorianDate(day=day + 1, month=month, year=year)


def from_date(value: datetime.date) -> int:
    """Julian day number of a standard library ``date``."""
    return value.toordinal() + _ORDINAL_OFFSET


def to_date(jdn: int) -> datetime.date:
    """Standard library ``date`` for a Julian day number (years 1..9999 only).

    Raises:
        YearOutOfRangeError: If the day falls outside ``datetime.date``'s range.
    """
    ordinal = jdn - _ORDINAL_OFFSET
    if not 1 <= ordinal <= datetime.date.max.toordinal():
        raise YearOutOfRangeError(f"Julian day {jdn} outside datetime.date range")
    return datetime.date.fromordinal(ordinal)
