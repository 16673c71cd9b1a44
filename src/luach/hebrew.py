"""Hebrew date ↔ Julian day number.

Months are numbered from Tishrei: 1 Tishrei, 2 Heshvan, 3 Kislev, 4 Tevet,
5 Shevat, 6 Adar (Adar II in leap years), 7 Nisan ... 12 Elul. In leap years
month 13 is Adar I, which falls between Shevat and Adar II.
"""

import logging
from collections.abc import Iterator

from luach.arith import floor_divmod
from luach.config import get_settings
from luach.errors import InvalidDateError, SearchLimitError
from luach.hebrew_year import (
    EPOCH,
    LUNATION_PARTS,
    MONTHS_PER_CYCLE,
    PARTS_PER_DAY,
    check_year,
    classify_year_length,
    rosh_hashanah,
    weekday,
    year_bounds,
    year_descriptor,
    year_start,
)
from luach.models import HebrewDate, YearCharacter, YearDescriptor, YearKind

logger = logging.getLogger(__name__)

#               Tis Hes Kis Tev She Ada Nis Iya Siv Tam Av  Elu
_BASE_MONTHS = (30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29)

ADAR_I = 13
ADAR_I_LENGTH = 30
_SLOW_SEARCH_STEPS = 4


def month_lengths(descriptor: YearDescriptor) -> tuple[int, ...]:
    """Days in months 1..12 for a year of the given kind. Adar I is not included."""
    lengths = list(_BASE_MONTHS)
    if descriptor.kind is YearKind.DEFICIENT:
        lengths[2] = 29
    elif descriptor.kind is YearKind.COMPLETE:
        lengths[1] = 30
    return tuple(lengths)


def _month_length(month: int, year: int, descriptor: YearDescriptor) -> int:
    if month == ADAR_I:
        if not descriptor.leap:
            raise InvalidDateError(f"Year {year} is not a leap year; it has no Adar I")
        return ADAR_I_LENGTH
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Hebrew month {month} not in 1..13")
    return month_lengths(descriptor)[month - 1]


def _check_positive_year(year: int) -> None:
    if year < 1:
        raise InvalidDateError(f"Hebrew year {year} precedes year 1")


def days_in_month(month: int, year: int) -> int:
    _check_positive_year(year)
    return _month_length(month, year, year_descriptor(year))


def to_jdn(day: int, month: int, year: int) -> int:
    """Translate a Hebrew date to a Julian day number.

    Args:
        day: Day of month, 1-based.
        month: 1..12, or 13 for Adar I in a leap year.
        year: Hebrew year, >= 1.

    Returns:
        Julian day number of the date.

    Raises:
        InvalidDateError: If the year, month or day is out of range.
        YearOutOfRangeError: If the year exceeds the configured limit.
    """
    _check_positive_year(year)
    start, end = year_bounds(year)
    descriptor = classify_year_length(end - start)
    length = _month_length(month, year, descriptor)
    if not 1 <= day <= length:
        raise InvalidDateError(
            f"Day {day} not in 1..{length} for month {month} of {year}"
        )

    months = month_lengths(descriptor)
    jdn = start
    if descriptor.leap and month > 5:
        if month == ADAR_I:
            if day == ADAR_I_LENGTH:
                return start + 176 + descriptor.kind.offset
            # Adar I occupies the slot Adar has in a common year.
            month = 6
        else:
            jdn += ADAR_I_LENGTH

    jdn += sum(months[: month - 1])
    return jdn + day - 1


def _estimate_year(jdn: int) -> int:
    # Whole mean lunations since the epoch, then whole 19-year cycles.
    months = (jdn - EPOCH) * PARTS_PER_DAY // LUNATION_PARTS
    cycles, cycle_months = floor_divmod(months, MONTHS_PER_CYCLE)
    return cycles * 19 + cycle_months * 19 // MONTHS_PER_CYCLE + 1


def _brackets(year: int, jdn: int) -> Iterator[tuple[int, int, int]]:
    """Yield ``(year, start, end)`` year spans, walking from ``year`` toward ``jdn``."""
    start = year_start(year)
    if start > jdn:
        while True:
            end = start
            year -= 1
            start = year_start(year)
            yield year, start, end
    end = year_start(year + 1)
    yield year, start, end
    while True:
        year += 1
        start, end = end, year_start(year + 1)
        yield year, start, end


def _find_year(jdn: int) -> tuple[int, int, int]:
    estimate = _estimate_year(jdn)
    limit = get_settings().max_search_steps
    for steps, (year, start, end) in enumerate(_brackets(estimate, jdn), start=1):
        if start <= jdn < end:
            if steps > _SLOW_SEARCH_STEPS:
                logger.warning(
                    "Year search for day %d took %d steps from %d",
                    jdn,
                    steps,
                    estimate,
                )
            logger.debug("Day %d is in year %d (estimated %d)", jdn, year, estimate)
            check_year(year)
            return year, start, end
        if steps >= limit:
            break
    raise SearchLimitError(
        f"Could not bracket day {jdn} within {limit} years of year {estimate}"
    )


def from_jdn(jdn: int) -> HebrewDate:
    """Translate a Julian day number to a Hebrew date. Inverts ``to_jdn``.

    Raises:
        InvalidDateError: If the day precedes 1 Tishrei of year 1.
        YearOutOfRangeError: If the year exceeds the configured limit.
        SearchLimitError: If the year could not be bracketed.
    """
    if jdn < EPOCH:
        raise InvalidDateError(f"Julian day {jdn} precedes the Hebrew epoch")
    year, start, end = _find_year(jdn)
    descriptor = classify_year_length(end - start)
    day = jdn - start

    if descriptor.leap:
        offset = descriptor.kind.offset
        if day >= 177 + offset:
            day -= ADAR_I_LENGTH
        elif day >= 147 + offset:
            return HebrewDate(day=day - 146 - offset, month=ADAR_I, year=year)

    month = 1
    for length in month_lengths(descriptor):
        if day < length:
            break
        day -= length
        month += 1
    return HebrewDate(day=day + 1, month=month, year=year)


def year_character(year: int) -> YearCharacter:
    """Weekday of Rosh Hashanah, year kind, and weekday of 15 Nisan."""
    _check_positive_year(year)
    descriptor = year_descriptor(year)
    return YearCharacter(
        rosh_hashanah=weekday(rosh_hashanah(year)),
        kind=descriptor.kind,
        pesach=weekday(to_jdn(15, 7, year)),
        leap=descriptor.leap,
    )
