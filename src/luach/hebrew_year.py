"""Hebrew year model — leap cycle, mean new moon (molad), and Rosh Hashanah.

The Hebrew calendar fits lunar months into solar years by scheduling seven
leap months in a 19-year cycle. A second adjustment of up to two days is made
to each year, determined by the calculated time of the new moon that begins
the year.

Time of day is counted in parts: 1080 parts per hour, 25920 per day. The mean
lunation is 29 days 12 hours 793 parts. The first new moon fell 5604 parts
into Julian day 347998, a Monday. A Hebrew date is identified with the Julian
day containing the same afternoon.
"""

from functools import lru_cache

from luach.arith import floor_divmod
from luach.config import get_settings
from luach.errors import InvalidYearLengthError, YearOutOfRangeError
from luach.models import MoladMoment, Weekday, YearDescriptor, YearKind

EPOCH = 347998  # Julian day of 1 Tishrei, year 1
PARTS_PER_HOUR = 1080
PARTS_PER_DAY = 24 * PARTS_PER_HOUR
LUNATION_PARTS = 29 * PARTS_PER_DAY + 12 * PARTS_PER_HOUR + 793
FIRST_MOLAD_PARTS = 5604
MONTHS_PER_CYCLE = 235  # 19 years * 12 months + 7 leap months

_LEAP_RESIDUES = frozenset({0, 3, 6, 8, 11, 14, 17})

# Postponement thresholds, in parts after the start of the day.
_NOON = 18 * PARTS_PER_HOUR
_TUESDAY_LIMIT = 9 * PARTS_PER_HOUR + 204
_MONDAY_LIMIT = 15 * PARTS_PER_HOUR + 589

_LO_ADU = frozenset({Weekday.SUNDAY, Weekday.WEDNESDAY, Weekday.FRIDAY})

_BASE_LENGTHS = {False: 353, True: 383}


def check_year(year: int) -> None:
    """Raise YearOutOfRangeError if |year| exceeds the configured limit."""
    limit = get_settings().max_abs_year
    if abs(year) > limit:
        raise YearOutOfRangeError(f"Hebrew year {year} outside ±{limit}")


def weekday(jdn: int) -> Weekday:
    """Day of the week of a Julian day."""
    return Weekday.of(jdn)


def is_leap_year(year: int) -> bool:
    """True if ``year`` has 13 months (positions 3, 6, 8, 11, 14, 17, 19 of the cycle)."""
    return year % 19 in _LEAP_RESIDUES


def months_before_year(year: int) -> int:
    """Number of months from the epoch to the start of ``year``."""
    cycles, cycle_year = floor_divmod(year - 1, 19)
    # Leap years among positions 1..cycle_year of the current cycle.
    if cycle_year <= 7:
        leaps = cycle_year // 3
    else:
        leaps = (cycle_year + 1) // 3
    return cycles * MONTHS_PER_CYCLE + cycle_year * 12 + leaps


def molad_of_month(months_elapsed: int) -> MoladMoment:
    """Mean new moon beginning the month ``months_elapsed`` months after the epoch."""
    day, parts = floor_divmod(
        months_elapsed * LUNATION_PARTS + FIRST_MOLAD_PARTS, PARTS_PER_DAY
    )
    return MoladMoment(day=EPOCH + day, parts=parts)


def molad(year: int) -> MoladMoment:
    """Mean new moon beginning Tishrei of ``year``."""
    check_year(year)
    return molad_of_month(months_before_year(year))


@lru_cache(maxsize=4096)
def year_start(year: int) -> int:
    """Julian day of 1 Tishrei of ``year``, without the range check.

    Starts from the molad of Tishrei and applies the postponement rules. Only
    the first matching rule is applied.
    """
    moment = molad_of_month(months_before_year(year))
    day = moment.day
    dow = moment.weekday

    if dow in _LO_ADU:
        # Keeps Yom Kippur off Friday and Sunday, Hoshana Rabbah off Shabbat.
        day += 1
    elif moment.parts >= _NOON:
        day += 1
        if weekday(day) in _LO_ADU:
            day += 1
    elif (
        dow == Weekday.TUESDAY
        and moment.parts >= _TUESDAY_LIMIT
        and not is_leap_year(year)
    ):
        # Otherwise this common year would run to 356 days.
        day += 2
    elif (
        dow == Weekday.MONDAY
        and moment.parts >= _MONDAY_LIMIT
        and is_leap_year(year - 1)
    ):
        # Otherwise the preceding leap year would be only 382 days.
        day += 1
    return day


def rosh_hashanah(year: int) -> int:
    """Julian day of 1 Tishrei of ``year``.

    Raises:
        YearOutOfRangeError: If |year| exceeds the configured limit.
    """
    check_year(year)
    return year_start(year)


def year_bounds(year: int) -> tuple[int, int]:
    """First day of ``year`` and of the year after it.

    Only ``year`` itself is range checked.
    """
    check_year(year)
    return year_start(year), year_start(year + 1)


def classify_year_length(length: int) -> YearDescriptor:
    """Describe a year from its length in days.

    Raises:
        InvalidYearLengthError: If length is not one of 353-355 or 383-385.
    """
    leap = length > 355
    offset = length - _BASE_LENGTHS[leap]
    if not 0 <= offset <= 2:
        raise InvalidYearLengthError(f"No Hebrew year is {length} days long")
    return YearDescriptor(leap=leap, kind=YearKind(offset - 1))


def year_length(year: int) -> int:
    start, end = year_bounds(year)
    return end - start


def year_descriptor(year: int) -> YearDescriptor:
    return classify_year_length(year_length(year))
