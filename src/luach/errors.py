"""Calendar error taxonomy. All conversion failures derive from CalendarError."""


class CalendarError(Exception):
    """Base class for calendar conversion failures."""


class InvalidDateError(CalendarError, ValueError):
    """Month or day outside the valid range for the resolved year."""


class YearOutOfRangeError(CalendarError, OverflowError):
    """Year or Julian day beyond the supported magnitude."""


class InvalidYearLengthError(CalendarError, ValueError):
    """Hebrew year length that no year can have."""


class SearchLimitError(CalendarError, RuntimeError):
    """Year bracketing did not converge within the configured step limit."""
