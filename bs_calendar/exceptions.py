"""
Exceptions raised by the Bikram Sambat calendar engine.
"""


class CalendarError(ValueError):
    """Base exception for calendar conversion and fiscal year errors."""
    pass


class OutOfRangeError(CalendarError):
    """Raised when a BS year or month falls outside the month-length table."""
    pass


class InvalidDateError(CalendarError):
    """Raised when a BS date does not exist in the month-length table."""
    pass


class InvalidRangeError(CalendarError):
    """Raised when a range ends before it starts."""
    pass


class InvalidFiscalYearError(CalendarError):
    """Raised when a fiscal year label cannot be parsed."""
    pass


class UnsupportedLocaleError(CalendarError):
    """Raised when formatting is requested for an unknown locale."""
    pass
