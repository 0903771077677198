"""
Conversion between Bikram Sambat (BS) and Anno Domini (AD) dates.

Both directions go through a day number counted from the first day of the
month-length table, anchored to the AD calendar by the reference epoch.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Tuple

from django.utils import timezone

from .calendar_data import (
    EPOCH_AD,
    EPOCH_BS,
    MAX_BS_YEAR,
    MIN_BS_YEAR,
    NEPALI_CALENDAR_DATA,
    NEPALI_MONTHS,
    NEPALI_MONTHS_NE,
    TOTAL_DAYS,
    YEAR_LENGTHS,
    YEAR_START_OFFSETS,
)
from .exceptions import InvalidDateError, OutOfRangeError, UnsupportedLocaleError


def _supported_years():
    return f"Supported years: {MIN_BS_YEAR}-{MAX_BS_YEAR}"


def days_in_month(bs_year: int, bs_month: int) -> int:
    """
    Number of days in a BS month, straight from the month-length table

    Raises:
        OutOfRangeError: if the year is not in the table or month is not 1-12
    """
    if bs_year not in NEPALI_CALENDAR_DATA:
        raise OutOfRangeError(f"BS year {bs_year} is not supported. {_supported_years()}")
    if not 1 <= bs_month <= 12:
        raise OutOfRangeError(f"Invalid month: {bs_month}")
    return NEPALI_CALENDAR_DATA[bs_year][bs_month - 1]


def days_in_year(bs_year: int) -> int:
    if bs_year not in NEPALI_CALENDAR_DATA:
        raise OutOfRangeError(f"BS year {bs_year} is not supported. {_supported_years()}")
    return YEAR_LENGTHS[bs_year]


def month_name(month_index: int, locale: str = 'en') -> str:
    """Get the BS month name for a month number (1-12)"""
    if not 1 <= month_index <= 12:
        raise OutOfRangeError(f"Invalid month: {month_index}")
    if locale == 'en':
        return NEPALI_MONTHS[month_index - 1]
    if locale == 'ne':
        return NEPALI_MONTHS_NE[month_index - 1]
    raise UnsupportedLocaleError(f"Unsupported locale: {locale!r}")


def is_valid_bs_date(year: int, month: int, day: int) -> bool:
    """Validate if a BS date exists in the month-length table"""
    if year not in NEPALI_CALENDAR_DATA:
        return False
    if month < 1 or month > 12:
        return False
    if day < 1 or day > NEPALI_CALENDAR_DATA[year][month - 1]:
        return False
    return True


def supported_bs_years() -> range:
    return range(MIN_BS_YEAR, MAX_BS_YEAR + 1)


@dataclass(frozen=True, order=True)
class BSDate:
    """
    A date in the Bikram Sambat calendar.

    Instances are validated against the month-length table on construction
    and compare by (year, month, day).
    """
    year: int
    month: int
    day: int
    month_name: str = field(init=False, compare=False)

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidDateError(
                f"Invalid Nepali date: {self.year}/{self.month}/{self.day}. "
                f"Month must be between 1 and 12"
            )
        limit = days_in_month(self.year, self.month)
        if not 1 <= self.day <= limit:
            raise InvalidDateError(
                f"Invalid Nepali date: {self.year}/{self.month}/{self.day}. "
                f"{NEPALI_MONTHS[self.month - 1]} {self.year} has {limit} days"
            )
        object.__setattr__(self, 'month_name', NEPALI_MONTHS[self.month - 1])

    def __str__(self):
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @classmethod
    def parse(cls, value: str) -> 'BSDate':
        """Parse 'YYYY-MM-DD' or 'YYYY/MM/DD'"""
        parts = value.strip().replace('/', '-').split('-')
        try:
            year, month, day = (int(part) for part in parts)
        except ValueError:
            raise InvalidDateError(f"Cannot parse BS date: {value!r}") from None
        return cls(year, month, day)

    def as_dict(self) -> dict:
        return {
            'year': self.year,
            'month': self.month,
            'day': self.day,
            'month_name': self.month_name,
        }

    def to_ad(self) -> date:
        return bs_to_ad(self)


def _bs_day_number(year: int, month: int, day: int) -> int:
    """Days elapsed from MIN_BS_YEAR/01/01 to the given (valid) BS date"""
    days = YEAR_START_OFFSETS[year]
    days += sum(NEPALI_CALENDAR_DATA[year][:month - 1])
    return days + day - 1


_EPOCH_DAY_NUMBER = _bs_day_number(*EPOCH_BS)


def _coerce_bs_date(value) -> BSDate:
    if isinstance(value, BSDate):
        return value
    if isinstance(value, dict):
        return BSDate(value['year'], value['month'], value['day'])
    if isinstance(value, (tuple, list)) and len(value) == 3:
        return BSDate(*value)
    if isinstance(value, str):
        return BSDate.parse(value)
    raise TypeError(f"Expected a BSDate or (year, month, day), got {type(value).__name__}")


def _coerce_ad_date(value) -> date:
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            return timezone.localtime(value).date()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value, '%Y-%m-%d').date()
        except ValueError:
            raise InvalidDateError(f"Cannot parse AD date: {value!r}") from None
    raise TypeError(f"Expected a date, datetime or 'YYYY-MM-DD', got {type(value).__name__}")


def bs_to_ad(bs_date) -> date:
    """
    Convert Bikram Sambat (BS) date to Anno Domini (AD) date

    Args:
        bs_date: BSDate, (year, month, day) tuple, dict or 'YYYY-MM-DD' string

    Returns:
        date object representing the AD date

    Raises:
        InvalidDateError: If the day or month does not exist in that BS year
        OutOfRangeError: If the year is not in the month-length table
    """
    bs_date = _coerce_bs_date(bs_date)
    offset = _bs_day_number(bs_date.year, bs_date.month, bs_date.day) - _EPOCH_DAY_NUMBER
    return EPOCH_AD + timedelta(days=offset)


def ad_to_bs(ad_date) -> BSDate:
    """
    Convert Anno Domini (AD) date to Bikram Sambat (BS) date

    Args:
        ad_date: date, datetime (aware values are read in the local zone)
            or 'YYYY-MM-DD' string

    Returns:
        BSDate

    Raises:
        OutOfRangeError: If the date falls outside the month-length table
    """
    ad_date = _coerce_ad_date(ad_date)
    day_number = _EPOCH_DAY_NUMBER + (ad_date - EPOCH_AD).days

    if not 0 <= day_number < TOTAL_DAYS:
        raise OutOfRangeError(
            f"{ad_date.isoformat()} is outside the supported range "
            f"{MIN_AD_DATE.isoformat()} to {MAX_AD_DATE.isoformat()}"
        )

    # Find the year
    year = MIN_BS_YEAR
    remaining = day_number
    while remaining >= YEAR_LENGTHS[year]:
        remaining -= YEAR_LENGTHS[year]
        year += 1

    # Find the month
    month = 1
    for length in NEPALI_CALENDAR_DATA[year]:
        if remaining < length:
            break
        remaining -= length
        month += 1

    return BSDate(year, month, remaining + 1)


def today_bs() -> BSDate:
    """Today's date in BS, using the configured time zone"""
    return ad_to_bs(timezone.localdate())


MIN_AD_DATE = bs_to_ad((MIN_BS_YEAR, 1, 1))
MAX_AD_DATE = bs_to_ad((MAX_BS_YEAR, 12, days_in_month(MAX_BS_YEAR, 12)))


def supported_ad_range() -> Tuple[date, date]:
    return MIN_AD_DATE, MAX_AD_DATE
