"""
Nepal fiscal year calculations.

Nepal's fiscal year runs from Shrawan 1 to the last day of Ashadh of the
following BS year (mid-July to mid-July).
"""
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import List, Optional

from django.utils import timezone

from .calendar_data import ASHADH, SHRAWAN
from .conf import get_setting
from .converter import BSDate, _coerce_ad_date, ad_to_bs, bs_to_ad, days_in_month
from .exceptions import InvalidFiscalYearError, InvalidRangeError


logger = logging.getLogger(__name__)


class Direction(str, Enum):
    PREVIOUS = 'previous'
    NEXT = 'next'

    @classmethod
    def _missing_(cls, value):
        if value == 'prev':
            return cls.PREVIOUS
        return None


@dataclass(frozen=True)
class FiscalYear:
    """A fiscal year from Shrawan 1 of one BS year to Ashadh-end of the next"""
    year: str
    start_date: date
    end_date: date
    start_date_bs: BSDate
    end_date_bs: BSDate

    @property
    def bs_start_year(self) -> int:
        return self.start_date_bs.year

    @property
    def bs_end_year(self) -> int:
        return self.end_date_bs.year

    @property
    def total_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    @property
    def english_label(self) -> str:
        """AD years spanned, e.g. '2024/25'"""
        ad_start_year = self.start_date.year
        ad_end_year = self.end_date.year
        if ad_start_year == ad_end_year:
            return str(ad_start_year)
        return f"{ad_start_year}/{str(ad_end_year)[-2:]}"

    def contains(self, value) -> bool:
        """Check if an AD date falls within this fiscal year"""
        value = _coerce_ad_date(value)
        return self.start_date <= value <= self.end_date

    def get_quarter(self, value) -> Optional[int]:
        """Get quarter (1-4) for a date within this fiscal year"""
        value = _coerce_ad_date(value)
        if not self.contains(value):
            return None

        days_elapsed = (value - self.start_date).days
        quarter = (days_elapsed // 91) + 1
        return min(quarter, 4)


@dataclass(frozen=True)
class FiscalYearProgress:
    days_remaining: int
    percent_complete: float


def fiscal_year_label(bs_year: int) -> str:
    """Fiscal year label, e.g. 2081 -> '2081/82'"""
    return f"{bs_year}/{str(bs_year + 1)[-2:]}"


def parse_fiscal_year_label(label: str) -> int:
    """
    Get the starting BS year from a label like '2081/82'

    Raises:
        InvalidFiscalYearError: if the label is malformed
    """
    try:
        start, end = label.split('/')
        start_year = int(start)
        int(end)
    except (AttributeError, ValueError):
        raise InvalidFiscalYearError(f"Invalid fiscal year label: {label!r}") from None

    if fiscal_year_label(start_year) != f"{start_year}/{end.strip()[-2:]}":
        raise InvalidFiscalYearError(
            f"Invalid fiscal year label: {label!r}. Expected {fiscal_year_label(start_year)!r}"
        )
    return start_year


def get_fiscal_year_details(bs_year: int) -> FiscalYear:
    """
    Build the fiscal year that starts on Shrawan 1 of ``bs_year``

    Raises:
        OutOfRangeError: if bs_year or bs_year + 1 is not in the month-length table
    """
    end_year = bs_year + 1
    start_date_bs = BSDate(bs_year, SHRAWAN, 1)
    end_date_bs = BSDate(end_year, ASHADH, days_in_month(end_year, ASHADH))

    return FiscalYear(
        year=fiscal_year_label(bs_year),
        start_date=bs_to_ad(start_date_bs),
        end_date=bs_to_ad(end_date_bs),
        start_date_bs=start_date_bs,
        end_date_bs=end_date_bs,
    )


def _fiscal_start_year(bs_date: BSDate) -> int:
    # Baisakh to Ashadh belong to the fiscal year that began the previous Shrawan
    if bs_date.month >= SHRAWAN:
        return bs_date.year
    return bs_date.year - 1


def get_fiscal_year_for_date(value) -> FiscalYear:
    """
    Get the fiscal year containing a date

    Args:
        value: BSDate, or an AD date/datetime/'YYYY-MM-DD' string
    """
    bs_date = value if isinstance(value, BSDate) else ad_to_bs(value)
    return get_fiscal_year_details(_fiscal_start_year(bs_date))


def get_current_fiscal_year(today=None) -> str:
    """Get current fiscal year label based on today's date"""
    return get_current_fiscal_year_details(today).year


def get_current_fiscal_year_details(today=None) -> FiscalYear:
    if today is None:
        today = timezone.localdate()
    return get_fiscal_year_for_date(today)


def get_fiscal_year_range(start_year: Optional[int] = None,
                          end_year: Optional[int] = None) -> List[FiscalYear]:
    """
    Get all fiscal years whose start year is in [start_year, end_year]

    Missing bounds come from the FISCAL_YEAR_RANGE setting.

    Raises:
        InvalidRangeError: if start_year > end_year
        OutOfRangeError: if any year in the range is not supported
    """
    default_start, default_end = get_setting('FISCAL_YEAR_RANGE')
    if start_year is None:
        start_year = default_start
    if end_year is None:
        end_year = default_end

    if start_year > end_year:
        raise InvalidRangeError(
            f"Fiscal year range {start_year}-{end_year} ends before it starts"
        )

    logger.debug("Building fiscal years %s to %s", start_year, end_year)
    return [get_fiscal_year_details(year) for year in range(start_year, end_year + 1)]


def progress(fiscal_year: FiscalYear, as_of=None) -> FiscalYearProgress:
    """
    Days remaining and percentage elapsed of a fiscal year

    Args:
        fiscal_year: FiscalYear
        as_of: date, datetime or 'YYYY-MM-DD', defaults to today; aware
            datetimes are read in the local zone and partial days count
            as a whole remaining day
    """
    if as_of is None:
        as_of = timezone.localdate()

    if isinstance(as_of, datetime):
        if timezone.is_aware(as_of):
            as_of = timezone.localtime(as_of)
        end = datetime.combine(fiscal_year.end_date, time.min, tzinfo=as_of.tzinfo)
        remaining = math.ceil((end - as_of).total_seconds() / 86400)
    else:
        remaining = (fiscal_year.end_date - _coerce_ad_date(as_of)).days
    days_remaining = max(0, remaining)

    span = (fiscal_year.end_date - fiscal_year.start_date).days
    percent = ((span - days_remaining) / span) * 100
    percent_complete = max(0.0, min(100.0, percent))

    return FiscalYearProgress(days_remaining=days_remaining, percent_complete=percent_complete)


def navigate(fiscal_year: FiscalYear, direction) -> FiscalYear:
    """Get the previous or next fiscal year"""
    direction = Direction(direction)
    bs_year = parse_fiscal_year_label(fiscal_year.year)
    step = 1 if direction is Direction.NEXT else -1
    return get_fiscal_year_details(bs_year + step)
