"""
Bikram Sambat calendar - date conversion and fiscal year utilities for Nepal
"""

__version__ = '1.0.0'

# Import commonly used functions for easy access
from .converter import (
    BSDate,
    ad_to_bs,
    bs_to_ad,
    days_in_month,
    is_valid_bs_date,
    month_name,
    supported_ad_range,
    today_bs,
)
from .exceptions import (
    CalendarError,
    InvalidDateError,
    InvalidRangeError,
    OutOfRangeError,
)
from .fiscal_year import (
    Direction,
    FiscalYear,
    FiscalYearProgress,
    get_current_fiscal_year,
    get_fiscal_year_details,
    get_fiscal_year_for_date,
    get_fiscal_year_range,
    navigate,
    progress,
)

__all__ = [
    'BSDate',
    'ad_to_bs',
    'bs_to_ad',
    'days_in_month',
    'is_valid_bs_date',
    'month_name',
    'supported_ad_range',
    'today_bs',
    'CalendarError',
    'InvalidDateError',
    'InvalidRangeError',
    'OutOfRangeError',
    'Direction',
    'FiscalYear',
    'FiscalYearProgress',
    'get_current_fiscal_year',
    'get_fiscal_year_details',
    'get_fiscal_year_for_date',
    'get_fiscal_year_range',
    'navigate',
    'progress',
]
