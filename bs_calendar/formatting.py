"""
Display helpers for BS dates and fiscal years.

The converter and fiscal year calculator return structured values; these
helpers turn them into text for a given locale ('en' or 'ne').
"""
from .conf import SUPPORTED_LOCALES, get_setting
from .converter import ad_to_bs, month_name
from .exceptions import UnsupportedLocaleError


NEPALI_DIGITS = str.maketrans('0123456789', '०१२३४५६७८९')


def _resolve_locale(locale):
    if locale is None:
        locale = get_setting('DEFAULT_LOCALE')
    if locale not in SUPPORTED_LOCALES:
        raise UnsupportedLocaleError(
            f"Unsupported locale: {locale!r}. Supported: {', '.join(SUPPORTED_LOCALES)}"
        )
    return locale


def to_nepali_digits(value) -> str:
    """Render digits in Devanagari, e.g. 2081 -> '२०८१'"""
    return str(value).translate(NEPALI_DIGITS)


def format_bs_date(bs_date, format='full', locale=None) -> str:
    """
    Format BS date in different styles

    Args:
        bs_date: BSDate
        format: 'full', 'short', 'long', 'numeric'
        locale: 'en' or 'ne', defaults to the DEFAULT_LOCALE setting

    Returns:
        Formatted date string
    """
    locale = _resolve_locale(locale)
    name = month_name(bs_date.month, locale)
    year, month, day = bs_date.year, bs_date.month, bs_date.day

    if format == 'full':
        text = f"{name} {day}, {year}"
    elif format == 'short':
        # Devanagari names are not abbreviated
        short_name = name[:3] if locale == 'en' else name
        text = f"{short_name} {day}, {year}"
    elif format == 'long':
        text = f"{day} {name}, {year}"
    elif format == 'numeric':
        text = f"{year}/{month:02d}/{day:02d}"
    else:
        text = f"{year}/{month}/{day}"

    if locale == 'ne':
        return to_nepali_digits(text)
    return text


def format_ad_as_bs(ad_date, format='full', locale=None) -> str:
    return format_bs_date(ad_to_bs(ad_date), format=format, locale=locale)


def format_fiscal_year(fiscal_year, locale=None) -> str:
    locale = _resolve_locale(locale)
    if locale == 'ne':
        return f"आ.व. {to_nepali_digits(fiscal_year.year)}"
    return f"FY {fiscal_year.year}"


def format_fiscal_year_period(fiscal_year, locale=None) -> str:
    """e.g. 'Shrawan 1, 2081 - Ashadh 32, 2082'"""
    start = format_bs_date(fiscal_year.start_date_bs, 'full', locale)
    end = format_bs_date(fiscal_year.end_date_bs, 'full', locale)
    return f"{start} - {end}"
