import logging

from django import template

from bs_calendar.exceptions import CalendarError
from bs_calendar.fiscal_year import get_fiscal_year_for_date
from bs_calendar.formatting import format_ad_as_bs, format_fiscal_year_period, to_nepali_digits

logger = logging.getLogger(__name__)

register = template.Library()


@register.filter
def bs_date(value, format='full'):
    """
    Render an AD date as a BS date string.

    Usage: {{ sale.created_at|bs_date:"numeric" }}
    """
    if value in (None, ''):
        return ''
    try:
        return format_ad_as_bs(value, format=format)
    except CalendarError as e:
        logger.warning("Cannot render %r as a BS date: %s", value, e)
        return ''


@register.filter
def nepali_digits(value):
    return to_nepali_digits(value)


@register.filter
def fiscal_year_label(value):
    """Label of the fiscal year containing an AD date, e.g. '2081/82'"""
    if value in (None, ''):
        return ''
    try:
        return get_fiscal_year_for_date(value).year
    except CalendarError as e:
        logger.warning("Cannot find fiscal year for %r: %s", value, e)
        return ''


@register.simple_tag
def fiscal_year_period(fiscal_year, locale=None):
    return format_fiscal_year_period(fiscal_year, locale)
