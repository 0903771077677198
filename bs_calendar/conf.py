"""
App settings, read from the ``BS_CALENDAR`` dict in Django settings.

    BS_CALENDAR = {
        'DEFAULT_LOCALE': 'ne',
        'FISCAL_YEAR_RANGE': (2078, 2089),
    }
"""
from django.conf import settings


DEFAULTS = {
    'DEFAULT_LOCALE': 'en',
    # Last start year must leave room for its closing Ashadh in the table
    'FISCAL_YEAR_RANGE': (2075, 2089),
}

SUPPORTED_LOCALES = ('en', 'ne')


def get_setting(name):
    """Return an app setting, falling back to DEFAULTS"""
    user_settings = getattr(settings, 'BS_CALENDAR', None) or {}
    if name in user_settings:
        return user_settings[name]
    return DEFAULTS[name]
