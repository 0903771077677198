from django.apps import AppConfig


class BsCalendarConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'bs_calendar'
    verbose_name = 'Bikram Sambat Calendar'
