from datetime import date

from django.template import Context, Template
from django.test import SimpleTestCase, override_settings

from bs_calendar.conf import get_setting
from bs_calendar.converter import BSDate
from bs_calendar.exceptions import UnsupportedLocaleError
from bs_calendar.fiscal_year import get_fiscal_year_details
from bs_calendar.formatting import (
    format_ad_as_bs,
    format_bs_date,
    format_fiscal_year,
    format_fiscal_year_period,
    to_nepali_digits,
)


class FormatBSDateTest(SimpleTestCase):

    def setUp(self):
        self.bs = BSDate(2056, 9, 17)

    def test_english_formats(self):
        self.assertEqual(format_bs_date(self.bs), 'Poush 17, 2056')
        self.assertEqual(format_bs_date(self.bs, 'short'), 'Pou 17, 2056')
        self.assertEqual(format_bs_date(self.bs, 'long'), '17 Poush, 2056')
        self.assertEqual(format_bs_date(self.bs, 'numeric'), '2056/09/17')
        self.assertEqual(format_bs_date(self.bs, 'plain'), '2056/9/17')

    def test_nepali_formats(self):
        self.assertEqual(format_bs_date(self.bs, locale='ne'), 'पौष १७, २०५६')
        self.assertEqual(format_bs_date(self.bs, 'short', locale='ne'), 'पौष १७, २०५६')
        self.assertEqual(format_bs_date(self.bs, 'numeric', locale='ne'), '२०५६/०९/१७')

    @override_settings(BS_CALENDAR={'DEFAULT_LOCALE': 'ne'})
    def test_default_locale_from_settings(self):
        self.assertEqual(format_bs_date(self.bs, 'numeric'), '२०५६/०९/१७')

    def test_unsupported_locale(self):
        with self.assertRaises(UnsupportedLocaleError):
            format_bs_date(self.bs, locale='fr')

    def test_format_ad_as_bs(self):
        self.assertEqual(format_ad_as_bs(date(2023, 4, 14), 'numeric'), '2080/01/01')

    def test_nepali_digits(self):
        self.assertEqual(to_nepali_digits(2081), '२०८१')
        self.assertEqual(to_nepali_digits('2081/82'), '२०८१/८२')


class FormatFiscalYearTest(SimpleTestCase):

    def setUp(self):
        self.fy = get_fiscal_year_details(2081)

    def test_label(self):
        self.assertEqual(format_fiscal_year(self.fy, 'en'), 'FY 2081/82')
        self.assertEqual(format_fiscal_year(self.fy, 'ne'), 'आ.व. २०८१/८२')

    def test_period(self):
        self.assertEqual(
            format_fiscal_year_period(self.fy, 'en'),
            'Shrawan 1, 2081 - Ashadh 32, 2082',
        )
        self.assertEqual(
            format_fiscal_year_period(self.fy, 'ne'),
            'श्रावण १, २०८१ - असार ३२, २०८२',
        )


class SettingsTest(SimpleTestCase):

    @override_settings(BS_CALENDAR={})
    def test_defaults(self):
        self.assertEqual(get_setting('DEFAULT_LOCALE'), 'en')
        self.assertEqual(get_setting('FISCAL_YEAR_RANGE'), (2075, 2089))

    @override_settings(BS_CALENDAR={'DEFAULT_LOCALE': 'ne'})
    def test_override(self):
        self.assertEqual(get_setting('DEFAULT_LOCALE'), 'ne')
        self.assertEqual(get_setting('FISCAL_YEAR_RANGE'), (2075, 2089))


class TemplateTagsTest(SimpleTestCase):

    def render(self, source, **context):
        return Template('{% load bs_calendar %}' + source).render(Context(context))

    def test_bs_date_filter(self):
        self.assertEqual(self.render('{{ d|bs_date }}', d=date(2000, 1, 1)), 'Poush 17, 2056')
        self.assertEqual(self.render('{{ d|bs_date:"numeric" }}', d=date(2000, 1, 1)), '2056/09/17')

    def test_bs_date_filter_empty(self):
        self.assertEqual(self.render('{{ d|bs_date }}', d=None), '')

    def test_bs_date_filter_out_of_range(self):
        with self.assertLogs('bs_calendar.templatetags.bs_calendar', level='WARNING'):
            self.assertEqual(self.render('{{ d|bs_date }}', d=date(1900, 1, 1)), '')

    def test_fiscal_year_label_filter(self):
        self.assertEqual(self.render('{{ d|fiscal_year_label }}', d=date(2025, 1, 1)), '2081/82')

    def test_fiscal_year_label_filter_out_of_range(self):
        with self.assertLogs('bs_calendar.templatetags.bs_calendar', level='WARNING'):
            self.assertEqual(self.render('{{ d|fiscal_year_label }}', d=date(2040, 1, 1)), '')

    def test_nepali_digits_filter(self):
        self.assertEqual(self.render('{{ y|nepali_digits }}', y=2081), '२०८१')

    def test_fiscal_year_period_tag(self):
        fy = get_fiscal_year_details(2081)
        self.assertEqual(
            self.render('{% fiscal_year_period fy "en" %}', fy=fy),
            'Shrawan 1, 2081 - Ashadh 32, 2082',
        )
