from datetime import date, datetime

import pytest

from scrollcal.api.services import get_calendar_date_string, get_default_locale


def test_calendar_date_string_from_nothing():
    assert get_calendar_date_string() is None


def test_calendar_date_string_from_dates():
    assert get_calendar_date_string(date(2015, 6, 5)) == '2015-06-05'
    assert get_calendar_date_string(datetime(2015, 12, 31, 23, 0)) == '2015-12-31'


@pytest.mark.parametrize('value, expected', [
    ('2012-03-16', '2012-03-16'),
    ('2012-03-16T10:00:00Z', '2012-03-16'),
    ('2012/03/16', '2012-03-16'),
    ('16 Mar 2012', '2012-03-16'),
    ('16/03/2012', 'Invalid Date'),
    ('2012/13/45', 'Invalid Date'),
])
def test_calendar_date_string_from_strings(value, expected):
    assert get_calendar_date_string(value) == expected


def test_calendar_date_string_from_timestamp():
    assert get_calendar_date_string(1479772800000) == '2016-11-22'


@pytest.mark.parametrize('value', [[2012, 3, 16], {'year': 2012}, True])
def test_calendar_date_string_rejects_other_types(value):
    with pytest.raises(ValueError, match="Invalid Date"):
        get_calendar_date_string(value)


def test_default_locale():
    locale = get_default_locale()
    assert locale.day_names_short[0] == 'Sun'
    assert locale.month_names[2] == 'March'
