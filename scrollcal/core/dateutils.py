import re
import calendar
from datetime import datetime, timezone, timedelta
from scrollcal.core.config import DAYS_PER_WEEK, MARKING_FORMAT, SIX_WEEKS_DAYS
from scrollcal.core.locale import resolve_locale
from scrollcal.core.utils import is_valid_date, parse_date, parse_iso, to_marking_format

LATIN_NUMBERS_PATTERN = re.compile(r'[0-9]')
ONE_DAY = timedelta(days=1)

def _to_datetime(value):
    """Accept a datetime or an ISO string."""
    if is_valid_date(value):
        return value
    return parse_iso(value)

def _diff_in_days(a, b):
    """Fractional number of days from ``b`` to ``a``."""
    return (a - b) / ONE_DAY

def week_day_index(dt):
    """Day of the week with Sunday as 0."""
    return dt.isoweekday() % 7

def same_month(a=None, b=None):
    if not is_valid_date(a) or not is_valid_date(b):
        return False
    return a.year == b.year and a.month == b.month

def same_date(a=None, b=None):
    if not is_valid_date(a) or not is_valid_date(b):
        return False
    return a.year == b.year and a.month == b.month and a.day == b.day

def same_week(a, b, first_day_of_week=0):
    """Whether ``b`` falls in the week containing ``a``."""
    week_dates = get_week_dates(a, first_day_of_week, MARKING_FORMAT)
    if not week_dates:
        return False
    target = to_marking_format(b) if is_valid_date(b) else b
    return target in week_dates

def is_today(date=None, now=None):
    if not date:
        return True
    d = _to_datetime(date)
    return same_date(d, now or datetime.now(timezone.utc))

def is_past_date(date, now=None):
    """True for days strictly before today; False for today, the future, or invalid input."""
    d = parse_date(date)
    if d is None:
        return False
    today = parse_date(now or datetime.now(timezone.utc))
    if is_today(d, today):
        return False
    return _diff_in_days(d, today) < 0

def is_gte(a, b):
    """``a`` is on or after ``b``, tolerating less than a day of difference."""
    if not is_valid_date(a) or not is_valid_date(b):
        return False
    return _diff_in_days(b, a) < 1

def is_lte(a, b):
    """``a`` is on or before ``b``, tolerating less than a day of difference."""
    if not is_valid_date(a) or not is_valid_date(b):
        return False
    return _diff_in_days(a, b) < 1

def format_numbers(value, locale=None):
    """Replace Latin digits with the locale's numerals, if it defines any."""
    numbers = resolve_locale(locale).numbers
    if not numbers:
        return value
    return LATIN_NUMBERS_PATTERN.sub(lambda match: numbers[int(match.group())], str(value))

def from_to(a, b):
    """All days from ``a`` to ``b`` inclusive."""
    days = []
    current = a
    while current <= b:
        days.append(current)
        current = current + ONE_DAY
    return days

def start_of_month(dt):
    return dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

def end_of_month(dt):
    last_day = calendar.monthrange(dt.year, dt.month)[1]
    return dt.replace(day=last_day, hour=23, minute=59, second=59, microsecond=999999)

def add_months(dt, count):
    """Shift by whole months, clamping the day to the target month's length."""
    month_index = dt.year * 12 + (dt.month - 1) + count
    year, month = divmod(month_index, 12)
    month += 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)

def diff_in_months(a, b):
    """Fractional months from ``b`` to ``a``.

    Whole months are counted on the calendar; the remainder is the leftover
    time as a share of the month it falls in.
    """
    whole = (a.year - b.year) * 12 + (a.month - b.month)
    pivot = add_months(b, whole)
    if whole > 0 and pivot > a:
        whole -= 1
    elif whole < 0 and pivot < a:
        whole += 1
    pivot = add_months(b, whole)
    if a >= pivot:
        span = add_months(pivot, 1) - pivot
    else:
        span = pivot - add_months(pivot, -1)
    return whole + (a - pivot) / span

def month(date):
    """Every day of ``date``'s month."""
    first_day = start_of_month(date)
    last_day = end_of_month(date)
    return from_to(first_day, last_day)

def week_day_names(first_day_of_week=0, locale=None):
    """Short day names starting at ``first_day_of_week``."""
    names = list(resolve_locale(locale).day_names_short)
    day_shift = first_day_of_week % 7
    if day_shift:
        names = names[day_shift:] + names[:day_shift]
    return names

def page(date, first_day_of_week=0, show_six_weeks=False):
    """Build the grid of days shown for ``date``'s month.

    The month is padded with days of the neighbouring months so that the
    grid starts on ``first_day_of_week`` and ends on the day before it. With
    ``show_six_weeks`` the grid always holds 42 days.
    """
    days = month(date)
    before = []
    after = []

    fdow = (7 + first_day_of_week) % 7
    ldow = (fdow + 6) % 7

    start = days[0]
    start_index = week_day_index(start)
    if start_index != fdow:
        start = start - timedelta(days=(start_index + 7 - fdow) % 7)

    end = days[-1]
    end_index = week_day_index(end)
    if end_index != ldow:
        end = end + timedelta(days=(ldow + 7 - end_index) % 7)

    if show_six_weeks:
        end = start + timedelta(days=SIX_WEEKS_DAYS - 1)

    if is_lte(start, days[0]):
        before = from_to(start, days[0])

    if is_gte(end, days[-1]):
        after = from_to(days[-1], end)

    return before + days[1:-1] + after

def is_date_not_in_range(date, min_date=None, max_date=None):
    """Whether ``date`` falls outside the optional ISO ``min_date``/``max_date`` bounds.

    Bounds that don't parse are ignored, and an invalid ``date`` is never out of range.
    """
    d = parse_date(date)
    if d is None:
        return False
    lower = parse_iso(min_date) if min_date else None
    upper = parse_iso(max_date) if max_date else None
    if lower is not None and not is_gte(d, lower):
        return True
    if upper is not None and not is_lte(d, upper):
        return True
    return False

def get_week_dates(date, first_day=0, date_format=None):
    """The seven days of the week containing ``date``, or None if it's invalid."""
    d = _to_datetime(date)
    if d is None:
        return None

    day_of_the_week = week_day_index(d) - first_day
    if day_of_the_week < 0:
        day_of_the_week += 7

    week_start = d - timedelta(days=day_of_the_week)
    days = [week_start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]

    if date_format:
        return [day.strftime(date_format) for day in days]
    return days

def get_partial_week_dates(date=None, number_of_days=7, now=None):
    origin = date or now or datetime.now(timezone.utc)
    return [generate_day(origin, index) for index in range(number_of_days)]

def generate_day(origin_date, days_offset=0):
    """The YYYY-MM-DD form of ``origin_date`` shifted by ``days_offset`` days."""
    base_date = _to_datetime(origin_date)
    if base_date is None:
        return to_marking_format(None)
    return to_marking_format(base_date + timedelta(days=days_offset))
