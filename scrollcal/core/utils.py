from datetime import date, datetime, timezone, timedelta
from scrollcal.core.config import INVALID_DATE
from scrollcal.core.locale import resolve_locale

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

def pad_number(n):
    """Pad a month or day number to two digits."""
    if n < 10:
        return '0' + str(n)
    return str(n)

def is_valid_date(d):
    """Whether ``d`` is a usable calendar date."""
    return isinstance(d, datetime)

def utc_date(year, month, day):
    """Build a UTC midnight datetime, or None if the fields don't form a date."""
    try:
        return datetime(int(year), int(month), int(day), tzinfo=timezone.utc)
    except (TypeError, ValueError):
        return None

def from_millis(ms):
    """Convert epoch milliseconds to a UTC datetime."""
    return EPOCH + timedelta(milliseconds=ms)

def to_millis(dt):
    """Convert a datetime to epoch milliseconds."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - EPOCH) // timedelta(milliseconds=1)

def parse_iso(value):
    """Parse an ISO 8601 string as UTC, returning None when it can't be parsed."""
    try:
        dt = datetime.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)

def to_marking_format(dt):
    """Format date as YYYY-MM-DD."""
    if is_valid_date(dt):
        return dt.date().isoformat()
    return INVALID_DATE

def parse_date(d=None):
    """Normalize the accepted date shapes to a UTC datetime.

    Recognizes ``{'timestamp': ms}`` and ``{'year', 'month', 'day'}`` dicts,
    datetimes, dates, epoch milliseconds and ISO strings. Anything else,
    including strings that don't parse, gives None.
    """
    if d is None or d == '' or d == 0:
        return None
    if isinstance(d, dict):
        if d.get('timestamp'):
            return from_millis(d['timestamp'])
        if d.get('year'):
            return utc_date(d['year'], d.get('month'), d.get('day'))
        return None
    if isinstance(d, (datetime, date)):
        return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    if isinstance(d, bool):
        return None
    if isinstance(d, (int, float)):
        return from_millis(d)
    if isinstance(d, str):
        return parse_iso(d)
    return None

def xdate_to_data(d):
    """Describe a date the way change notifications report it."""
    d = d if is_valid_date(d) else parse_iso(d)
    if d is None:
        return None
    return {
        'year': d.year,
        'month': d.month,
        'day': d.day,
        'timestamp': to_millis(utc_date(d.year, d.month, d.day)),
        'dateString': to_marking_format(d)
    }

def format_month_title(dt, locale=None, short=False):
    """Format date as 'Month YYYY' using the locale's month names."""
    locale = resolve_locale(locale)
    names = locale.month_names_short if short else locale.month_names
    return f"{names[dt.month - 1]} {dt.year}"
