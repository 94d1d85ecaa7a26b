import re
from datetime import date, datetime, timezone
from scrollcal.core.config import INVALID_DATE
from scrollcal.core.locale import locale_config
from scrollcal.core.utils import pad_number, parse_iso, from_millis, to_marking_format

SLASHED_DATE_PATTERN = re.compile(r'^\d{4}/\d{2}/\d{2}')

def _parse_with_format(value, date_format):
    """Parse ``value`` with a strptime format as UTC, or None."""
    try:
        return datetime.strptime(value, date_format).replace(tzinfo=timezone.utc)
    except ValueError:
        return None

def get_calendar_date_string(value=None):
    """Convert a date, timestamp or date string to YYYY-MM-DD.

    Strings are tried as ISO first, then as 'yyyy/MM/dd' and finally as
    'dd MMM yyyy'; a string that matches none of them gives 'Invalid Date'.
    Values of any other type raise ValueError.
    """
    if value is None:
        return None

    if isinstance(value, (datetime, date)):
        return f"{value.year}-{pad_number(value.month)}-{pad_number(value.day)}"

    if isinstance(value, str):
        parsed = parse_iso(value)
        if parsed is None and SLASHED_DATE_PATTERN.match(value):
            parsed = _parse_with_format(value, '%Y/%m/%d')
        elif parsed is None:
            parsed = _parse_with_format(value, '%d %b %Y')
        return to_marking_format(parsed)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return to_marking_format(from_millis(value))

    raise ValueError(INVALID_DATE)

def get_default_locale(locale_key=None):
    """Return the locale used when none is passed explicitly."""
    return locale_config.get_locale(locale_key)
