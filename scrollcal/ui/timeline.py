from enum import Enum
from datetime import timedelta
from scrollcal.core.config import NUMBER_OF_PAGES
from scrollcal.core.dateutils import add_months, start_of_month, week_day_index
from scrollcal.core.utils import parse_date

MONTH = 'month'
WEEK = 'week'

class WindowPolicy(Enum):
    """Whether the window of pages is rebuilt when scrolling nears its ends."""
    FIXED = 'fixed'
    REGENERATING = 'regenerating'

def week_anchor(date, first_day, week_index):
    """Anchor of the page ``week_index`` weeks away from ``date``'s week.

    Offset 0 keeps ``date`` itself so the visible week shows it as is; other
    offsets start from the week's first day and move by whole weeks.
    """
    day_of_the_week = week_day_index(date)
    if day_of_the_week < first_day and first_day > 0:
        day_of_the_week += 7

    base = date if week_index == 0 else date + timedelta(days=first_day - day_of_the_week)
    return base + timedelta(weeks=week_index)

def build_window(initial_anchor, past_count, future_count, unit=MONTH, first_day=0):
    """Anchors for ``past_count`` pages before and ``future_count`` after the initial one."""
    initial = parse_date(initial_anchor)
    if initial is None:
        return []

    if unit == MONTH:
        first_month = start_of_month(initial)
        return [add_months(first_month, i - past_count) for i in range(past_count + future_count + 1)]
    if unit == WEEK:
        return [week_anchor(initial, first_day, i - past_count) for i in range(past_count + future_count + 1)]
    raise ValueError(f"Unknown window unit: {unit}")

def get_dates_array(date, first_day=0, number_of_pages=NUMBER_OF_PAGES):
    """Week anchors from ``number_of_pages`` weeks back to as many ahead."""
    return build_window(date, number_of_pages, number_of_pages, WEEK, first_day)
