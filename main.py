import sys
import argparse
import logging
from scrollcal.api.cache import PageCache
from scrollcal.core.dateutils import same_month
from scrollcal.core.utils import parse_date, to_marking_format, format_month_title
from scrollcal.ui.calendar_list import CalendarList
from scrollcal.ui.week_calendar import CalendarContext, WeekCalendar

def render_page(date, first_day=0, show_six_weeks=False, page_cache=None):
    """Render one month page as text, days outside the month in brackets."""
    page_cache = page_cache or PageCache()
    calendar_list = CalendarList(current=date, first_day=first_day, show_six_weeks=show_six_weeks,
                                 page_cache=page_cache)
    item = calendar_list.item_at(calendar_list.initial_scroll_index)

    lines = [format_month_title(item.item).center(7 * 5), ' '.join(f"{name:>4}" for name in item.day_names())]
    for week in item.weeks():
        cells = []
        for day in week:
            label = str(day.day) if same_month(day, item.item) else f"[{day.day}]"
            cells.append(f"{label:>4}")
        lines.append(' '.join(cells))
    return '\n'.join(lines)

def render_weeks(date, first_day=0, number_of_pages=2):
    """Render the week strip around ``date``, one page per line."""
    context = CalendarContext(date)
    week_calendar = WeekCalendar(context, first_day=first_day, number_of_pages=number_of_pages)
    lines = []
    for index, item in enumerate(week_calendar.items):
        marker = '>' if index == week_calendar.initial_scroll_index else ' '
        days = ' '.join(day.strftime('%d') for day in week_calendar.week_for_item(item))
        lines.append(f"{marker} {to_marking_format(item)}  {days}")
    return '\n'.join(lines)

def main(argv=None):
    """Main entry point for the application."""
    parser = argparse.ArgumentParser(description="Print a calendar page and the week strip around a date.")
    parser.add_argument('date', help="date to show, e.g. 2014-03-23")
    parser.add_argument('--first-day', type=int, default=0, choices=range(7), help="0 = Sunday ... 6 = Saturday")
    parser.add_argument('--six-weeks', action='store_true', help="always show six weeks")
    parser.add_argument('--weeks', type=int, default=2, help="weeks to show on each side of the date")
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    date = parse_date(args.date)
    if date is None:
        print(f"Error: could not read date {args.date!r}")
        return 1

    print(render_page(date, args.first_day, args.six_weeks))
    print()
    print(render_weeks(date, args.first_day, args.weeks))
    return 0

if __name__ == "__main__":
    sys.exit(main())
