from scrollcal.core.config import PLACEHOLDER_FORMAT
from scrollcal.core.dateutils import add_months, week_day_names
from scrollcal.core.utils import to_marking_format, format_month_title

class CalendarListItem:
    """Render description of one month page in the list.

    Pages far from the visible month are drawn as a plain 'yyyy-MM'
    placeholder; the rest get their full grid of days.
    """
    def __init__(self, item, page_cache, first_day=0, show_six_weeks=False, visible=True,
                 marked_dates=None, horizontal=False, calendar_width=None, calendar_height=None,
                 scroll_to_month=None, on_press_arrow_left=None, on_press_arrow_right=None, locale=None):
        self.item = item
        self.page_cache = page_cache
        self.first_day = first_day
        self.show_six_weeks = show_six_weeks
        self.visible = visible
        self.marked_dates = marked_dates
        self.horizontal = horizontal
        self.calendar_width = calendar_width
        self.calendar_height = calendar_height
        self.scroll_to_month = scroll_to_month
        self.on_press_arrow_left = on_press_arrow_left
        self.on_press_arrow_right = on_press_arrow_right
        self.locale = locale

    @property
    def date_string(self):
        return to_marking_format(self.item)

    @property
    def placeholder_text(self):
        return self.item.strftime(PLACEHOLDER_FORMAT)

    @property
    def title(self):
        return format_month_title(self.item, self.locale)

    def days(self):
        """Grid of days for the page, or an empty list while it's a placeholder."""
        if not self.visible:
            return []
        return self.page_cache.get_page(self.item, self.first_day, self.show_six_weeks)

    def weeks(self):
        """The page's days split into rows of seven."""
        days = self.days()
        return [days[i:i + 7] for i in range(0, len(days), 7)]

    def day_names(self):
        return week_day_names(self.first_day, self.locale)

    def press_arrow_left(self, method=None):
        self._press_arrow(-1, self.on_press_arrow_left, method)

    def press_arrow_right(self, method=None):
        self._press_arrow(1, self.on_press_arrow_right, method)

    def _press_arrow(self, count, handler, method):
        if handler:
            handler(method, self.item)
        elif self.horizontal and self.scroll_to_month:
            self.scroll_to_month(add_months(self.item, count))
