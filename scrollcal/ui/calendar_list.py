import logging
from datetime import datetime, timezone
from PyQt6.QtCore import pyqtSignal
from scrollcal.api.cache import PageCache
from scrollcal.core.config import (
    PAST_SCROLL_RANGE, FUTURE_SCROLL_RANGE, CALENDAR_WIDTH, CALENDAR_HEIGHT,
    WEEK_ROW_HEIGHT, HORIZONTAL_VISIBLE_RANGE, VERTICAL_VISIBLE_RANGE
)
from scrollcal.core.dateutils import add_months, diff_in_months, same_date, same_month, start_of_month
from scrollcal.core.utils import parse_date, parse_iso, xdate_to_data
from scrollcal.ui.item import CalendarListItem
from scrollcal.ui.synchronizer import ScrollSynchronizer
from scrollcal.ui.timeline import MONTH, WindowPolicy, build_window

logger = logging.getLogger(__name__)

class CalendarList(ScrollSynchronizer):
    """Scrollable list of month pages, vertical or horizontal.

    Hosts move it with ``scroll_to_day``, ``scroll_to_month`` and
    ``add_month``, and listen to ``monthChanged`` / ``visibleMonthsChanged``
    for the month in view. The window of months is fixed unless a
    regenerating policy is passed.
    """
    monthChanged = pyqtSignal(object)
    visibleMonthsChanged = pyqtSignal(object)

    def __init__(self, current=None, first_day=0, past_scroll_range=PAST_SCROLL_RANGE,
                 future_scroll_range=FUTURE_SCROLL_RANGE, calendar_width=CALENDAR_WIDTH,
                 calendar_height=CALENDAR_HEIGHT, horizontal=False, static_header=False,
                 animate_scroll=False, show_six_weeks=False, marked_dates=None,
                 window_policy=WindowPolicy.FIXED, page_cache=None, locale=None,
                 on_press_arrow_left=None, on_press_arrow_right=None, now=None, parent=None):
        initial_date = parse_date(current) or parse_date(now or datetime.now(timezone.utc))
        initial_date = start_of_month(initial_date)

        super().__init__(
            build_window(initial_date, past_scroll_range, future_scroll_range, MONTH),
            calendar_width if horizontal else calendar_height,
            past_scroll_range,
            window_policy=window_policy,
            parent=parent
        )

        self.initial_date = initial_date
        self.first_day = first_day
        self.past_scroll_range = past_scroll_range
        self.future_scroll_range = future_scroll_range
        self.calendar_width = calendar_width
        self.calendar_height = calendar_height
        self.horizontal = horizontal
        self.static_header = static_header
        self.animate_scroll = animate_scroll
        self.show_six_weeks = show_six_weeks
        self.marked_dates = marked_dates
        self.page_cache = page_cache or PageCache()
        self.locale = locale
        self.on_press_arrow_left = on_press_arrow_left
        self.on_press_arrow_right = on_press_arrow_right
        self.visible_range = HORIZONTAL_VISIBLE_RANGE if horizontal else VERTICAL_VISIBLE_RANGE

        self.current_month = parse_date(current)
        self.visible_month = self.current_month

        self.windowChanged.connect(self.on_window_changed)

    @property
    def calendar_size(self):
        return self.page_size

    def build_items(self, anchor):
        return build_window(anchor, self.past_scroll_range, self.future_scroll_range, MONTH)

    def reload_pages(self, page_index):
        self.initial_date = start_of_month(self.items[page_index])
        super().reload_pages(page_index)

    def on_window_changed(self, items):
        self.page_cache.retain_months(items)

    def _month_offset(self, scroll_to):
        diff_months = round(diff_in_months(start_of_month(scroll_to), self.initial_date))
        return self.calendar_size * self.past_scroll_range + diff_months * self.calendar_size

    def scroll_to_day(self, date, offset=0, animated=False):
        """Scroll so that ``date`` is in view, ``offset`` further along."""
        scroll_to = parse_date(date)
        if not scroll_to or not self.initial_date:
            return

        scroll_amount = self._month_offset(scroll_to) + (offset or 0)

        if not self.horizontal:
            week = self.page_cache.week_index_of(scroll_to, self.first_day)
            if week is not None:
                scroll_amount += WEEK_ROW_HEIGHT * week

        # A zero amount is treated as nothing to do, even when it is a real target.
        if scroll_amount != 0:
            self.request_scroll(scroll_amount, animated)

    def scroll_to_month(self, date):
        """Scroll to the page of ``date``'s month."""
        scroll_to = parse_date(date)
        if not scroll_to or not self.initial_date:
            return

        scroll_amount = self._month_offset(scroll_to)

        if scroll_amount != 0:
            self.request_scroll(scroll_amount, self.animate_scroll)

    def set_current(self, current):
        """Follow a new ``current`` date given by the host."""
        if current:
            self.scroll_to_month(current)

    def add_month(self, count):
        """Move the current month by ``count`` months, scrolling to it."""
        if self.current_month is None:
            return
        day = add_months(self.current_month, count)
        if same_month(day, self.current_month):
            return
        self.scroll_to_month(day)
        self._set_current_month(day)

    def _set_current_month(self, value):
        previous = self.current_month
        self.current_month = value
        if value is None or same_date(previous, value):
            return
        data = xdate_to_data(value)
        logger.debug("Current month changed to %s", data['dateString'])
        self.monthChanged.emit(data)
        self.visibleMonthsChanged.emit([data])

    def on_viewable_items_changed(self, viewable_items):
        """Take the first visible page as the month in view."""
        new_visible_month = parse_date(viewable_items[0].item) if viewable_items else None
        if not same_date(self.visible_month, new_visible_month):
            self.visible_month = new_visible_month
            self._set_current_month(self.visible_month)

    def is_date_in_range(self, date):
        """Whether ``date``'s month is close enough to the current one to render in full."""
        for i in range(-self.visible_range, self.visible_range + 1):
            if self.current_month is not None and same_month(date, add_months(self.current_month, i)):
                return True
        return False

    def get_marked_dates_for_item(self, item):
        """Marked dates for a page, only if any of them falls in its month."""
        if self.marked_dates and item:
            for key in self.marked_dates:
                if same_month(parse_iso(key), item):
                    return self.marked_dates
        return None

    def item_at(self, index):
        item = self.items[index]
        return CalendarListItem(
            item,
            self.page_cache,
            first_day=self.first_day,
            show_six_weeks=self.show_six_weeks,
            visible=self.is_date_in_range(item),
            marked_dates=self.get_marked_dates_for_item(item),
            horizontal=self.horizontal,
            calendar_width=self.calendar_width,
            calendar_height=self.calendar_height,
            scroll_to_month=self.scroll_to_month,
            on_press_arrow_left=self.on_press_arrow_left,
            on_press_arrow_right=self.on_press_arrow_right,
            locale=self.locale
        )

    def static_header_month(self):
        """Month shown by the non-scrolling header, or None when there is none."""
        if self.static_header and self.horizontal:
            return self.current_month
        return None

