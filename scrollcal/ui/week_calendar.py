import logging
from datetime import datetime, timezone
from PyQt6.QtCore import QObject, pyqtSignal
from scrollcal.core.config import CALENDAR_WIDTH, NUMBER_OF_PAGES, NEAR_EDGE_RATIO, WEEK_PAGE_HEIGHT
from scrollcal.core.dateutils import get_week_dates, same_week, week_day_names
from scrollcal.core.utils import parse_date, to_marking_format
from scrollcal.ui.synchronizer import ScrollSynchronizer
from scrollcal.ui.timeline import WindowPolicy, get_dates_array

logger = logging.getLogger(__name__)

class UpdateSources:
    """What caused the shared calendar date to change."""
    CALENDAR_INIT = 'calendarInit'
    TODAY_PRESS = 'todayPress'
    LIST_DRAG = 'listDrag'
    DAY_PRESS = 'dayPress'
    PAGE_SCROLL = 'pageScroll'
    WEEK_SCROLL = 'weekScroll'
    ARROW_PRESS = 'arrowPress'

class CalendarContext(QObject):
    """Selected date shared between a week strip and whatever else shows it."""
    dateChanged = pyqtSignal(str, str)

    def __init__(self, date=None, now=None, parent=None):
        super().__init__(parent)
        self.date = to_marking_format(parse_date(date) or parse_date(now or datetime.now(timezone.utc)))
        self.update_source = UpdateSources.CALENDAR_INIT

    def set_date(self, date, update_source):
        """Select ``date``, recording what caused the change."""
        resolved = parse_date(date)
        if resolved is None:
            return
        self.date = to_marking_format(resolved)
        self.update_source = update_source
        self.dateChanged.emit(self.date, update_source)

class WeekCalendar(ScrollSynchronizer):
    """Horizontal strip of week pages that follows the context's date.

    Its window holds ``2 * number_of_pages + 1`` weeks and is rebuilt around
    the current page whenever scrolling comes close to either end.
    """
    def __init__(self, context, current=None, first_day=0, calendar_width=CALENDAR_WIDTH,
                 number_of_pages=NUMBER_OF_PAGES, marked_dates=None,
                 window_policy=WindowPolicy.REGENERATING, on_day_press=None, locale=None, parent=None):
        super().__init__(
            get_dates_array(current if parse_date(current) else context.date, first_day, number_of_pages),
            calendar_width,
            number_of_pages,
            window_policy=window_policy,
            near_edge_threshold=round(number_of_pages * NEAR_EDGE_RATIO),
            parent=parent
        )
        self.context = context
        self.current = current
        self.first_day = first_day
        self.number_of_pages = number_of_pages
        self.marked_dates = marked_dates
        self.day_press_callback = on_day_press
        self.locale = locale
        self.page_height = WEEK_PAGE_HEIGHT

        self.context.dateChanged.connect(self.on_date_changed)

    @property
    def container_width(self):
        return self.page_size

    def build_items(self, anchor):
        return get_dates_array(anchor, self.first_day, self.number_of_pages)

    def page_index_of(self, date):
        """Index of the page showing ``date``'s week, or -1 when it's outside the window."""
        for i, item in enumerate(self.items):
            if same_week(item, date, self.first_day):
                return i
        return -1

    def on_date_changed(self, date, update_source):
        """Bring the week of a newly selected date into view, unless a week scroll selected it."""
        if update_source == UpdateSources.WEEK_SCROLL:
            return
        page_index = self.page_index_of(date)
        if page_index < 0:
            logger.warning("Date %s is outside the loaded weeks, not scrolling", date)
            return
        self.request_scroll(page_index * self.container_width, False)

    def on_page_change(self, page_index, prev_page=None, scrolled_by_user=False):
        if scrolled_by_user:
            self.context.set_date(self.items[page_index], UpdateSources.WEEK_SCROLL)
        super().on_page_change(page_index, prev_page, scrolled_by_user)

    def on_day_press(self, date_data):
        self.context.set_date(date_data['dateString'], UpdateSources.DAY_PRESS)
        if self.day_press_callback:
            self.day_press_callback(date_data)

    def week_for_item(self, item):
        """Days of the page for ``item``, centered on the selected date when it's in that week."""
        current = self.context.date if same_week(item, self.context.date, self.first_day) else item
        return get_week_dates(current, self.first_day)

    def day_names(self):
        return week_day_names(self.first_day, self.locale)
