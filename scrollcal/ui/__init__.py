# UI modules initialization
from scrollcal.ui.synchronizer import ScrollSynchronizer
from scrollcal.ui.calendar_list import CalendarList
from scrollcal.ui.item import CalendarListItem
from scrollcal.ui.week_calendar import WeekCalendar, CalendarContext, UpdateSources
from scrollcal.ui.scroll_binding import ScrollBinding
from scrollcal.ui.timeline import WindowPolicy

__all__ = ['ScrollSynchronizer', 'CalendarList', 'CalendarListItem', 'WeekCalendar',
           'CalendarContext', 'UpdateSources', 'ScrollBinding', 'WindowPolicy']
