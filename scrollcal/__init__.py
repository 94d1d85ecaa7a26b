# scrollcal package initialization
from scrollcal.ui.calendar_list import CalendarList
from scrollcal.ui.week_calendar import WeekCalendar, CalendarContext, UpdateSources
from scrollcal.ui.timeline import WindowPolicy

__version__ = '0.1.0'

__all__ = ['CalendarList', 'WeekCalendar', 'CalendarContext', 'UpdateSources', 'WindowPolicy']
