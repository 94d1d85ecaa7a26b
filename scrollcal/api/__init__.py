# API modules initialization
from scrollcal.api.cache import PageCache
from scrollcal.api.services import get_calendar_date_string, get_default_locale

__all__ = ['PageCache', 'get_calendar_date_string', 'get_default_locale']
