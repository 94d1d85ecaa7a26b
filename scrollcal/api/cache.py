import logging
from scrollcal.core.config import DAYS_PER_WEEK
from scrollcal.core.dateutils import page, same_date

logger = logging.getLogger(__name__)

class PageCache:
    """Cache of month grids so scroll math and rendering share one build per month."""
    def __init__(self):
        self.pages_by_month = {}
        self.hits = 0
        self.misses = 0

    def _key(self, date, first_day, show_six_weeks):
        return (date.year, date.month, first_day % 7, bool(show_six_weeks))

    def get_page(self, date, first_day=0, show_six_weeks=False):
        """Get the grid of days for ``date``'s month, building it on first use."""
        key = self._key(date, first_day, show_six_weeks)
        days = self.pages_by_month.get(key)
        if days is None:
            self.misses += 1
            logger.debug("Building page for %s-%02d (first day %s, six weeks %s)",
                         date.year, date.month, first_day, show_six_weeks)
            days = page(date, first_day, show_six_weeks)
            self.pages_by_month[key] = days
        else:
            self.hits += 1
        return list(days)

    def week_index_of(self, date, first_day=0, show_six_weeks=False):
        """Zero-based display week of ``date`` within its month's page, or None."""
        days = self.get_page(date, first_day, show_six_weeks)
        for i, day in enumerate(days):
            if same_date(day, date):
                return i // DAYS_PER_WEEK
        return None

    def clear_for_month(self, year, month):
        """Drop every cached variant of one month."""
        for key in [k for k in self.pages_by_month if k[0] == year and k[1] == month]:
            del self.pages_by_month[key]

    def clear(self):
        """Drop all cached pages."""
        self.pages_by_month = {}
        self.hits = 0
        self.misses = 0

    def retain_months(self, dates):
        """Drop every cached page whose month isn't among ``dates``."""
        months = {(d.year, d.month) for d in dates}
        stale = [k for k in self.pages_by_month if (k[0], k[1]) not in months]
        for key in stale:
            del self.pages_by_month[key]
        if stale:
            logger.debug("Evicted %d cached pages outside the window", len(stale))
