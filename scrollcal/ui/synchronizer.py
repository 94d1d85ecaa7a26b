import logging
from PyQt6.QtCore import QObject, pyqtSignal
from scrollcal.core.config import NEAR_EDGE_RATIO
from scrollcal.core.models import ItemLayout
from scrollcal.core.utils import to_marking_format
from scrollcal.ui.timeline import WindowPolicy

logger = logging.getLogger(__name__)

class ScrollSynchronizer(QObject):
    """Keeps a window of page anchors in step with a fixed-size scrolling list.

    The synchronizer owns the window and asks the list to move through
    ``scrollRequested``; the list reports back through
    ``on_viewable_items_changed`` and ``on_page_change``.
    """
    scrollRequested = pyqtSignal(float, bool)
    windowChanged = pyqtSignal(object)

    def __init__(self, items, page_size, past_count, window_policy=WindowPolicy.FIXED,
                 near_edge_threshold=None, parent=None):
        super().__init__(parent)
        self.items = list(items)
        self.page_size = page_size
        self.past_count = past_count
        self.window_policy = window_policy
        if near_edge_threshold is None:
            near_edge_threshold = round(past_count * NEAR_EDGE_RATIO)
        self.near_edge_threshold = near_edge_threshold

    @property
    def initial_scroll_index(self):
        return self.past_count

    def keys(self):
        """Stable string keys of the pages in the window."""
        return [to_marking_format(item) for item in self.items]

    def get_item_layout(self, index):
        return ItemLayout(length=self.page_size, offset=self.page_size * index, index=index)

    def request_scroll(self, offset, animated=False):
        logger.debug("Scroll requested to %s (animated=%s)", offset, animated)
        self.scrollRequested.emit(float(offset), bool(animated))

    def on_viewable_items_changed(self, viewable_items):
        """Handle the list's report of which pages are visible."""

    def on_page_change(self, page_index, prev_page=None, scrolled_by_user=False):
        """Handle the list settling on a new page."""
        if self.is_near_edge(page_index):
            self.on_reach_near_edge(page_index)

    def is_near_edge(self, page_index):
        if not self.items:
            return False
        return page_index <= self.near_edge_threshold or page_index >= len(self.items) - 1 - self.near_edge_threshold

    def on_reach_near_edge(self, page_index):
        """Rebuild the window around ``page_index`` when the policy allows it."""
        if self.window_policy is not WindowPolicy.REGENERATING:
            return
        if not 0 <= page_index < len(self.items):
            return
        self.reload_pages(page_index)

    def build_items(self, anchor):
        """Window of anchors centered on ``anchor``."""
        raise NotImplementedError

    def reload_pages(self, page_index):
        """Replace the window with one centered on the page at ``page_index``."""
        anchor = self.items[page_index]
        logger.info("Regenerating window around %s", to_marking_format(anchor))
        self.items = self.build_items(anchor)
        self.windowChanged.emit(list(self.items))
        self.request_scroll(self.page_size * self.past_count, False)
