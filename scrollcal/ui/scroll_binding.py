import logging
from PyQt6.QtCore import QObject
from scrollcal.core.config import VIEW_AREA_COVERAGE_PERCENT_THRESHOLD
from scrollcal.core.models import ViewToken
from scrollcal.core.utils import to_marking_format

logger = logging.getLogger(__name__)

def is_viewable(top, bottom, viewport_length, coverage_threshold):
    """Whether an item spanning ``top``..``bottom`` (relative to the viewport) counts as visible.

    Items entirely inside the viewport always count; partly visible ones
    count when they cover at least ``coverage_threshold`` percent of it.
    """
    visible_length = min(bottom, viewport_length) - max(top, 0)
    if visible_length <= 0:
        return False
    if top >= 0 and bottom <= viewport_length:
        return True
    return 100 * visible_length / viewport_length >= coverage_threshold

def viewable_indices(offset, viewport_length, item_count, page_size, coverage_threshold=VIEW_AREA_COVERAGE_PERCENT_THRESHOLD):
    """Indices of the fixed-size pages visible at scroll position ``offset``."""
    if viewport_length <= 0 or page_size <= 0:
        return []
    first = max(int(offset // page_size), 0)
    indices = []
    for index in range(first, item_count):
        top = index * page_size - offset
        if top >= viewport_length:
            break
        if is_viewable(top, top + page_size, viewport_length, coverage_threshold):
            indices.append(index)
    return indices

class ScrollBinding(QObject):
    """Connects a Qt slider (scroll bar or similar) to a synchronizer.

    Scroll requests from the synchronizer move the slider; slider moves are
    turned into visibility reports and page changes for the synchronizer.
    Without an explicit parent the binding is owned by the synchronizer and
    lives as long as it does.
    """
    def __init__(self, slider, synchronizer, viewport_length, coverage_threshold=VIEW_AREA_COVERAGE_PERCENT_THRESHOLD, parent=None):
        super().__init__(parent if parent is not None else synchronizer)
        self.slider = slider
        self.synchronizer = synchronizer
        self.viewport_length = viewport_length
        self.coverage_threshold = coverage_threshold
        self.current_page = None
        self.visible_keys = []
        self._programmatic = False

        self.synchronizer.scrollRequested.connect(self.apply_scroll)
        self.synchronizer.windowChanged.connect(self.on_window_changed)
        self.slider.valueChanged.connect(self.on_value_changed)

    def scroll_to_initial_index(self):
        """Place the slider on the synchronizer's initial page."""
        layout = self.synchronizer.get_item_layout(self.synchronizer.initial_scroll_index)
        self.apply_scroll(layout.offset, False)

    def apply_scroll(self, offset, animated=False):
        """Move the slider for a scroll the synchronizer asked for."""
        value = int(round(offset))
        if value == self.slider.value():
            return
        self._programmatic = True
        try:
            self.slider.setValue(value)
        finally:
            self._programmatic = False

    def on_window_changed(self, items):
        self.current_page = None
        self.visible_keys = []

    def on_value_changed(self, value):
        """Report what the new scroll position shows."""
        items = self.synchronizer.items
        if not items:
            return
        scrolled_by_user = not self._programmatic
        indices = viewable_indices(value, self.viewport_length, len(items),
                                   self.synchronizer.page_size, self.coverage_threshold)
        tokens = [ViewToken(items[i], i, key=to_marking_format(items[i])) for i in indices]
        keys = [token.key for token in tokens]
        if keys != self.visible_keys:
            self.visible_keys = keys
            self.synchronizer.on_viewable_items_changed(tokens)

        page_index = min(max(int(round(value / self.synchronizer.page_size)), 0), len(items) - 1)
        if page_index != self.current_page:
            prev_page = self.current_page
            self.current_page = page_index
            logger.debug("Page changed %s -> %s (user=%s)", prev_page, page_index, scrolled_by_user)
            self.synchronizer.on_page_change(page_index, prev_page, scrolled_by_user)
