import gc

import pytest
from PyQt6.QtCore import QObject, pyqtSignal

from scrollcal.ui.calendar_list import CalendarList
from scrollcal.ui.scroll_binding import ScrollBinding, is_viewable, viewable_indices
from scrollcal.ui.week_calendar import CalendarContext, WeekCalendar


class FakeSlider(QObject):
    """Stands in for a QScrollBar: same value API, no widget needed."""
    valueChanged = pyqtSignal(int)

    def __init__(self):
        super().__init__()
        self._value = 0

    def value(self):
        return self._value

    def setValue(self, value):
        if value != self._value:
            self._value = value
            self.valueChanged.emit(value)


@pytest.fixture
def slider():
    return FakeSlider()


def test_is_viewable():
    assert is_viewable(10, 50, 360, 20)
    assert is_viewable(-300, 60, 360, 15)
    assert not is_viewable(-300, 60, 360, 20)
    assert not is_viewable(360, 720, 360, 20)


@pytest.mark.parametrize('offset, expected', [
    (0, [0]),
    (300, [1]),
    (200, [0, 1]),
    (3240, [9]),
])
def test_viewable_indices(offset, expected):
    assert viewable_indices(offset, 360, 10, 360) == expected


def test_viewable_indices_without_viewport():
    assert viewable_indices(0, 0, 10, 360) == []


def test_initial_index_reports_month(slider, record):
    calendar_list = CalendarList(current='2014-03-23', horizontal=True)
    months = record(calendar_list.monthChanged)
    binding = ScrollBinding(slider, calendar_list, viewport_length=360)

    binding.scroll_to_initial_index()

    assert slider.value() == 18000
    assert [args[0]['dateString'] for args in months] == ['2014-03-01']
    assert binding.current_page == 50


def test_synchronizer_scroll_moves_slider(slider):
    calendar_list = CalendarList(current='2014-03-23', horizontal=True)
    ScrollBinding(slider, calendar_list, viewport_length=360)
    calendar_list.scroll_to_month('2014-06-01')
    assert slider.value() == 19080


def test_user_scroll_reports_visible_months(slider, record):
    """Test that dragging between two pages reports both, first one leading."""
    calendar_list = CalendarList(current='2014-03-23', horizontal=True)
    binding = ScrollBinding(slider, calendar_list, viewport_length=360)
    binding.scroll_to_initial_index()
    months = record(calendar_list.monthChanged)
    pages = []
    calendar_list.on_page_change = lambda *args: pages.append(args)

    slider.setValue(18560)

    assert [args[0]['dateString'] for args in months] == ['2014-04-01']
    assert binding.visible_keys == ['2014-04-01', '2014-05-01']
    assert pages == [(52, 50, True)]


def test_week_strip_follows_user_scroll(slider):
    context = CalendarContext('2021-01-06')
    week_calendar = WeekCalendar(context, first_day=1, calendar_width=300, number_of_pages=10)
    binding = ScrollBinding(slider, week_calendar, viewport_length=300)
    binding.scroll_to_initial_index()
    assert context.date == '2021-01-06'

    slider.setValue(300 * 12)

    assert context.date == '2021-01-18'


def test_week_strip_regenerates_at_edge(slider, record):
    """Test that the strip jumps back to the middle of a rebuilt window."""
    context = CalendarContext('2021-01-06')
    week_calendar = WeekCalendar(context, first_day=1, calendar_width=300, number_of_pages=10)
    binding = ScrollBinding(slider, week_calendar, viewport_length=300)
    binding.scroll_to_initial_index()
    windows = record(week_calendar.windowChanged)

    slider.setValue(300 * 17)

    assert len(windows) == 1
    assert context.date == '2021-02-22'
    assert slider.value() == 3000
    assert binding.current_page == 10
    assert binding.visible_keys == ['2021-02-22']


def test_context_date_change_moves_strip(slider):
    context = CalendarContext('2021-01-06')
    week_calendar = WeekCalendar(context, first_day=1, calendar_width=300, number_of_pages=10)
    binding = ScrollBinding(slider, week_calendar, viewport_length=300)
    binding.scroll_to_initial_index()

    context.set_date('2021-01-27', 'dayPress')

    assert slider.value() == 300 * 13
    assert binding.current_page == 13
    assert context.date == '2021-01-27'


def test_unreferenced_binding_keeps_working(slider):
    """Test that a binding nobody holds on to still moves the slider."""
    calendar_list = CalendarList(current='2014-03-23', horizontal=True)
    ScrollBinding(slider, calendar_list, viewport_length=360)
    gc.collect()

    calendar_list.scroll_to_month('2014-04-01')

    assert slider.value() == 18360


def test_explicit_parent_owns_binding(slider):
    calendar_list = CalendarList(current='2014-03-23', horizontal=True)
    owner = QObject()
    binding = ScrollBinding(slider, calendar_list, viewport_length=360, parent=owner)
    assert binding.parent() is owner


def test_empty_window_ignores_slider_moves(slider):
    calendar_list = CalendarList(current='2014-03-23', horizontal=True)
    binding = ScrollBinding(slider, calendar_list, viewport_length=360)
    calendar_list.items = []
    calendar_list.on_page_change = lambda *args: pytest.fail("page change reported")

    slider.setValue(720)

    assert binding.current_page is None
