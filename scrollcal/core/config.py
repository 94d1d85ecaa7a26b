# Scroll Range
PAST_SCROLL_RANGE = 50
FUTURE_SCROLL_RANGE = 50
NUMBER_OF_PAGES = 50

# Page Sizes
CALENDAR_WIDTH = 360
CALENDAR_HEIGHT = 360
WEEK_PAGE_HEIGHT = 48
WEEK_ROW_HEIGHT = 46
DAYS_PER_WEEK = 7
SIX_WEEKS_DAYS = 42

# Viewability
VIEW_AREA_COVERAGE_PERCENT_THRESHOLD = 20
NEAR_EDGE_RATIO = 0.4
HORIZONTAL_VISIBLE_RANGE = 1
VERTICAL_VISIBLE_RANGE = 3

# Formats
MARKING_FORMAT = '%Y-%m-%d'
PLACEHOLDER_FORMAT = '%Y-%m'
INVALID_DATE = 'Invalid Date'

# Default Locale
MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]
MONTH_NAMES_SHORT = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']
DAY_NAMES = ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']
DAY_NAMES_SHORT = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']
TODAY_LABEL = 'Today'
