from scrollcal.core.config import (
    MONTH_NAMES, MONTH_NAMES_SHORT, DAY_NAMES, DAY_NAMES_SHORT, TODAY_LABEL
)

class Locale:
    """Names and numerals used when labelling calendar pages."""
    def __init__(self, month_names, month_names_short, day_names, day_names_short, numbers=None, today=TODAY_LABEL):
        if len(month_names) != 12 or len(month_names_short) != 12:
            raise ValueError("A locale needs exactly 12 month names")
        if len(day_names) != 7 or len(day_names_short) != 7:
            raise ValueError("A locale needs exactly 7 day names")
        if numbers is not None and len(numbers) != 10:
            raise ValueError("A numeral table needs exactly 10 entries")
        self.month_names = list(month_names)
        self.month_names_short = list(month_names_short)
        self.day_names = list(day_names)
        self.day_names_short = list(day_names_short)
        self.numbers = list(numbers) if numbers is not None else None
        self.today = today

def default_locale():
    """Build the English locale."""
    return Locale(MONTH_NAMES, MONTH_NAMES_SHORT, DAY_NAMES, DAY_NAMES_SHORT)

class LocaleConfig:
    """Registry of locales with one of them selected as the default.

    Date helpers take a ``locale`` argument; this registry only resolves
    the fallback when none is passed.
    """
    def __init__(self):
        self.locales = {'': default_locale()}
        self.default_locale = ''

    def register(self, key, locale):
        """Add or replace a locale under ``key``."""
        self.locales[key] = locale

    def set_default(self, key):
        """Select the locale used when callers pass none."""
        if key not in self.locales:
            raise KeyError(f"Unknown locale: {key}")
        self.default_locale = key

    def get_locale(self, key=None):
        """Return the locale registered under ``key`` or the default one."""
        return self.locales[self.default_locale if key is None else key]

locale_config = LocaleConfig()

def resolve_locale(locale=None):
    """Return ``locale`` or the process-wide default."""
    return locale if locale is not None else locale_config.get_locale()
