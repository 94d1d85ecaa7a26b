# Core modules initialization
from scrollcal.core.locale import Locale, LocaleConfig, locale_config
from scrollcal.core.models import ItemLayout, ViewToken

__all__ = ['Locale', 'LocaleConfig', 'locale_config', 'ItemLayout', 'ViewToken']
