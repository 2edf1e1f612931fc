"""Locale tables and their resolution into word separator configuration."""

from .loader import LocaleLoadError, load_default_locales, load_locales, load_locales_from_string
from .schema import LocaleSpacing, LocaleTable
from .spacing import CODE_PERIOD, SpacingAndPunctuations, get_spacing, resolve_spacing
from .tags import InvalidLocaleError, normalize_tag

__all__ = [
    'CODE_PERIOD', 'InvalidLocaleError', 'LocaleLoadError', 'LocaleSpacing', 'LocaleTable',
    'SpacingAndPunctuations', 'get_spacing', 'load_default_locales', 'load_locales',
    'load_locales_from_string', 'normalize_tag', 'resolve_spacing',
]
