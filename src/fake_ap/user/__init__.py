"""User – the ``AP.user`` namespace."""
from fake_ap.user.locale import DEFAULT_LOCALE, LocaleResolver

__all__ = ["DEFAULT_LOCALE", "LocaleResolver"]
