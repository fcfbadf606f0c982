"""Configuration and settings for wagtail-page-parts."""

from abc import ABC, abstractmethod
from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    # Prepended to every resolved static path, e.g. "https://cdn.example.com"
    "CDN_PREFIX": None,
    # Default directories for relative asset paths
    "CSS_DIR": "/style/css/",
    "JS_DIR": "/style/js/",
    # Site-wide canonical rule set, used when a page defines none
    "CANONICAL_RULES": {},
    # Request attribute and template context names
    "REQUEST_ATTR": "page_template",
    "CONTEXT_NAME": "page_parts",
}


_UNSET = object()


def get_setting(key: str, default: Any = _UNSET) -> Any:
    """Get a setting from WAGTAIL_PAGE_PARTS dict or return default."""
    user_settings: dict[str, Any] = getattr(settings, "WAGTAIL_PAGE_PARTS", {})
    fallback = DEFAULTS.get(key) if default is _UNSET else default
    return user_settings.get(key, fallback)


class BaseConfig(ABC):
    """Read-only key/value configuration used by ``PageTemplate``."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value for ``key``, or None if it is not configured."""
        ...


class SettingsConfig(BaseConfig):
    """Read-only key lookup backed by the WAGTAIL_PAGE_PARTS settings dict.

    Keys are looked up case-insensitively, so ``get("cdn_prefix")`` reads
    ``WAGTAIL_PAGE_PARTS["CDN_PREFIX"]``.
    """

    def get(self, key: str) -> Any:
        return get_setting(key.upper())
