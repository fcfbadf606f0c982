"""Page template parts builder."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from django.http import HttpRequest

from .assets import AssetRegistry, resolve_static_path, script_tag, stylesheet_tag
from .canonical import CanonicalRules, derive_canonical
from .conf import BaseConfig, SettingsConfig, get_setting
from .locale import BaseLocale, DjangoLocale
from .parts import PartsStore, is_empty
from .routing import BaseRouter, RequestRouter

HEAD = "head"
BOTTOM = "bottom"
REL_CANONICAL = "rel_canonical"


class PageTemplate:
    """Per-request composition point between page logic and the final render.

    Views, hooks and page models write parts, register CSS/JS and derive the
    canonical URL here; the rendering step reads the parts back with ``get()``.
    One instance serves exactly one render and is not safe to share between
    threads.

    Collaborators:
        router: Path segments, query parameters and URL of the request.
        config: Site configuration; ``get("cdn_prefix")`` is read for assets.
            Defaults to ``SettingsConfig``.
        locale: Translation service, exposed untouched as ``locale``.
            Defaults to ``DjangoLocale``.
    """

    def __init__(
        self,
        router: BaseRouter,
        config: BaseConfig | None = None,
        locale: BaseLocale | None = None,
    ) -> None:
        self.router = router
        self.config_provider = config if config is not None else SettingsConfig()
        self._locale = locale if locale is not None else DjangoLocale()
        self.parts = PartsStore()
        self.assets = AssetRegistry()
        self._settings: dict[str, Any] = {}

    @classmethod
    def for_request(
        cls,
        request: HttpRequest,
        config: BaseConfig | None = None,
        locale: BaseLocale | None = None,
    ) -> PageTemplate:
        return cls(RequestRouter(request), config=config, locale=locale)

    # Parts

    def set(self, part: str | Iterable[str], value: Any) -> Any:
        return self.parts.set(part, value)

    def set_batch(self, parts: Iterable[str], value: Any) -> None:
        self.parts.set_batch(parts, value)

    def push_init(self, part: str, first_value: Any = None) -> None:
        self.parts.push_init(part, first_value)

    def push(self, part: str, value: Any) -> None:
        self.parts.push(part, value)

    def append(self, part: str, value: str) -> str:
        return self.parts.append(part, value)

    def get(self, parts: str | Iterable[str] | None = None) -> Any:
        return self.parts.get(parts)

    # Instance settings

    def get_setting(self, key: str, default: Any = None) -> Any:
        return self._settings.get(key, default)

    def set_setting(self, key: str, value: Any) -> None:
        self._settings[key] = value

    def config(self, key: str, value: Any = None) -> Any:
        """Write ``value`` under ``key``, or read ``key`` when value is None.

        Passing None never deletes a setting; it is always a read.
        """
        if value is not None:
            self.set_setting(key, value)
            return None
        return self.get_setting(key)

    @property
    def locale(self) -> BaseLocale:
        return self._locale

    # Static assets

    def css(self, url: str) -> bool:
        """Add a stylesheet link to the ``head`` part.

        Returns False if the resolved URL was already added in this render.
        """
        url = self._static_path(url, get_setting("CSS_DIR"))
        if not self.assets.register(url):
            return False

        self.push(HEAD, stylesheet_tag(url))
        return True

    def js(self, url: str, is_async: bool = False, top: bool = True) -> bool:
        """Add a script tag to the ``head`` part, or to ``bottom`` if not ``top``.

        Returns False if the resolved URL was already added in this render.
        """
        url = self._static_path(url, get_setting("JS_DIR"))
        if not self.assets.register(url):
            return False

        self.push(HEAD if top else BOTTOM, script_tag(url, is_async=is_async))
        return True

    def _static_path(self, url: str, default_dir: str) -> str:
        return resolve_static_path(
            url, default_dir, self.config_provider.get("cdn_prefix")
        )

    # Canonical URL

    def rel_canonical_rules(
        self,
        ruleset: Mapping[str, Any] | CanonicalRules | None = None,
        *,
        return_only: bool = False,
        rewrite: bool = False,
    ) -> str | None:
        """Derive the canonical URL and store it in the ``rel_canonical`` part.

        Args:
            ruleset: ``url_go_max`` and/or ``query_count_max``, see
                ``wagtail_page_parts.canonical``.
            return_only: Only compute the URL, leave the part untouched.
            rewrite: Overwrite a value already stored by a parent page. Without
                it the result is stored only if the part is empty.

        Returns:
            The derived URL, or None if no rule applied. Returned whether or
            not it was stored.
        """
        if not isinstance(ruleset, CanonicalRules):
            ruleset = CanonicalRules.from_mapping(ruleset)

        canonical = derive_canonical(ruleset, self.router)

        if not return_only and (is_empty(self.get(REL_CANONICAL)) or rewrite):
            self.set(REL_CANONICAL, canonical)

        return canonical
