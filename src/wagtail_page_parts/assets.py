"""Static asset path resolution and per-render deduplication."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Marker for URLs that are already absolute; these are never rewritten.
ABSOLUTE_MARKER = "//:"


def resolve_static_path(
    url: str, default_dir: str, cdn_prefix: str | None = None
) -> str:
    """Build the final URL for a static asset.

    Relative paths are joined onto ``default_dir`` first; the CDN prefix is
    applied afterwards, so ``"a.js"`` becomes ``cdn_prefix + default_dir + "a.js"``.
    """
    if ABSOLUTE_MARKER in url:
        return url

    if not url.startswith("/"):
        url = f"{default_dir}{url}"

    if cdn_prefix:
        url = f"{cdn_prefix}{url}"

    return url


class AssetRegistry:
    """Resolved asset URLs already emitted during the current render."""

    def __init__(self) -> None:
        self._urls: dict[str, None] = {}

    def __contains__(self, url: object) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)

    @property
    def urls(self) -> tuple[str, ...]:
        return tuple(self._urls)

    def register(self, url: str) -> bool:
        """Record ``url``. Returns False if it was registered before."""
        if url in self._urls:
            logger.debug("Skipping already registered asset: %s", url)
            return False
        self._urls[url] = None
        return True


def stylesheet_tag(url: str) -> str:
    return f'<link rel="stylesheet" type="text/css" href="{url}">'


def script_tag(url: str, is_async: bool = False) -> str:
    async_attr = " async" if is_async else ""
    return f'<script src="{url}"{async_attr}></script>'
