"""Wagtail hooks for page parts integration."""

from __future__ import annotations

from typing import Any

from django.http import HttpRequest
from wagtail import hooks
from wagtail.models import Page

from .conf import get_setting
from .middleware import get_page_template


@hooks.register("before_serve_page")
def apply_canonical_rules(
    page: Page,
    request: HttpRequest,
    args: list[Any],
    kwargs: dict[str, Any],
) -> None:
    """Store the page's default rel=canonical before the page is served.

    Pages declare their rules with a ``canonical_rules`` attribute; pages
    without one fall back to the ``CANONICAL_RULES`` setting. The value is
    only stored if nothing set it yet, so views can still override it with
    ``rel_canonical_rules(..., rewrite=True)``.
    """
    ruleset = getattr(page, "canonical_rules", None) or get_setting("CANONICAL_RULES")
    if not ruleset:
        return
    get_page_template(request).rel_canonical_rules(ruleset)
