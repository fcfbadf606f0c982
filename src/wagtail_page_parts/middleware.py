"""Middleware attaching a fresh PageTemplate to every request."""

from __future__ import annotations

import logging
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from .conf import get_setting
from .template import PageTemplate

logger = logging.getLogger(__name__)


class PagePartsMiddleware:
    """Give each request its own ``PageTemplate``.

    Parts, settings and registered assets never leak between requests. The
    instance is stored on the request under the ``REQUEST_ATTR`` setting
    (``request.page_template`` by default).
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        attach_page_template(request)
        return self.get_response(request)


def attach_page_template(request: HttpRequest) -> PageTemplate:
    """Create a new PageTemplate for ``request``, replacing any existing one."""
    template = PageTemplate.for_request(request)
    setattr(request, get_setting("REQUEST_ATTR"), template)
    return template


def get_page_template(request: HttpRequest) -> PageTemplate:
    """Return the PageTemplate of ``request``, creating it if needed.

    Lets hooks and context processors work without the middleware installed.
    """
    template = getattr(request, get_setting("REQUEST_ATTR"), None)
    if isinstance(template, PageTemplate):
        return template
    logger.debug("No page template on request for %s, creating one", request.path)
    return attach_page_template(request)
