"""Template context processor exposing the assembled page parts."""

from __future__ import annotations

from typing import Any

from django.http import HttpRequest

from .conf import get_setting
from .middleware import get_page_template


def page_parts(request: HttpRequest) -> dict[str, Any]:
    """Add the parts mapping and its PageTemplate to the template context.

    The mapping is a live read-only view, so parts written while the
    template renders are visible to everything rendered after them.

    With the default settings, templates read ``{{ page_parts.rel_canonical }}``
    or ``{{ page_parts.head|safeseq|join:"" }}``.
    """
    template = get_page_template(request)
    return {
        get_setting("CONTEXT_NAME"): template.parts.view(),
        "page_template": template,
    }
