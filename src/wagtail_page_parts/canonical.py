"""Rule-based derivation of the rel=canonical URL.

Rules are evaluated in a fixed order and the first one that applies wins:

1. ``url_go_max``: keep path segments ``0..url_go_max`` and drop the query
   string. Applies only if the request has a segment at that index.
2. ``query_count_max``: if the request carries more query parameters than
   this, the canonical URL is the full current URL.
"""

from __future__ import annotations

import logging
import numbers
import re
from collections.abc import Mapping
from typing import Any, NamedTuple

from .routing import BaseRouter

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)"
)


def coerce_int(value: Any) -> int:
    """Convert a rule value to int without raising.

    Numbers are truncated toward zero. Strings are read up to the first
    character that cannot continue a number, so ``"3rd"`` gives 3 and
    ``"1e3"`` gives 1000. Values that carry no usable number give 0.
    """
    if isinstance(value, numbers.Number):
        return _truncate(value, value)
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match:
            text = match.group(1)
            try:
                number: int | float = int(text)
            except ValueError:
                number = float(text)
            result = _truncate(number, value)
            if match.end() != len(value.rstrip()):
                logger.warning("Rule value %r coerced to %d", value, result)
            return result
    logger.warning("Rule value %r is not a number, using 0", value)
    return 0


def _truncate(number: Any, original: Any) -> int:
    try:
        result = int(number)
    except (ValueError, OverflowError, TypeError):
        logger.warning("Rule value %r has no integer value, using 0", original)
        return 0
    if result != number:
        logger.warning("Rule value %r coerced to %d", original, result)
    return result


class CanonicalRules(NamedTuple):
    """Normalized canonical rule set. ``None`` means the rule is not configured."""

    url_go_max: int | None = None
    query_count_max: int | None = None

    @classmethod
    def from_mapping(cls, ruleset: Mapping[str, Any] | None) -> CanonicalRules:
        if not ruleset:
            return cls()
        return cls(
            url_go_max=_optional_int(ruleset.get("url_go_max")),
            query_count_max=_optional_int(ruleset.get("query_count_max")),
        )


def _optional_int(value: Any) -> int | None:
    return None if value is None else coerce_int(value)


def derive_canonical(rules: CanonicalRules, router: BaseRouter) -> str | None:
    """Compute the canonical URL for the current request.

    Returns None when no rule applies.
    """
    canonical: str | None = None

    if rules.url_go_max is not None:
        last = rules.url_go_max
        if router.get_url_part(last) is not None:
            canonical = "".join(
                f"/{router.get_url_part(index)}" for index in range(last + 1)
            )

    if canonical is None and rules.query_count_max is not None:
        if len(router.get_url_query()) > rules.query_count_max:
            canonical = router.get_url()

    logger.debug("Derived canonical URL %r from %r", canonical, rules)
    return canonical
