"""Management command to preview the canonical URL derived for a path."""

from __future__ import annotations

import logging

from django.core.management.base import BaseCommand, CommandError, CommandParser
from django.test import RequestFactory

from wagtail_page_parts.canonical import CanonicalRules
from wagtail_page_parts.conf import get_setting
from wagtail_page_parts.template import PageTemplate

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Show the rel=canonical URL that a rule set derives for a request path."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "path",
            help="Request path including the query string, e.g. '/shop/cat/item/?page=2'.",
        )
        parser.add_argument(
            "--url-go-max",
            type=int,
            help="Highest path segment index to keep.",
        )
        parser.add_argument(
            "--query-count-max",
            type=int,
            help="Use the full URL when there are more query parameters than this.",
        )

    def handle(self, **options: object) -> None:
        path = options.get("path")
        if not isinstance(path, str) or not path.startswith("/"):
            raise CommandError(f"Path must start with '/': {path!r}")

        rules = self._resolve_rules(
            options.get("url_go_max"),  # type: ignore[arg-type]
            options.get("query_count_max"),  # type: ignore[arg-type]
        )
        self.stdout.write(
            f"Rules: url_go_max={rules.url_go_max}, "
            f"query_count_max={rules.query_count_max}"
        )

        request = RequestFactory().get(path)
        template = PageTemplate.for_request(request)
        canonical = template.rel_canonical_rules(rules, return_only=True)

        if canonical is None:
            self.stdout.write("No canonical URL derived.")
            return
        self.stdout.write(self.style.SUCCESS(f"Canonical: {canonical}"))

    def _resolve_rules(
        self, url_go_max: int | None, query_count_max: int | None
    ) -> CanonicalRules:
        """Use the CLI rules, or the CANONICAL_RULES setting when none are given."""
        if url_go_max is None and query_count_max is None:
            logger.debug("No rules on the command line, using CANONICAL_RULES")
            return CanonicalRules.from_mapping(get_setting("CANONICAL_RULES"))
        return CanonicalRules(url_go_max=url_go_max, query_count_max=query_count_max)
