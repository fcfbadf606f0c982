"""Pytest fixtures for wagtail-page-parts tests."""

from unittest import mock

import pytest

from wagtail_page_parts.conf import BaseConfig
from wagtail_page_parts.routing import BaseRouter
from wagtail_page_parts.template import PageTemplate


class StaticRouter(BaseRouter):
    """Router with fixed segments and query, for tests."""

    def __init__(self, segments=(), query=None, url=None):
        self.segments = list(segments)
        self.query = dict(query or {})
        self.url = url if url is not None else "/" + "/".join(self.segments)

    def get_url_part(self, index):
        if 0 <= index < len(self.segments):
            return self.segments[index]
        return None

    def get_url_query(self):
        return self.query

    def get_url(self):
        return self.url


@pytest.fixture
def make_router():
    """Factory for StaticRouter instances."""
    return StaticRouter


@pytest.fixture
def shop_router():
    """Router for /shop/cat/item?a=1&b=2&c=3."""
    return StaticRouter(
        segments=["shop", "cat", "item"],
        query={"a": "1", "b": "2", "c": "3"},
        url="/shop/cat/item?a=1&b=2&c=3",
    )


@pytest.fixture
def mock_config():
    """Config provider with no CDN prefix."""
    config = mock.Mock(spec=BaseConfig)
    config.get.return_value = None
    return config


@pytest.fixture
def mock_locale():
    return mock.Mock()


@pytest.fixture
def template(shop_router, mock_config, mock_locale):
    """PageTemplate wired to test doubles."""
    return PageTemplate(shop_router, config=mock_config, locale=mock_locale)
