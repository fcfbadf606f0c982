"""Router collaborator: path segments, query and URL of the current request."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from django.http import HttpRequest


class BaseRouter(ABC):
    """Read-only view of the current request's routing state.

    Must stay stable for the duration of one render.
    """

    @abstractmethod
    def get_url_part(self, index: int) -> str | None:
        """Return the path segment at ``index``, or None if there is none."""
        ...

    @abstractmethod
    def get_url_query(self) -> Mapping[str, Any]:
        """Return the parsed query parameters."""
        ...

    @abstractmethod
    def get_url(self) -> str:
        """Return the current URL (path and query string)."""
        ...


class RequestRouter(BaseRouter):
    """Router backed by a Django ``HttpRequest``.

    Path segments are the non-empty pieces of ``request.path``, so
    ``/shop/cat/item/`` has segments ``["shop", "cat", "item"]``.
    """

    def __init__(self, request: HttpRequest) -> None:
        self.request = request
        self._segments = [part for part in request.path.split("/") if part]

    @property
    def segments(self) -> list[str]:
        return list(self._segments)

    def get_url_part(self, index: int) -> str | None:
        if 0 <= index < len(self._segments):
            return self._segments[index]
        return None

    def get_url_query(self) -> Mapping[str, Any]:
        return self.request.GET

    def get_url(self) -> str:
        return self.request.get_full_path()
