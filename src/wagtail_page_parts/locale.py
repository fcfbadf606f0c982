"""Locale service handed through to templates untouched."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any

from django.utils import translation


class BaseLocale(ABC):
    """Translation service exposed by ``PageTemplate.locale``."""

    @property
    @abstractmethod
    def language(self) -> str | None: ...

    @abstractmethod
    def gettext(self, message: str) -> str: ...


class DjangoLocale(BaseLocale):
    """Locale backed by ``django.utils.translation``."""

    @property
    def language(self) -> str | None:
        return translation.get_language()

    def gettext(self, message: str) -> str:
        return translation.gettext(message)

    def ngettext(self, singular: str, plural: str, number: int) -> str:
        return translation.ngettext(singular, plural, number)

    def pgettext(self, context: str, message: str) -> str:
        return translation.pgettext(context, message)

    def override(self, language: str | None) -> AbstractContextManager[Any]:
        return translation.override(language)
