"""Named template parts accumulated during a single render.

A part is a slot in an untyped mapping. Callers pick one access pattern per
name and stick to it for the whole render:

- scalar: ``set()`` / ``set_batch()``
- list: ``push_init()`` / ``push()``
- string: ``append()``
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping, Sized
from types import MappingProxyType
from typing import Any


class PartTypeError(TypeError):
    """A part was written with an access pattern that does not fit its value."""

    def __init__(self, part: str, expected: str, actual: Any) -> None:
        self.part = part
        self.expected = expected
        self.actual_type = type(actual).__name__
        super().__init__(
            f"Part {part!r} holds {self.actual_type}, expected {expected}"
        )


def is_empty(value: Any) -> bool:
    """Return True if ``value`` counts as "nothing to contribute".

    Empty means: None, False, numeric zero, or an empty sized value such as
    ``""``, ``[]``, ``()``, ``{}`` and ``set()``. The string ``"0"`` is not
    empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


class PartsStore:
    """Untyped mapping from part name to value."""

    def __init__(self) -> None:
        self._parts: dict[str, Any] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._parts

    def __len__(self) -> int:
        return len(self._parts)

    def view(self) -> Mapping[str, Any]:
        """Return a read-only mapping that reflects later writes."""
        return MappingProxyType(self._parts)

    def set(self, name: str | Iterable[str], value: Any) -> Any:
        """Overwrite one part, or every part in a list of names."""
        if isinstance(name, (list, tuple, set, frozenset)):
            self.set_batch(name, value)
        else:
            self._parts[name] = value
        return value

    def set_batch(self, names: Iterable[str], value: Any) -> None:
        for name in names:
            # Each slot gets its own list so a later push stays local.
            self._parts[name] = list(value) if isinstance(value, list) else value

    def push_init(self, name: str, first_value: Any = None) -> None:
        """Reset ``name`` to an empty list, optionally seeded."""
        self._parts[name] = []
        if not is_empty(first_value):
            self._parts[name].append(first_value)

    def push(self, name: str, value: Any) -> None:
        """Append ``value`` to the list at ``name``; empty values are skipped."""
        if is_empty(value):
            return

        current = self._parts.get(name)
        if current is None:
            self._parts[name] = [value]
        elif isinstance(current, list):
            current.append(value)
        else:
            raise PartTypeError(name, "list", current)

    def append(self, name: str, value: str) -> str:
        """Concatenate ``value`` onto the string at ``name``.

        Raises:
            PartTypeError: the part already holds something other than a string.
        """
        current = self._parts.get(name)
        if current is None:
            current = ""
        elif not isinstance(current, str):
            raise PartTypeError(name, "str", current)

        self._parts[name] = current + value
        return self._parts[name]

    def get(self, names: str | Iterable[str] | None = None) -> Any:
        """Read parts back.

        - no argument: a copy of the whole mapping
        - a name: its value, or None
        - a list of names: a dict of those names, missing ones mapped to None
        """
        if names is None:
            return dict(self._parts)
        if isinstance(names, (list, tuple, set, frozenset)):
            return {key: self._parts.get(key) for key in names}
        return self._parts.get(names)
