"""Bind parameter accumulator for a single ``aql`` invocation."""
from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any


def _identity_key(value: Any) -> Hashable:
    """Key under which equal values share one bind parameter.

    ``None``, booleans, numbers and strings match by value (booleans never
    match numbers), except NaN, which never matches.  Every other object
    matches only itself.
    """
    if value is None:
        return ("null",)
    if isinstance(value, bool):
        return ("bool", value)
    if type(value) is float and value != value:
        return ("nan", object())
    if type(value) in (int, float):
        return ("number", value)
    if type(value) is str:
        return ("string", value)
    return ("object", id(value))


@dataclass
class BindRegistry:
    """Assigns ``value<N>`` names in order of first appearance.

    Values are kept alive in ``values`` for the whole invocation so that
    identity keys stay unique.
    """

    bind_vars: dict[str, Any] = field(default_factory=dict)
    values: list[Any] = field(default_factory=list)
    _index: dict[Hashable, int] = field(default_factory=dict)

    def bind(self, value: Any, resource: bool = False) -> str:
        """Register ``value`` if new and return its placeholder text.

        Resources bind under an ``@``-prefixed name to their name string.
        """
        key = _identity_key(value)
        index = self._index.get(key)
        is_known = index is not None
        if not is_known:
            index = len(self.values)
        name = f"value{index}"
        bound = value
        if resource:
            name = f"@{name}"
            bound = value.name
        if not is_known:
            self._index[key] = index
            self.values.append(value)
            self.bind_vars[name] = bound
        return f"@{name}"
