"""Trusted AQL literals and the ``UNDEFINED`` sentinel.

An :class:`AqlLiteral` is inlined verbatim into the query text instead of
becoming a bind parameter.  Nesting ``aql`` calls is the safer way to compose
queries; literals exist for trusted fragments that only arrive as strings
(e.g. read from a configuration file).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class _Undefined:
    """Marker for an absent value.

    ``None`` binds as AQL ``null``; ``UNDEFINED`` contributes nothing to the
    query, which lets optional fragments collapse cleanly.
    """

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


@dataclass(frozen=True)
class AqlLiteral:
    """A value that renders as raw AQL text.

    Attributes:
        value: The wrapped scalar.  ``UNDEFINED`` renders as an empty string.
    """

    value: Any = UNDEFINED

    def to_aql(self) -> str:
        """Return the text inlined into the query for this literal.

        Integral floats render without a fractional part (``1.0`` → ``1``).
        """
        value = self.value
        if value is UNDEFINED:
            return ""
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)


def literal(value: Any = UNDEFINED) -> AqlLiteral:
    """Mark ``value`` as safe to inline directly into an AQL query.

    Prefer nesting ``aql`` queries; only use this for trusted text::

        # WARNING: the environment variable is trusted to be safe
        sort = literal(os.environ["SORT_DIRECTION"])
        aql(["FOR u IN users SORT u.name ", " RETURN u"], sort)

    Args:
        value: A string, number, boolean, ``None``, ``UNDEFINED`` or an
            existing :class:`AqlLiteral`.

    Returns:
        ``value`` itself when it already is an :class:`AqlLiteral`, otherwise
        a new literal wrapping it.
    """
    if isinstance(value, AqlLiteral):
        return value
    return AqlLiteral(value)


def is_aql_literal(value: Any) -> bool:
    """Indicate whether ``value`` is an :class:`AqlLiteral`."""
    return isinstance(value, AqlLiteral)
