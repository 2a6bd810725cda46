"""Classification of interpolated values.

Every value passed to the builder falls into exactly one :class:`ValueKind`.
:func:`classify` checks the kinds in priority order, so a generated query
always wins over the other shapes and anything unrecognised is bound as a
parameter.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from aqlkit.schema.literal import UNDEFINED, AqlLiteral
from aqlkit.schema.query import is_generated_aql_query
from aqlkit.schema.resources import is_named_resource

#: Anything that can be interpolated into an ``aql`` template: a generated
#: query, an :class:`AqlLiteral`, a named resource, ``UNDEFINED``, or any
#: value to bind (scalars, ``None``, dicts, lists, arbitrary objects).
AqlValue = Any


class ValueKind(Enum):
    """How the builder treats an interpolated value."""

    GENERATED_QUERY = "generated_query"
    UNDEFINED = "undefined"
    LITERAL = "literal"
    RESOURCE = "resource"
    BIND = "bind"


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of an interpolated value."""
    if is_generated_aql_query(value):
        return ValueKind.GENERATED_QUERY
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if isinstance(value, AqlLiteral):
        return ValueKind.LITERAL
    if is_named_resource(value):
        return ValueKind.RESOURCE
    return ValueKind.BIND
