"""AQL template assembly.

``aql`` walks literal text fragments and interpolated values pairwise and
produces a :class:`~aqlkit.schema.query.GeneratedAqlQuery`.  Values become
bind parameters unless they are literals, ``UNDEFINED``, or generated queries
(which are inlined from their source so that all bind names stay unique
across the combined query).

Example::

    users = CollectionRef(name="users")
    q = aql(
        ["FOR u IN ", " FILTER u.email == ", " RETURN u"],
        users,
        untrusted_email,
    )
    # q.query     -> "FOR u IN @@value0 FILTER u.email == @value1 RETURN u"
    # q.bind_vars -> {"@value0": "users", "value1": untrusted_email}

Composition::

    active = aql(["FILTER u.active == ", ""], True)
    q = aql(["FOR u IN ", " ", " RETURN u"], users, active)
    # FOR u IN @@value0 FILTER u.active == @value1 RETURN u
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from aqlkit.compile.bind_registry import BindRegistry
from aqlkit.compile.values import AqlValue, ValueKind, classify
from aqlkit.errors import TemplateArityError
from aqlkit.schema.query import AqlSource, GeneratedAqlQuery

logger = logging.getLogger(__name__)


def aql(strings: Sequence[str] | str, *args: AqlValue) -> GeneratedAqlQuery:
    """Build an AQL query from template fragments and interpolated values.

    ``aql(["a ", " b"], x)`` reads as the text ``a {x} b`` with ``x``
    interpolated.  Always build dynamic queries this way instead of
    formatting values into a string: only placeholders end up in the query
    text, the values travel separately as bind parameters.

    Args:
        strings: ``len(args) + 1`` literal text fragments.  A single string
            is treated as a one-fragment template.
        *args: Values interpolated between consecutive fragments.

    Returns:
        A :class:`GeneratedAqlQuery` that can be executed or nested inside
        another ``aql`` call.

    Raises:
        TemplateArityError: If the fragment count is not ``len(args) + 1``.
    """
    fragments = [strings] if isinstance(strings, str) else list(strings)
    values = list(args)
    if len(fragments) != len(values) + 1:
        raise TemplateArityError(len(fragments), len(values))

    registry = BindRegistry()
    query = fragments[0]
    i = 0
    while i < len(values):
        value = values[i]
        kind = classify(value)

        if kind is ValueKind.GENERATED_QUERY:
            fragments, values, text = _inline(fragments, values, i, value)
            query += text
            # The slot now holds the first inlined value (or the next outer one).
            continue

        if kind is ValueKind.LITERAL:
            query += value.to_aql()
        elif kind is not ValueKind.UNDEFINED:
            query += registry.bind(value, resource=kind is ValueKind.RESOURCE)
        query += fragments[i + 1]
        i += 1

    logger.debug(
        "Assembled AQL from %d fragment(s) and %d value(s) into %d bind var(s)",
        len(fragments),
        len(values),
        len(registry.bind_vars),
    )
    return GeneratedAqlQuery._from_source(
        query,
        registry.bind_vars,
        AqlSource(strings=tuple(fragments), args=tuple(values)),
    )


def _inline(
    fragments: list[str],
    values: list[Any],
    i: int,
    nested: GeneratedAqlQuery,
) -> tuple[list[str], list[Any], str]:
    """Replace ``values[i]`` by the source of a nested generated query.

    Returns the new fragments, the new values, and the text to append to the
    query assembled so far (which already ends with ``fragments[i]``).
    """
    src = nested._source
    before, after = fragments[i], fragments[i + 1]
    if not src.args:
        merged = [before + nested.query + after]
        return (
            fragments[:i] + merged + fragments[i + 2 :],
            values[:i] + values[i + 1 :],
            nested.query + after,
        )
    head, *middle, tail = src.strings
    merged = [before + head, *middle, tail + after]
    return (
        fragments[:i] + merged + fragments[i + 2 :],
        values[:i] + list(src.args) + values[i + 1 :],
        head,
    )


def join(values: Sequence[AqlValue], sep: str = " ") -> GeneratedAqlQuery:
    """Join values into one query, separated by trusted literal text.

    Each value behaves exactly as if it were interpolated into a single
    ``aql`` call, so bind parameters are shared across all of them::

        filters = []
        if admins_only:
            filters.append(aql(["FILTER u.admin"]))
        if active_only:
            filters.append(aql(["FILTER u.active"]))
        q = aql(["FOR u IN ", " ", " RETURN u"], users, join(filters))

    Args:
        values: Values to join.
        sep: Separator inlined verbatim between values (never bound).

    Returns:
        A :class:`GeneratedAqlQuery`; empty when ``values`` is empty.
    """
    values = list(values)
    if not values:
        return aql([""])
    if len(values) == 1:
        return aql(["", ""], values[0])
    return aql(["", *([sep] * (len(values) - 1)), ""], *values)


def from_template(template: Any) -> GeneratedAqlQuery:
    """Build a query from a template object exposing ``strings`` and ``values``.

    This accepts PEP 750 template strings on interpreters that have them::

        q = from_template(t"FOR u IN {users} FILTER u.age > {min_age} RETURN u")
    """
    return aql(list(template.strings), *template.values)
