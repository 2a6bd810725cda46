"""AQL query records produced by the builder.

``AqlQuery`` is the boundary artifact handed to whatever executes queries:
a query string plus its bind parameters.  ``GeneratedAqlQuery`` is what the
builder returns; it additionally keeps the fragments and values it was built
from in a private attribute so it can be re-expanded when nested inside
another query.  That source never appears in ``model_dump()`` or
:meth:`AqlQuery.to_request`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from aqlkit.errors import BindVarConflictError


@dataclass(frozen=True)
class AqlSource:
    """Ordered fragments and values a generated query was assembled from.

    Attributes:
        strings: ``len(args) + 1`` literal text fragments.
        args: Interpolated values, after nested queries were inlined.
    """

    strings: tuple[str, ...]
    args: tuple[Any, ...]


class AqlQuery(BaseModel):
    """An AQL query string and its bind parameters.

    Attributes:
        query: AQL text with ``@name`` / ``@@name`` placeholders.
        bind_vars: Bind parameter values by name.  Names of collection,
            graph and view parameters carry a leading ``@``.  Serialised as
            ``bindVars``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: str
    bind_vars: dict[str, Any] = Field(default_factory=dict, alias="bindVars")

    def to_request(self) -> dict[str, Any]:
        """Return the ``{"query", "bindVars"}`` record sent to the server.

        Bound values are passed through untouched; serialising them is the
        transport's job.
        """
        return {"query": self.query, "bindVars": dict(self.bind_vars)}

    def with_bind_vars(self, runtime: Mapping[str, Any]) -> AqlQuery:
        """Return a plain query with runtime bind vars merged in.

        Use this for placeholders written by hand in a literal fragment
        (e.g. ``@tenant``) whose value is only known at execution time::

            q = aql(["FOR d IN docs FILTER d.tenant == @tenant RETURN d"])
            q.with_bind_vars({"tenant": tenant_id}).to_request()

        Args:
            runtime: Extra bind parameter values by name.

        Returns:
            A new :class:`AqlQuery` combining generated and runtime values.

        Raises:
            BindVarConflictError: If a runtime name is already generated.
        """
        conflicts = sorted(name for name in runtime if name in self.bind_vars)
        if conflicts:
            raise BindVarConflictError(conflicts)
        return AqlQuery(query=self.query, bind_vars={**self.bind_vars, **runtime})

    def __eq__(self, other: object) -> bool:
        # Private attributes (the builder's replay source) never take part.
        if not isinstance(other, AqlQuery):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.query == other.query
            and self.bind_vars == other.bind_vars
        )


class GeneratedAqlQuery(AqlQuery):
    """An :class:`AqlQuery` produced by the builder.

    Only the builder creates these; see :func:`aqlkit.compile.builder.aql`.
    An instance built any other way has no source and is bound as a value.
    """

    _source: AqlSource | None = PrivateAttr(default=None)

    @classmethod
    def _from_source(
        cls,
        query: str,
        bind_vars: dict[str, Any],
        source: AqlSource,
    ) -> GeneratedAqlQuery:
        generated = cls(query=query, bind_vars=bind_vars)
        generated._source = source
        return generated


def is_aql_query(value: Any) -> bool:
    """Indicate whether ``value`` is a query record.

    Accepts :class:`AqlQuery` instances and plain mappings with a string
    ``query`` and a ``bindVars`` mapping.
    """
    if isinstance(value, AqlQuery):
        return True
    return (
        isinstance(value, Mapping)
        and isinstance(value.get("query"), str)
        and isinstance(value.get("bindVars"), Mapping)
    )


def is_generated_aql_query(value: Any) -> bool:
    """Indicate whether ``value`` was produced by the builder."""
    return isinstance(value, GeneratedAqlQuery) and value._source is not None
