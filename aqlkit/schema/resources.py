"""Named resource references: collections, graphs and views.

Database clients hand these objects to the query builder.  Anything that
exposes a ``name`` string and a :class:`ResourceKind` ``resource_kind`` tag
is recognised, so client-side collection or graph wrappers only need to
carry those two attributes.  The pydantic models below are ready-made
references for callers that do not have a client object at hand.

Usage::

    from aqlkit.schema.resources import CollectionRef

    users = CollectionRef(name="users")
    aql(["FOR u IN ", " RETURN u"], users)
    # query: FOR u IN @@value0 RETURN u
    # bindVars: {"@value0": "users"}
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


class ResourceKind(str, Enum):
    """Kind tag carried by every named resource reference."""

    COLLECTION = "collection"
    EDGE_COLLECTION = "edge-collection"
    GRAPH = "graph"
    VIEW = "view"


_COLLECTION_KINDS = frozenset({ResourceKind.COLLECTION, ResourceKind.EDGE_COLLECTION})


@runtime_checkable
class NamedResource(Protocol):
    """Structural type for collection, graph and view references."""

    name: str
    resource_kind: ResourceKind


# ---------------------------------------------------------------------------
# Reference models
# ---------------------------------------------------------------------------

_FROZEN = ConfigDict(frozen=True, extra="forbid")


class CollectionRef(BaseModel):
    """A document or edge collection: ``CollectionRef(name="users")``.

    Attributes:
        name: Collection name.
        edge: ``True`` for an edge collection.
    """

    model_config = _FROZEN

    name: str
    edge: bool = False

    @property
    def resource_kind(self) -> ResourceKind:
        return ResourceKind.EDGE_COLLECTION if self.edge else ResourceKind.COLLECTION


class GraphRef(BaseModel):
    """A named graph: ``GraphRef(name="social")``."""

    model_config = _FROZEN

    name: str

    @property
    def resource_kind(self) -> ResourceKind:
        return ResourceKind.GRAPH


class ViewRef(BaseModel):
    """An ArangoSearch or search-alias view: ``ViewRef(name="docs_view")``."""

    model_config = _FROZEN

    name: str

    @property
    def resource_kind(self) -> ResourceKind:
        return ResourceKind.VIEW


# ---------------------------------------------------------------------------
# Recognisers
# ---------------------------------------------------------------------------


def resource_kind_of(value: Any) -> ResourceKind | None:
    """Return the kind tag of ``value``, or ``None`` if it is not a named resource.

    Both :class:`ResourceKind` members and their string values are accepted
    as tags; the name must be a string.
    """
    if not isinstance(getattr(value, "name", None), str):
        return None
    tag = getattr(value, "resource_kind", None)
    try:
        return ResourceKind(tag)
    except ValueError:
        return None


def is_named_resource(value: Any) -> bool:
    """Indicate whether ``value`` is a collection, graph or view reference."""
    return resource_kind_of(value) is not None


def is_arango_collection(value: Any) -> bool:
    """Indicate whether ``value`` references a document or edge collection."""
    return resource_kind_of(value) in _COLLECTION_KINDS


def is_arango_graph(value: Any) -> bool:
    """Indicate whether ``value`` references a named graph."""
    return resource_kind_of(value) is ResourceKind.GRAPH


def is_arango_view(value: Any) -> bool:
    """Indicate whether ``value`` references a view."""
    return resource_kind_of(value) is ResourceKind.VIEW
