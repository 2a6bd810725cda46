"""aqlkit value models: query records, literals, named resource references."""
from aqlkit.schema.literal import UNDEFINED, AqlLiteral, is_aql_literal, literal
from aqlkit.schema.query import (
    AqlQuery,
    GeneratedAqlQuery,
    is_aql_query,
    is_generated_aql_query,
)
from aqlkit.schema.resources import (
    CollectionRef,
    GraphRef,
    NamedResource,
    ResourceKind,
    ViewRef,
    is_arango_collection,
    is_arango_graph,
    is_arango_view,
    is_named_resource,
    resource_kind_of,
)

__all__ = [
    "UNDEFINED",
    "AqlLiteral",
    "is_aql_literal",
    "literal",
    "AqlQuery",
    "GeneratedAqlQuery",
    "is_aql_query",
    "is_generated_aql_query",
    "CollectionRef",
    "GraphRef",
    "NamedResource",
    "ResourceKind",
    "ViewRef",
    "is_arango_collection",
    "is_arango_graph",
    "is_arango_view",
    "is_named_resource",
    "resource_kind_of",
]
