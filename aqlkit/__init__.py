"""aqlkit – injection-safe AQL query construction.

Write the query, bind the values.

Public API
----------
``aql``
    Assemble a query from literal text fragments and interpolated values.
    Values become bind parameters; collections, graphs and views become
    ``@@`` collection bind parameters; nested queries are inlined.

``literal``
    Mark a trusted scalar to be inlined as raw AQL text.

``join``
    Combine a list of values or sub-queries with a literal separator.

``from_template``
    Build a query from a PEP 750 template string (``t"..."``).

Re-exported types
-----------------
``AqlQuery``, ``GeneratedAqlQuery``, ``AqlLiteral``, ``UNDEFINED``, the
named resource references and recognisers, and all error classes.

Example::

    from aqlkit import CollectionRef, aql

    users = CollectionRef(name="users")
    q = aql(["FOR u IN ", " FILTER u.email == ", " RETURN u"], users, email)
    cursor = client.query(**q.to_request())
"""

from __future__ import annotations

from aqlkit.compile.builder import aql, from_template, join
from aqlkit.compile.values import AqlValue
from aqlkit.errors import AqlKitError, BindVarConflictError, TemplateArityError
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
)

__all__ = [
    # Builder
    "aql",
    "literal",
    "join",
    "from_template",
    # Query records
    "AqlQuery",
    "GeneratedAqlQuery",
    "is_aql_query",
    "is_generated_aql_query",
    # Types
    "AqlValue",
    # Literals
    "AqlLiteral",
    "UNDEFINED",
    "is_aql_literal",
    # Named resources
    "NamedResource",
    "ResourceKind",
    "CollectionRef",
    "GraphRef",
    "ViewRef",
    "is_named_resource",
    "is_arango_collection",
    "is_arango_graph",
    "is_arango_view",
    # Errors
    "AqlKitError",
    "TemplateArityError",
    "BindVarConflictError",
]
