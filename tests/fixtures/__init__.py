"""Test fixtures: stand-ins for client-side resource objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ClientCollection:
    """Mimics a database client's collection wrapper.

    Only ``name`` and ``resource_kind`` matter to the builder; the tag is a
    plain string, as client libraries usually store it.
    """

    name: str
    resource_kind: str = "collection"
    count: int = 0


def client_collection(name: str, edge: bool = False) -> ClientCollection:
    """Return a client-style collection wrapper for ``name``."""
    return ClientCollection(name=name, resource_kind="edge-collection" if edge else "collection")
