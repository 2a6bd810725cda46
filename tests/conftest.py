"""Shared pytest fixtures for aqlkit unit tests."""
from __future__ import annotations

import pytest

from aqlkit.schema.resources import CollectionRef, GraphRef, ViewRef
from tests.fixtures import ClientCollection, client_collection


@pytest.fixture
def users() -> CollectionRef:
    return CollectionRef(name="users")


@pytest.fixture
def knows() -> CollectionRef:
    """Edge collection between users."""
    return CollectionRef(name="knows", edge=True)


@pytest.fixture
def social() -> GraphRef:
    return GraphRef(name="social")


@pytest.fixture
def docs_view() -> ViewRef:
    return ViewRef(name="docs_view")


@pytest.fixture
def orders() -> ClientCollection:
    """A collection object as handed out by a database client."""
    return client_collection("orders")
