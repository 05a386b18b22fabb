"""Shared test fixtures and helpers."""

from types import SimpleNamespace

import pytest
from graphql import GraphQLField, GraphQLObjectType, GraphQLSchema, GraphQLString

from graphql_query_normalizer.nodes import Document, FragmentSpread
from graphql_query_normalizer.parser import parse


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns a Document."""

    def _parse(source: str) -> Document:
        result = parse(source)
        assert result.ok, f"Expected successful parse, got {result.error!r}"
        return result.document

    return _parse


def make_schema(query: bool = True, mutation: bool = True) -> GraphQLSchema:
    """Build a schema with the requested root types."""
    query_type = GraphQLObjectType("Query", {"hello": GraphQLField(GraphQLString)}) if query else None
    mutation_type = GraphQLObjectType("Mutation", {"ping": GraphQLField(GraphQLString)}) if mutation else None
    return GraphQLSchema(query=query_type, mutation=mutation_type)


def stub_schema(query: bool, mutation: bool) -> SimpleNamespace:
    """Schema stand-in exposing only the root type lookups."""
    return SimpleNamespace(
        query_type=object() if query else None,
        mutation_type=object() if mutation else None,
    )


def field_names(nodes) -> list[str]:
    """Names of the nodes, using `...Name` for fragment spreads."""
    names = []
    for node in nodes:
        if isinstance(node, FragmentSpread):
            names.append(f"...{node.name}")
        else:
            names.append(node.name)
    return names
