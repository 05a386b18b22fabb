"""Simplified GraphQL document model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Location:
    """Source span of a node (line and column are 1-based)."""

    start: int
    end: int
    line: int
    column: int


@dataclass(frozen=True)
class SelectionSet:
    """Ordered selections enclosed by one pair of braces."""

    nodes: tuple["Node", ...] = ()
    location: Optional[Location] = None


@dataclass(frozen=True)
class Name:
    text: str
    location: Optional[Location] = None


@dataclass(frozen=True)
class Field:
    """
    Field selection.

    `selection_set` is None for a leaf field, which is distinct from a
    field with an empty selection set.
    """

    name: str
    arguments: Optional[tuple[Any, ...]] = None  # graphql ArgumentNode
    selection_set: Optional[SelectionSet] = None
    directives: Optional[tuple[Any, ...]] = None  # graphql DirectiveNode
    location: Optional[Location] = None


@dataclass(frozen=True)
class FragmentSpread:
    """Reference to a fragment by name, e.g. `...deviceFields`."""

    name: str
    location: Optional[Location] = None
    # Original graphql FragmentSpreadNode
    node: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class FragmentDefinition:
    name: str
    type_condition: str
    selection_set: Optional[SelectionSet] = None
    directives: Optional[tuple[Any, ...]] = None
    location: Optional[Location] = None


@dataclass(frozen=True)
class Query:
    selection_set: SelectionSet
    name: Optional[str] = None
    directives: Optional[tuple[Any, ...]] = None
    variables: Optional[tuple[Any, ...]] = None  # graphql VariableDefinitionNode


@dataclass(frozen=True)
class Mutation:
    selection_set: SelectionSet
    name: Optional[str] = None
    directives: Optional[tuple[Any, ...]] = None
    variables: Optional[tuple[Any, ...]] = None


Node = Union[Name, SelectionSet, Field, FragmentSpread, FragmentDefinition, Query, Mutation]


@dataclass(frozen=True)
class Document:
    """Top-level queries, mutations and fragment definitions in source order."""

    nodes: tuple[Node, ...] = ()


@dataclass(frozen=True)
class QueryOperation:
    query: Query


@dataclass(frozen=True)
class MutationOperation:
    mutation: Mutation


Operation = Union[QueryOperation, MutationOperation]


class ValidationResult(Enum):
    """Outcome of the root operation check against a schema."""

    SUCCESS = "Success"
    NO_QUERY_OR_MUTATION_PROVIDED = "NoQueryOrMutationProvided"
    SCHEMA_DOES_NOT_HAVE_QUERY_TYPE = "SchemaDoesNotHaveQueryType"
    SCHEMA_DOES_NOT_HAVE_MUTATION_TYPE = "SchemaDoesNotHaveMutationType"
