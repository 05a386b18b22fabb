"""Conversion of graphql-core AST nodes into the simplified node model."""

import logging
from typing import Callable, Optional

from graphql import (
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    NameNode,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
)

from . import utils
from .nodes import (
    Field,
    FragmentDefinition,
    FragmentSpread,
    Mutation,
    Name,
    Node,
    Query,
    SelectionSet,
)

logger = logging.getLogger(__name__)


def read_selections(selection_set: SelectionSetNode) -> SelectionSet:
    """
    Read every child selection, in order.

    Selections of unsupported kinds are left out, so the result may hold
    fewer nodes than the source selection set.
    """
    nodes = (read_node(selection) for selection in selection_set.selections)
    return SelectionSet(
        nodes=tuple(node for node in nodes if node is not None),
        location=utils.location(selection_set),
    )


def _optional_selections(selection_set: Optional[SelectionSetNode]) -> Optional[SelectionSet]:
    if selection_set is None:
        return None
    return read_selections(selection_set)


def _read_name(node: NameNode) -> Name:
    return Name(text=node.value, location=utils.location(node))


def _read_selection_set(node: SelectionSetNode) -> SelectionSet:
    return read_selections(node)


def _read_field(node: FieldNode) -> Field:
    return Field(
        name=node.name.value,
        arguments=utils.list_or_none(node.arguments),
        selection_set=_optional_selections(node.selection_set),
        directives=utils.list_or_none(node.directives),
        location=utils.location(node),
    )


def _read_fragment_spread(node: FragmentSpreadNode) -> FragmentSpread:
    return FragmentSpread(name=node.name.value, location=utils.location(node), node=node)


def _read_fragment_definition(node: FragmentDefinitionNode) -> FragmentDefinition:
    return FragmentDefinition(
        name=node.name.value,
        type_condition=node.type_condition.name.value,
        selection_set=_optional_selections(node.selection_set),
        directives=utils.list_or_none(node.directives),
        location=utils.location(node),
    )


def _read_operation(node: OperationDefinitionNode) -> Optional[Node]:
    if node.operation == OperationType.QUERY:
        operation_cls = Query
    elif node.operation == OperationType.MUTATION:
        operation_cls = Mutation
    else:
        logger.debug("Dropping unsupported %s operation", node.operation.value)
        return None

    return operation_cls(
        name=node.name.value if node.name else None,
        directives=utils.list_or_none(node.directives),
        variables=utils.list_or_none(node.variable_definitions),
        selection_set=read_selections(node.selection_set),
    )


_READERS: dict[str, Callable] = {
    "name": _read_name,
    "selection_set": _read_selection_set,
    "field": _read_field,
    "fragment_spread": _read_fragment_spread,
    "fragment_definition": _read_fragment_definition,
    "operation_definition": _read_operation,
}


def read_node(node) -> Optional[Node]:
    """
    Convert one graphql-core AST node.

    Args:
        node: Any graphql-core AST node

    Returns:
        The simplified node, or None for kinds that are not supported
        (inline fragments, subscriptions, type system definitions, ...)
    """
    reader = _READERS.get(node.kind)
    if reader is None:
        logger.debug("Dropping unsupported node kind %r", node.kind)
        return None
    return reader(node)
