"""Output formatting and reporting."""

from typing import Any, Optional

from graphql import print_ast
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from . import utils
from .nodes import (
    Document,
    Field,
    FragmentDefinition,
    FragmentSpread,
    Location,
    Mutation,
    MutationOperation,
    Name,
    Node,
    Operation,
    Query,
    SelectionSet,
)

console = Console()


def _printed(items) -> Optional[list[str]]:
    if items is None:
        return None
    return [print_ast(item) for item in items]


def _location(loc: Optional[Location]) -> Optional[dict]:
    if loc is None:
        return None
    return {"line": loc.line, "column": loc.column, "start": loc.start, "end": loc.end}


def selection_set_to_dict(selection_set: Optional[SelectionSet]) -> Optional[dict]:
    if selection_set is None:
        return None
    return {
        "nodes": [node_to_dict(node) for node in selection_set.nodes],
        "location": _location(selection_set.location),
    }


def node_to_dict(node: Node) -> dict[str, Any]:
    """
    Convert a node to a JSON-ready dict.

    Arguments, directives and variable definitions are printed as GraphQL
    source text.
    """
    if isinstance(node, Name):
        return {"kind": "name", "text": node.text, "location": _location(node.location)}

    if isinstance(node, SelectionSet):
        return {"kind": "selection_set", **selection_set_to_dict(node)}

    if isinstance(node, Field):
        return {
            "kind": "field",
            "name": node.name,
            "arguments": _printed(node.arguments),
            "selection_set": selection_set_to_dict(node.selection_set),
            "directives": _printed(node.directives),
            "location": _location(node.location),
        }

    if isinstance(node, FragmentSpread):
        return {"kind": "fragment_spread", "name": node.name, "location": _location(node.location)}

    if isinstance(node, FragmentDefinition):
        return {
            "kind": "fragment_definition",
            "name": node.name,
            "type_condition": node.type_condition,
            "selection_set": selection_set_to_dict(node.selection_set),
            "directives": _printed(node.directives),
            "location": _location(node.location),
        }

    return {
        "kind": "query" if isinstance(node, Query) else "mutation",
        "name": node.name,
        "directives": _printed(node.directives),
        "variables": _printed(node.variables),
        "selection_set": selection_set_to_dict(node.selection_set),
    }


def document_to_dict(document: Document) -> dict[str, Any]:
    return {"nodes": [node_to_dict(node) for node in document.nodes]}


def _label(node: Node) -> str:
    if isinstance(node, Name):
        return f"[dim]name[/dim] {node.text}"
    if isinstance(node, SelectionSet):
        return "[dim]selection set[/dim]"
    if isinstance(node, Field):
        label = f"[cyan]{node.name}[/cyan]"
        if node.arguments:
            label += escape(f"({', '.join(_printed(node.arguments))})")
        return label
    if isinstance(node, FragmentSpread):
        return f"[yellow]...{node.name}[/yellow]"
    if isinstance(node, FragmentDefinition):
        return f"[bold]fragment[/bold] {node.name} on {node.type_condition}"
    kind = "query" if isinstance(node, Query) else "mutation"
    return f"[bold]{kind}[/bold] {node.name or '(anonymous)'}"


def _add_selections(tree: Tree, selection_set: Optional[SelectionSet]) -> None:
    if selection_set is None:
        return
    for child in selection_set.nodes:
        _add_node(tree, child)


def _add_node(tree: Tree, node: Node) -> None:
    branch = tree.add(_label(node))
    if isinstance(node, SelectionSet):
        _add_selections(branch, node)
    elif isinstance(node, (Field, FragmentDefinition, Query, Mutation)):
        _add_selections(branch, node.selection_set)


def document_tree(document: Document) -> Tree:
    """Build a rich Tree of the document."""
    tree = Tree("[bold cyan]Document[/bold cyan]")
    for node in document.nodes:
        _add_node(tree, node)
    return tree


def operation_node(operation: Operation) -> Node:
    """Unwrap the query or mutation held by an operation."""
    if isinstance(operation, MutationOperation):
        return operation.mutation
    return operation.query


def emit(document: Document, fmt: str) -> None:
    """
    Output a document.

    Args:
        document: Document to print
        fmt: Output format ("json" or "console")
    """
    if fmt == "json":
        print(utils.to_json(document_to_dict(document)))
    else:
        console.print(document_tree(document))
