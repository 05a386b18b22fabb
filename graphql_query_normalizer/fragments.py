"""Inlining of fragment spreads into the selections that use them."""

import logging
from dataclasses import replace
from typing import Optional, Sequence

from .nodes import (
    Document,
    Field,
    FragmentDefinition,
    FragmentSpread,
    Mutation,
    Node,
    Query,
    SelectionSet,
)

logger = logging.getLogger(__name__)


def _find_fragment(
    name: str, fragments: Sequence[FragmentDefinition]
) -> Optional[FragmentDefinition]:
    return next((fragment for fragment in fragments if fragment.name == name), None)


def _expand_selection_set(
    selection_set: SelectionSet, fragments: Sequence[FragmentDefinition]
) -> SelectionSet:
    return replace(selection_set, nodes=expand_fragments(selection_set.nodes, fragments))


def expand_fragments(
    nodes: Sequence[Node], fragments: Sequence[FragmentDefinition]
) -> tuple[Node, ...]:
    """
    Replace fragment spreads with the selections of their fragment.

    Spreads without a matching definition are kept as they are. Spreads of
    a fragment without a selection set disappear. Selections spliced in from
    a fragment are taken as-is; spreads nested inside a fragment body are
    not expanded by this call.

    Args:
        nodes: Selections to expand
        fragments: Fragment definitions available for lookup

    Returns:
        New tuple of nodes; the inputs are not modified
    """
    out: list[Node] = []
    for node in nodes:
        if isinstance(node, FragmentSpread):
            fragment = _find_fragment(node.name, fragments)
            if fragment is None:
                logger.debug("No fragment named %r, leaving spread in place", node.name)
                out.append(node)
            elif fragment.selection_set is None:
                logger.debug("Fragment %r has no selections, dropping spread", node.name)
            else:
                out.extend(fragment.selection_set.nodes)

        elif isinstance(node, Field) and node.selection_set is not None:
            out.append(replace(node, selection_set=_expand_selection_set(node.selection_set, fragments)))

        elif isinstance(node, SelectionSet):
            out.append(_expand_selection_set(node, fragments))

        else:
            out.append(node)

    return tuple(out)


def fragment_definitions(document: Document) -> list[FragmentDefinition]:
    """Top-level fragment definitions of a document, in source order."""
    return [node for node in document.nodes if isinstance(node, FragmentDefinition)]


def expand_document_fragments(document: Document) -> Document:
    """
    Expand fragment spreads in every query and mutation of a document.

    Fragment definitions stay in the returned document.
    """
    fragments = fragment_definitions(document)

    def transform(node: Node) -> Node:
        if isinstance(node, (Query, Mutation)):
            return replace(node, selection_set=_expand_selection_set(node.selection_set, fragments))
        return node

    return replace(document, nodes=tuple(transform(node) for node in document.nodes))
