"""Utility functions shared across the package."""

import json
from pathlib import Path
from typing import Any, Optional

from graphql import DocumentNode

from .nodes import Location


# File system utilities
def ensure_dir(path: str) -> None:
    """Ensure directory exists, creating it if necessary."""
    Path(path).mkdir(parents=True, exist_ok=True)


def exists(path: str) -> bool:
    """Check if file exists."""
    return Path(path).exists()


def dirname(path: str) -> str:
    """Get directory name from path."""
    return str(Path(path).parent)


def expand_path(path: str) -> str:
    """Expand ~ in path."""
    return str(Path(path).expanduser())


def suffix(path: str) -> str:
    """Lower-cased file extension, including the dot."""
    return Path(path).suffix.lower()


# File I/O
def read_text(path: str) -> str:
    """Read text file."""
    return Path(path).read_text()


def read_json(path: str) -> dict:
    """Read JSON file."""
    with open(path) as f:
        return json.load(f)


def to_json(data: Any) -> str:
    """Convert data to JSON string."""
    return json.dumps(data, indent=2)


# graphql-core AST helpers
def list_or_none(items) -> Optional[tuple]:
    """Tuple of items, or None when there are none."""
    if not items:
        return None
    return tuple(items)


def location(node) -> Optional[Location]:
    """Convert a graphql-core node location to a Location."""
    loc = getattr(node, "loc", None)
    if not loc:
        return None
    # GraphQL line numbers are 1-based
    source_loc = loc.source.get_location(loc.start)
    return Location(start=loc.start, end=loc.end, line=source_loc.line, column=source_loc.column)


def selection_depth(doc: DocumentNode) -> int:
    """
    Deepest selection set nesting in a parsed document.

    Walks with an explicit stack so arbitrarily deep documents can be
    measured without recursion.
    """
    depth = 0
    stack = [
        (definition.selection_set, 1)
        for definition in doc.definitions
        if getattr(definition, "selection_set", None)
    ]
    while stack:
        selection_set, current = stack.pop()
        depth = max(depth, current)
        for child in selection_set.selections:
            child_set = getattr(child, "selection_set", None)
            if child_set:
                stack.append((child_set, current + 1))
    return depth
