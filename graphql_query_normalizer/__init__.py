"""Normalize parsed GraphQL documents: simplify, inline fragments, find the root operation."""

from .fragments import expand_document_fragments, expand_fragments
from .operations import find_operation, validate
from .parser import ParseResult, parse

__version__ = "0.1.0"

__all__ = [
    "ParseResult",
    "expand_document_fragments",
    "expand_fragments",
    "find_operation",
    "parse",
    "validate",
]
