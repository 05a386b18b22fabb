"""GraphQL document parsing and schema construction."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from graphql import GraphQLError, GraphQLSchema, build_client_schema
from graphql import build_schema as build_sdl_schema
from graphql import parse as parse_ast

from . import utils
from .config import Config
from .nodes import Document
from .reader import read_node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Either a parsed document or the message of the parse failure."""

    document: Optional[Document] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse(source: str, cfg: Optional[Config] = None) -> ParseResult:
    """
    Parse GraphQL source text into a Document.

    Top-level definitions of unsupported kinds are dropped. A syntax error
    aborts the whole document.

    Args:
        source: GraphQL document text
        cfg: Configuration (parser options and nesting limit)

    Returns:
        ParseResult holding the Document, or the failure message
    """
    cfg = cfg or Config()
    options = {"no_location": cfg.no_location}
    if cfg.max_tokens is not None:
        options["max_tokens"] = cfg.max_tokens

    try:
        ast = parse_ast(source, **options)
        depth = utils.selection_depth(ast)
        if depth > cfg.max_depth:
            return _failure(f"Document nesting depth {depth} exceeds maximum of {cfg.max_depth}")
        nodes = (read_node(definition) for definition in ast.definitions)
        document = Document(nodes=tuple(node for node in nodes if node is not None))
    except GraphQLError as e:
        return _failure(e.message)
    except RecursionError as e:
        return _failure(str(e) or "Maximum recursion depth exceeded")

    logger.debug("Parsed document with %d top-level nodes", len(document.nodes))
    return ParseResult(document=document)


def _failure(message: str) -> ParseResult:
    logger.debug("Parse failed: %s", message)
    return ParseResult(error=message)


def build_schema(schema: Union[str, dict]) -> GraphQLSchema:
    """
    Build GraphQL schema from SDL text or introspection JSON.

    Args:
        schema: SDL string, or introspection result, either {"__schema": {...}}
            or {"data": {"__schema": {...}}}

    Returns:
        GraphQLSchema object
    """
    if isinstance(schema, str):
        return build_sdl_schema(schema)

    # Handle both introspection formats
    if "data" in schema and "__schema" in schema["data"]:
        schema = schema["data"]

    return build_client_schema(schema)


def load_schema_file(path: str) -> GraphQLSchema:
    """Build a schema from a `.json` introspection file or an SDL file."""
    path = utils.expand_path(path)
    if utils.suffix(path) == ".json":
        return build_schema(utils.read_json(path))
    return build_schema(utils.read_text(path))
