"""Root operation lookup and schema presence checks."""

import logging
from typing import Optional

from .nodes import (
    Document,
    Mutation,
    MutationOperation,
    Operation,
    Query,
    QueryOperation,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def find_operation(document: Document) -> Optional[Operation]:
    """
    Find the root operation of the document, whether query or mutation.

    The first query or mutation wins; later ones are ignored.
    """
    operations = [node for node in document.nodes if isinstance(node, (Query, Mutation))]
    if not operations:
        return None

    if len(operations) > 1:
        logger.debug("Document has %d operations, using the first", len(operations))

    first = operations[0]
    if isinstance(first, Query):
        return QueryOperation(query=first)
    return MutationOperation(mutation=first)


def validate(document: Document, schema, legacy_mutation_check: bool = False) -> ValidationResult:
    """
    Check that the document has a root operation the schema can serve.

    Only the presence of the schema's root query/mutation type is checked;
    fields, arguments and variables are not.

    Args:
        document: Parsed document
        schema: Object exposing `query_type` and `mutation_type` (e.g. GraphQLSchema)
        legacy_mutation_check: Check mutations against the query type, as
            older releases did

    Returns:
        ValidationResult
    """
    operation = find_operation(document)

    if operation is None:
        return ValidationResult.NO_QUERY_OR_MUTATION_PROVIDED

    if isinstance(operation, QueryOperation):
        if schema.query_type is None:
            return ValidationResult.SCHEMA_DOES_NOT_HAVE_QUERY_TYPE
        return ValidationResult.SUCCESS

    root_type = schema.query_type if legacy_mutation_check else schema.mutation_type
    if root_type is None:
        return ValidationResult.SCHEMA_DOES_NOT_HAVE_MUTATION_TYPE
    return ValidationResult.SUCCESS
