"""End-to-end snippet generation: schema text in, formatted queries out."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .config import GeneratorConfig
from .generator import QueryFormatter
from .hooks import CommentHeaderHook, PostGenerateHook, PreGenerateHook
from .ir import QueryKind
from .parser import parse_sanity_schema
from .query_builder import generate_groq_queries

logger = logging.getLogger(__name__)


class GroqGenError(Exception):
    """Base exception for snippet generation failures."""


class EmptySchemaError(GroqGenError):
    """Raised when no schema text was supplied."""

    def __init__(self, message: str = "Please paste your Sanity schema first"):
        super().__init__(message)


class SchemaParseError(GroqGenError):
    """Raised when the schema yields no type name or no fields."""

    def __init__(
        self, message: str = "Could not parse schema correctly. Please check your input."
    ):
        super().__init__(message)


@dataclass(frozen=True)
class FormattedQueries:
    """Formatted snippets for each query kind."""
    type_name: str
    single_document: str
    multiple_documents: str
    slug_based: Optional[str] = None
    warnings: Tuple[str, ...] = ()

    def items(self) -> list[tuple[QueryKind, str]]:
        """Return (kind, snippet) pairs, skipping the missing slug snippet."""
        pairs = [
            (QueryKind.SINGLE, self.single_document),
            (QueryKind.LIST, self.multiple_documents),
        ]
        if self.slug_based is not None:
            pairs.append((QueryKind.BY_SLUG, self.slug_based))
        return pairs


def generate_snippets(
    schema_text: str,
    config: Optional[GeneratorConfig] = None,
    hooks: Iterable[object] = (),
) -> FormattedQueries:
    """Parse a schema, build its queries and format every snippet.

    Each hook runs in the order given, as a pre-generate hook, a
    post-generate hook or both. A ``config.header`` adds a
    ``CommentHeaderHook`` after the caller's hooks.

    Raises:
        EmptySchemaError: if ``schema_text`` is blank
        SchemaParseError: if the parser returned the unparsed sentinel
    """
    config = config or GeneratorConfig()
    hooks = list(hooks)
    if config.header:
        hooks.append(CommentHeaderHook(config.header))
    pre_hooks = [hook for hook in hooks if isinstance(hook, PreGenerateHook)]
    post_hooks = [hook for hook in hooks if isinstance(hook, PostGenerateHook)]

    if not schema_text.strip():
        raise EmptySchemaError()

    schema = parse_sanity_schema(schema_text)
    if schema.is_unparsed:
        raise SchemaParseError()

    for hook in pre_hooks:
        schema = hook.pre_generate(schema)
    queries = generate_groq_queries(schema)
    logger.debug("Generated queries for %s", schema.type_name)

    formatter = QueryFormatter(config)

    def render(query: str, kind: QueryKind) -> str:
        snippet = formatter.format(query, schema.type_name, kind.value)
        for hook in post_hooks:
            snippet = hook.post_generate(kind, snippet)
        return snippet

    single_document = render(queries.single_document_query, QueryKind.SINGLE)
    multiple_documents = render(queries.multiple_documents_query, QueryKind.LIST)
    slug_based = None
    if queries.slug_query is not None:
        slug_based = render(queries.slug_query, QueryKind.BY_SLUG)

    return FormattedQueries(
        type_name=schema.type_name,
        single_document=single_document,
        multiple_documents=multiple_documents,
        slug_based=slug_based,
        warnings=queries.warnings,
    )
