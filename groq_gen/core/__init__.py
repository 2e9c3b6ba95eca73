"""Core modules for GROQ query generation."""

from .config import GeneratorConfig
from .generator import QueryFormatter, format_query_code, query_name
from .hooks import (
    CommentHeaderHook,
    ExcludeFieldsHook,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import (
    FieldDescriptor,
    GeneratedQueries,
    NestedFieldDescriptor,
    QueryKind,
    SchemaDescription,
    SubFieldDescriptor,
)
from .parser import SchemaParser, parse_sanity_schema
from .pipeline import (
    EmptySchemaError,
    FormattedQueries,
    GroqGenError,
    SchemaParseError,
    generate_snippets,
)
from .query_builder import QueryBuilder, generate_groq_queries

__all__ = [
    # Config
    "GeneratorConfig",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "CommentHeaderHook",
    "ExcludeFieldsHook",
    # IR types
    "FieldDescriptor",
    "GeneratedQueries",
    "NestedFieldDescriptor",
    "QueryKind",
    "SchemaDescription",
    "SubFieldDescriptor",
    # Parser
    "SchemaParser",
    "parse_sanity_schema",
    # Query Builder
    "QueryBuilder",
    "generate_groq_queries",
    # Formatter
    "QueryFormatter",
    "format_query_code",
    "query_name",
    # Pipeline
    "EmptySchemaError",
    "FormattedQueries",
    "GroqGenError",
    "SchemaParseError",
    "generate_snippets",
]
