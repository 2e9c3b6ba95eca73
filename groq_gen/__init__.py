"""Generate GROQ queries from Sanity schema definitions."""

from .core import format_query_code, generate_groq_queries, parse_sanity_schema

__version__ = "0.1.0"

__all__ = ["format_query_code", "generate_groq_queries", "parse_sanity_schema"]
