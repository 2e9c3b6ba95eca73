"""Snippet generator for GROQ queries.

Renders Jinja2 templates that wrap a query in an import and export
statement for TypeScript or JavaScript projects. GROQ output is the bare
query text.

Supports custom templates via the config's template_dir:
    formatter = QueryFormatter(GeneratorConfig(template_dir="./my_templates"))

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import GeneratorConfig
from .query_builder import upper_first


def query_name(type_name: str, query_kind: str = "") -> str:
    """Build the exported identifier, e.g. ``getPostSingleQuery``."""
    return f"get{upper_first(type_name)}{query_kind}Query"


class QueryFormatter:
    """Formats GROQ queries as ready-to-paste code snippets.

    Available templates to override:
        - define_query.j2 — import of the query helper and the exported constant
    """

    TEMPLATE_NAME = "define_query.j2"

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()

        # Build template loader - custom templates take precedence
        loaders = []
        if self.config.template_dir:
            template_path = Path(self.config.template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("groq_gen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
        )
        self.env.filters["upper_first"] = upper_first

    def format(
        self,
        query: str,
        type_name: str,
        query_kind: str = "",
        output_format: Optional[str] = None,
    ) -> str:
        """Format one query.

        Args:
            query: The GROQ query string
            type_name: The schema type the query selects
            query_kind: Interposed into the identifier (Single, List, BySlug)
            output_format: Overrides the configured format

        Returns:
            The snippet; the trimmed query itself for groq or unknown formats
        """
        if output_format is None:
            output_format = self.config.output_format
        cleaned_query = query.strip()

        if output_format not in ("ts", "js"):
            return cleaned_query

        template = self.env.get_template(self.TEMPLATE_NAME)
        return template.render(
            query=cleaned_query,
            query_name=query_name(type_name, query_kind),
            helper_name=self.config.helper_name,
            helper_module=self.config.helper_module,
            output_format=output_format,
        )


@lru_cache(maxsize=None)
def _default_formatter() -> QueryFormatter:
    return QueryFormatter()


def format_query_code(
    query: str,
    output_format: str,
    type_name: str,
    query_kind: str = "",
) -> str:
    """Wrap a GROQ query in the requested code format (ts, js or groq)."""
    return _default_formatter().format(query, type_name, query_kind, output_format=output_format)
