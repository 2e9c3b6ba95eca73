"""Query builder for GROQ read queries.

Constructs projection strings from a SchemaDescription and assembles the
single-document, document-list and by-slug query templates.
"""

from typing import List, Tuple

from .ir import FieldDescriptor, GeneratedQueries, NestedFieldDescriptor, SchemaDescription

FIELD_SEPARATOR = ",\n    "
NESTED_SEPARATOR = ",\n        "


class QueryBuilder:
    """Builds GROQ query strings from a parsed schema."""

    def __init__(self, schema: SchemaDescription):
        """Initialize with the schema to project."""
        self.schema = schema
        self.warnings: List[str] = list(schema.warnings)

    def build(self) -> GeneratedQueries:
        """Build all query templates for the schema.

        Returns:
            GeneratedQueries with a slug query only when the schema has a
            top-level ``slug`` field.
        """
        self.warnings = list(self.schema.warnings)
        projection = self._build_projection()
        type_filter = f'*[_type == "{self.schema.type_name}"]'

        slug_query = None
        if self.schema.get_field("slug") is not None:
            slug_query = self._assemble(type_filter, "[slug.current == $slug][0]", projection)

        return GeneratedQueries(
            single_document_query=self._assemble(type_filter, "[0]", projection),
            multiple_documents_query=self._assemble(type_filter, "", projection),
            slug_query=slug_query,
            warnings=tuple(self.warnings),
        )

    @staticmethod
    def _assemble(type_filter: str, selector: str, projection: str) -> str:
        return f"{type_filter}{selector} {{\n    {projection}\n  }}"

    def _build_projection(self) -> str:
        """Join basic and array projections, skipping the separator if either is empty."""
        basic_fields = self._build_basic_fields()
        array_fields = self._build_array_fields()
        separator = FIELD_SEPARATOR if basic_fields and array_fields else ""
        return f"{basic_fields}{separator}{array_fields}"

    def _build_basic_fields(self) -> str:
        return FIELD_SEPARATOR.join(
            schema_field.name for schema_field in self.schema.fields if not schema_field.is_array
        )

    def _build_array_fields(self) -> str:
        return FIELD_SEPARATOR.join(
            self._build_array_field(schema_field)
            for schema_field in self.schema.fields
            if schema_field.is_array
        )

    def _build_array_field(self, schema_field: FieldDescriptor) -> str:
        if not schema_field.nested_fields:
            return f"{schema_field.name}[]"

        nested_fields = self._unique_nested_fields(schema_field)
        lines = [self._build_nested_field(nested) for nested in nested_fields]
        return f"{schema_field.name}[] {{\n        {NESTED_SEPARATOR.join(lines)}\n      }}"

    def _unique_nested_fields(
        self, schema_field: FieldDescriptor
    ) -> Tuple[NestedFieldDescriptor, ...]:
        unique: dict[str, NestedFieldDescriptor] = {}
        for nested in schema_field.nested_fields or ():
            if nested.name in unique:
                self.warnings.append(
                    f"Duplicate nested field '{nested.name}' in '{schema_field.name}' ignored"
                )
                continue
            unique[nested.name] = nested
        return tuple(unique.values())

    @staticmethod
    def _build_nested_field(nested: NestedFieldDescriptor) -> str:
        if nested.type != "image":
            return nested.name

        lines = [f'"{nested.name}": {nested.name}.asset->url']
        for sub_field in nested.sub_fields or ():
            alias = f"{nested.name}{upper_first(sub_field.name)}"
            lines.append(f'"{alias}": {nested.name}.{sub_field.name}')
        return NESTED_SEPARATOR.join(lines)


def upper_first(name: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return name[:1].upper() + name[1:]


def generate_groq_queries(schema: SchemaDescription) -> GeneratedQueries:
    """Generate the single, list and (optionally) by-slug queries for a schema."""
    return QueryBuilder(schema).build()
