"""Generation hooks.

A hook is any object with a ``pre_generate`` or ``post_generate`` method
(or both). ``generate_snippets`` sorts the hooks it is given by checking
them against the protocols below.

Example usage:
    from groq_gen.core.hooks import CommentHeaderHook, ExcludeFieldsHook

    hooks = [
        ExcludeFieldsHook(["_*", "gallery.*Ref"]),
        CommentHeaderHook("Generated by groq-gen ({kind})"),
    ]
    snippets = generate_snippets(source, hooks=hooks)
"""

from dataclasses import replace
from fnmatch import fnmatchcase
from typing import Iterable, Protocol, runtime_checkable

from .ir import FieldDescriptor, NestedFieldDescriptor, QueryKind, SchemaDescription


@runtime_checkable
class PreGenerateHook(Protocol):
    """Receives the parsed schema and returns the schema queries are built from."""

    def pre_generate(self, schema: SchemaDescription) -> SchemaDescription:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Receives each formatted snippet and returns the snippet to emit."""

    def post_generate(self, kind: QueryKind, snippet: str) -> str:
        ...


class ExcludeFieldsHook:
    """Drops fields whose dotted path matches one of the glob patterns.

    Paths are ``field``, ``field.nested`` and ``field.nested.sub``, so
    ``_*`` hides internal top-level fields and ``slides.hero.*`` hides the
    aliases of an image. An array that loses all of its nested fields is
    projected as a plain ``name[]``. Excluding ``slug`` also drops the
    by-slug query.
    """

    def __init__(self, patterns: Iterable[str]):
        self.patterns = tuple(patterns)

    def _excluded(self, path: str) -> bool:
        return any(fnmatchcase(path, pattern) for pattern in self.patterns)

    def pre_generate(self, schema: SchemaDescription) -> SchemaDescription:
        fields = tuple(
            self._filter_field(schema_field)
            for schema_field in schema.fields
            if not self._excluded(schema_field.name)
        )
        return replace(schema, fields=fields)

    def _filter_field(self, schema_field: FieldDescriptor) -> FieldDescriptor:
        if not schema_field.nested_fields:
            return schema_field

        nested_fields = tuple(
            self._filter_nested(schema_field.name, nested)
            for nested in schema_field.nested_fields
            if not self._excluded(f"{schema_field.name}.{nested.name}")
        )
        if not nested_fields:
            return replace(schema_field, of=None, nested_fields=None)
        return replace(schema_field, nested_fields=nested_fields)

    def _filter_nested(self, parent: str, nested: NestedFieldDescriptor) -> NestedFieldDescriptor:
        if not nested.sub_fields:
            return nested

        path = f"{parent}.{nested.name}"
        sub_fields = tuple(
            sub_field
            for sub_field in nested.sub_fields
            if not self._excluded(f"{path}.{sub_field.name}")
        )
        return replace(nested, sub_fields=sub_fields or None)


class CommentHeaderHook:
    """Prefixes every snippet with a comment block.

    ``{kind}`` in the header becomes the query kind. Lines that are not
    comments yet get ``// ``, which GROQ, JavaScript and TypeScript all
    accept.
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, kind: QueryKind, snippet: str) -> str:
        lines = []
        for line in self.header.replace("{kind}", kind.value).strip("\n").splitlines():
            if line.strip() and not line.lstrip().startswith("//"):
                line = f"// {line}"
            lines.append(line)
        return "\n".join(lines) + "\n\n" + snippet
