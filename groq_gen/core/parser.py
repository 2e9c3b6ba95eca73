"""Sanity schema parser.

Extracts a SchemaDescription from the source of a ``defineType({...})``
definition. Extraction runs as layered scans: the whole source, then each
array field's block, then each image field inside an array of objects.
"""

import logging
import re
from typing import Iterator, List, Optional, Tuple

from .ir import (
    UNKNOWN_TYPE_NAME,
    FieldDescriptor,
    NestedFieldDescriptor,
    SchemaDescription,
    SubFieldDescriptor,
)
from .scanner import find_section, iter_blocks, iter_objects, key_pattern, own_level, search_code

logger = logging.getLogger(__name__)

NAME_RE = key_pattern("name")
TYPE_RE = key_pattern("type")
TITLE_RE = key_pattern("title")
OBJECT_MARKER_RE = key_pattern("type", "object")
DEFINE_FIELD_RE = re.compile(r"defineField\(\s*\{")
OF_SECTION_RE = re.compile(r"\bof:\s*\[")
FIELDS_SECTION_RE = re.compile(r"\bfields:\s*\[")
VALIDATION_MARKER = "validation:"


class SchemaParser:
    """Parses Sanity schema source text into IR."""

    def __init__(self, source: str):
        """Initialize a parser with the raw schema source."""
        self.source = source
        self.warnings: List[str] = []

    def parse(self) -> SchemaDescription:
        """Parse the source. Returns the empty sentinel on any internal failure."""
        try:
            return self._parse()
        except Exception:
            logger.exception("Error parsing schema")
            return SchemaDescription.empty()

    def _parse(self) -> SchemaDescription:
        self.warnings = []
        type_name = self._extract_type_name()

        fields = []
        for schema_field in self._extract_fields():
            if schema_field.is_array:
                schema_field = self._expand_array_field(schema_field)
            fields.append(schema_field)

        return SchemaDescription(
            type_name=type_name,
            fields=tuple(fields),
            warnings=tuple(self.warnings),
        )

    def _extract_type_name(self) -> str:
        match = NAME_RE.search(self.source)
        return match.group(1) if match else UNKNOWN_TYPE_NAME

    def _extract_fields(self) -> Iterator[FieldDescriptor]:
        """Yield top-level fields in declaration order."""
        for block in iter_blocks(self.source, DEFINE_FIELD_RE):
            name_type = _name_and_type(own_level(block))
            if name_type is None:
                continue
            name, field_type = name_type
            title = TITLE_RE.search(own_level(block))
            logger.debug("Found field %s (%s)", name, field_type)
            yield FieldDescriptor(
                name=name,
                type=field_type,
                title=title.group(1) if title else None,
                validation=VALIDATION_MARKER in block,
            )

    def _find_field_block(self, name: str) -> Optional[str]:
        """Re-scan the source for the ``defineField`` block declaring ``name``."""
        for block in iter_blocks(self.source, DEFINE_FIELD_RE):
            match = NAME_RE.search(own_level(block))
            if match and match.group(1) == name:
                return block
        return None

    def _expand_array_field(self, schema_field: FieldDescriptor) -> FieldDescriptor:
        """Attach nested fields when the array holds inline objects."""
        block = self._find_field_block(schema_field.name)
        if block is None:
            return schema_field

        of_section = find_section(block, OF_SECTION_RE)
        if of_section is None or search_code(of_section, OBJECT_MARKER_RE) is None:
            return schema_field

        fields_section = find_section(of_section, FIELDS_SECTION_RE)
        if fields_section is None:
            return schema_field

        nested_fields = self._dedupe(schema_field.name, self._extract_nested_fields(fields_section))
        if not nested_fields:
            logger.debug("Array field %s has no recognizable object fields", schema_field.name)
            return schema_field

        return FieldDescriptor(
            name=schema_field.name,
            type=schema_field.type,
            title=schema_field.title,
            validation=schema_field.validation,
            of="object",
            nested_fields=tuple(nested_fields),
        )

    def _extract_nested_fields(self, section: str) -> List[NestedFieldDescriptor]:
        nested_fields = []
        for item in iter_objects(section):
            name_type = _name_and_type(own_level(item))
            if name_type is None:
                continue
            name, field_type = name_type
            sub_fields = None
            if field_type == "image":
                sub_fields = _extract_sub_fields(item)
            nested_fields.append(
                NestedFieldDescriptor(
                    name=name,
                    type=field_type,
                    validation=VALIDATION_MARKER in item,
                    sub_fields=sub_fields,
                )
            )
        return nested_fields

    def _dedupe(
        self, array_name: str, nested_fields: List[NestedFieldDescriptor]
    ) -> List[NestedFieldDescriptor]:
        """Drop later declarations of an already seen nested name."""
        unique = []
        seen: set[str] = set()
        for nested in nested_fields:
            if nested.name in seen:
                message = f"Duplicate nested field '{nested.name}' in '{array_name}' ignored"
                logger.warning(message)
                self.warnings.append(message)
                continue
            seen.add(nested.name)
            unique.append(nested)
        return unique


def _name_and_type(text: str) -> Optional[Tuple[str, str]]:
    """Return the first name and the type that belongs with it.

    The first type declared after the name is preferred; a type declared
    before the name is accepted when nothing follows it.
    """
    name_match = NAME_RE.search(text)
    if name_match is None:
        return None
    type_match = TYPE_RE.search(text, name_match.end()) or TYPE_RE.search(text)
    if type_match is None:
        return None
    return name_match.group(1), type_match.group(1)


def _extract_sub_fields(image_block: str) -> Optional[Tuple[SubFieldDescriptor, ...]]:
    section = find_section(image_block, FIELDS_SECTION_RE)
    if section is None:
        return None

    sub_fields = []
    for item in iter_objects(section):
        name_type = _name_and_type(own_level(item))
        if name_type is None:
            continue
        sub_fields.append(
            SubFieldDescriptor(
                name=name_type[0],
                type=name_type[1],
                validation=VALIDATION_MARKER in item,
            )
        )
    return tuple(sub_fields) or None


def parse_sanity_schema(source: str) -> SchemaDescription:
    """Parse Sanity schema source into a SchemaDescription.

    Never raises. Text that cannot be understood yields
    ``SchemaDescription(type_name="unknown", fields=())``.
    """
    return SchemaParser(source).parse()
