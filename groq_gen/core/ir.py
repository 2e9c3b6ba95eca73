"""Intermediate Representation (IR) for Sanity schemas and GROQ queries.

This module defines dataclasses that represent a parsed Sanity document
type and the queries generated for it. Every object is created once per
generation request and never mutated afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

UNKNOWN_TYPE_NAME = "unknown"


class QueryKind(Enum):
    """Query kinds, interposed into the exported identifier."""
    SINGLE = "Single"
    LIST = "List"
    BY_SLUG = "BySlug"


@dataclass(frozen=True)
class SubFieldDescriptor:
    """Represents an inline attribute of an image field (e.g. alt text)."""
    name: str
    type: str
    validation: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "validation": self.validation}


@dataclass(frozen=True)
class NestedFieldDescriptor:
    """Represents a field declared inside the object shape of an array field."""
    name: str
    type: str
    validation: bool = False
    sub_fields: Optional[Tuple[SubFieldDescriptor, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "validation": self.validation,
        }
        if self.sub_fields:
            result["subFields"] = [sub.to_dict() for sub in self.sub_fields]
        return result


@dataclass(frozen=True)
class FieldDescriptor:
    """Represents a top-level field of a document type."""
    name: str
    type: str
    title: Optional[str] = None
    validation: bool = False
    of: Optional[str] = None  # "object" once nested fields are expanded
    nested_fields: Optional[Tuple[NestedFieldDescriptor, ...]] = None

    @property
    def is_array(self) -> bool:
        return self.type == "array"

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name, "type": self.type}
        if self.title is not None:
            result["title"] = self.title
        result["validation"] = self.validation
        if self.of is not None:
            result["of"] = self.of
        if self.nested_fields:
            result["nestedFields"] = [nested.to_dict() for nested in self.nested_fields]
        return result


@dataclass(frozen=True)
class SchemaDescription:
    """Complete intermediate representation of a Sanity document type."""
    type_name: str = UNKNOWN_TYPE_NAME
    fields: Tuple[FieldDescriptor, ...] = ()
    warnings: Tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def empty(cls) -> "SchemaDescription":
        """Return the sentinel that signals an unparseable schema."""
        return cls(type_name=UNKNOWN_TYPE_NAME, fields=())

    @property
    def is_unparsed(self) -> bool:
        """True when the type name could not be resolved or no field was found."""
        return self.type_name == UNKNOWN_TYPE_NAME or not self.fields

    def get_field(self, name: str) -> Optional[FieldDescriptor]:
        """Look up a top-level field by name."""
        for schema_field in self.fields:
            if schema_field.name == name:
                return schema_field
        return None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "typeName": self.type_name,
            "fields": [schema_field.to_dict() for schema_field in self.fields],
        }
        if self.warnings:
            result["warnings"] = list(self.warnings)
        return result


@dataclass(frozen=True)
class GeneratedQueries:
    """The three GROQ query templates generated for a schema."""
    single_document_query: str
    multiple_documents_query: str
    slug_query: Optional[str] = None
    warnings: Tuple[str, ...] = ()
