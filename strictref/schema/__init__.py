"""Schema layer: YAML schema language and typed descriptors."""

from .descriptor import (
    FieldDescriptor,
    SchemaDescriptor,
    StorageKind,
    array_of,
    describe_model,
    field,
    ref,
)
from .errors import FieldError, SchemaLoadError, SchemaValidationError
from .loader import expect_mapping, load_yaml, parse_schema, parse_schema_from_string
from .models import FieldSpec, ModelSpec, SchemaFile

__all__ = [
    "FieldDescriptor",
    "SchemaDescriptor",
    "StorageKind",
    "array_of",
    "describe_model",
    "field",
    "ref",
    "FieldError",
    "SchemaLoadError",
    "SchemaValidationError",
    "expect_mapping",
    "load_yaml",
    "parse_schema",
    "parse_schema_from_string",
    "FieldSpec",
    "ModelSpec",
    "SchemaFile",
]
