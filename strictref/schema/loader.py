"""Reading schema files and the YAML inputs of the verify command."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import FieldError, SchemaLoadError, SchemaValidationError
from .models import SchemaFile

logger = logging.getLogger(__name__)


def expect_mapping(
    value: Any,
    what: str,
    path: str | Path | None = None,
    allow_null: bool = False,
) -> dict:
    """Return ``value`` if it is a mapping.

    Args:
        value: A value taken from parsed YAML.
        what: How to name the value in the error message.
        path: The file the value came from.
        allow_null: Treat a missing (null) value as an empty mapping.

    Raises:
        SchemaLoadError: If the value is not a mapping.
    """
    if value is None and allow_null:
        return {}
    if not isinstance(value, dict):
        raise SchemaLoadError(
            f"Expected a mapping for {what}, got {type(value).__name__}",
            str(path) if path is not None else None,
        )
    return value


def _safe_load(text: str, source: str | None) -> dict:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", source) from e
    return expect_mapping(data, "the document root", source, allow_null=True)


def load_yaml(path: str | Path) -> dict:
    """Read a YAML file whose root is a mapping. An empty file reads as ``{}``.

    Raises:
        SchemaLoadError: If the file is missing, unreadable or not a mapping.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))
    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    return _safe_load(text, str(path))


def parse_schema(path: str | Path) -> SchemaFile:
    """Load and validate a schema file.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If a model or field declaration is invalid.
    """
    return _build_schema(load_yaml(path), str(path))


def parse_schema_from_string(yaml_string: str) -> SchemaFile:
    """Validate a schema given as YAML text."""
    return _build_schema(_safe_load(yaml_string, None), None)


def _build_schema(data: dict, source: str | None) -> SchemaFile:
    try:
        schema_file = SchemaFile.model_validate(data)
    except ValidationError as e:
        errors = [FieldError.from_pydantic(err) for err in e.errors()]
        models = sorted({err.model for err in errors if err.model})
        where = f" in {', '.join(models)}" if models else ""
        raise SchemaValidationError(
            f"Schema has {len(errors)} invalid declaration(s){where}", errors, source
        ) from e

    logger.debug(
        "Parsed schema %s with %d model(s)", source or "<string>", len(schema_file.models)
    )
    return schema_file
