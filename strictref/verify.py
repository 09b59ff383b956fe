"""Validate a single write against a data snapshot."""

import asyncio
from pathlib import Path

from .integrity.operations import InsertOperation, UpdateOperation, WriteOperation
from .integrity.reporter import WriteState
from .integrity.validator import ForeignRefValidator
from .schema.errors import SchemaLoadError
from .schema.loader import expect_mapping, load_yaml, parse_schema
from .store.memory import Document
from .store.snapshot import build_registry, load_records


def load_write(path: str | Path, model_name: str) -> WriteOperation:
    """Load a write from YAML: either ``insert: {...}`` or ``update: {...}``.

    Raises:
        SchemaLoadError: If the file holds neither or both, or the write is
            not shaped as a document or an operator map.
    """
    data = load_yaml(path)

    if ("insert" in data) == ("update" in data):
        raise SchemaLoadError(
            "Write file must contain exactly one of 'insert' or 'update'", str(path)
        )

    if "insert" in data:
        document = expect_mapping(data["insert"], "'insert'", path, allow_null=True)
        return InsertOperation(Document(document), model_name)

    update = expect_mapping(data["update"], "'update'", path, allow_null=True)
    for operator, fields in update.items():
        expect_mapping(fields, f"operator '{operator}'", path)
    return UpdateOperation(update, model_name)


def verify_write(
    schema_path: str | Path,
    data_path: str | Path,
    model_name: str,
    write_path: str | Path,
) -> WriteState:
    """Run the foreign reference validator for one write.

    Returns:
        WriteState.ALLOWED if the write would be accepted.

    Raises:
        SchemaLoadError: If a file cannot be loaded, or the model is unknown.
        SchemaValidationError: If the schema file is invalid.
        ReferenceIntegrityError: If the write would be rejected.
    """
    schema_file = parse_schema(schema_path)
    if schema_file.get_model(model_name) is None:
        raise SchemaLoadError(f"Model '{model_name}' is not defined", str(schema_path))

    registry = build_registry(schema_file, load_records(data_path))
    operation = load_write(write_path, model_name)

    model = registry[model_name]
    validator = ForeignRefValidator(model.schema, registry, model_name)
    return asyncio.run(validator.validate(operation))
