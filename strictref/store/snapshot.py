"""Build a populated registry from a schema file and a data snapshot."""

from pathlib import Path
from typing import Any

from ..schema.descriptor import describe_model
from ..schema.errors import SchemaLoadError
from ..schema.loader import expect_mapping, load_yaml
from ..schema.models import SchemaFile
from .memory import MemoryCollection
from .models import ModelRegistry, Plugin


def build_registry(
    schema_file: SchemaFile,
    records: dict[str, list[dict[str, Any]]] | None = None,
    plugins: list[Plugin] | None = None,
) -> ModelRegistry:
    """Define every model of a schema file, seeded with records.

    Args:
        schema_file: The parsed schema file.
        records: Model name to list of records, each with an ``_id``.
        plugins: Plugins registered globally before any model is defined.

    Returns:
        The populated registry.

    Raises:
        SchemaLoadError: If records are given for a model the schema does
            not declare.
    """
    records = records or {}
    undeclared = [name for name in records if name not in schema_file.models]
    if undeclared:
        raise SchemaLoadError(
            f"Data snapshot has records for undeclared model(s): {', '.join(undeclared)}"
        )

    registry = ModelRegistry()
    for plugin in plugins or []:
        registry.plugin(plugin)

    for name, spec in schema_file.models.items():
        collection = MemoryCollection(name, records.get(name, []))
        registry.define(name, describe_model(spec), collection)

    return registry


def load_records(path: str | Path) -> dict[str, list[dict[str, Any]]]:
    """Load a YAML data snapshot of ``{model: [records]}``.

    The collections may sit at the root or under a ``collections`` key.

    Raises:
        SchemaLoadError: If the file is malformed.
    """
    data = load_yaml(path)
    records = expect_mapping(data.get("collections", data), "'collections'", path)

    for name, items in records.items():
        if not isinstance(items, list) or not all(isinstance(r, dict) for r in items):
            raise SchemaLoadError(
                f"Expected a list of records for collection '{name}'", str(path)
            )
        for record in items:
            if "_id" not in record:
                raise SchemaLoadError(
                    f"Record in collection '{name}' has no _id", str(path)
                )

    return records
