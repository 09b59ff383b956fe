"""Builder for converting a SchemaFile to a ReferenceGraph."""

from ..schema.models import SchemaFile
from .reference_graph import ReferenceGraph


def build_graph(schema_file: SchemaFile) -> ReferenceGraph:
    """Build a ReferenceGraph from a parsed schema file.

    Args:
        schema_file: The parsed schema file.

    Returns:
        A ReferenceGraph with one edge per reference field.
    """
    graph = ReferenceGraph()

    # Add all models first so forward references are not marked undefined
    for model_name, model in schema_file.models.items():
        graph.add_model(model_name, field_count=len(model.fields))

    for model_name, model in schema_file.models.items():
        for field, reference in model.iter_reference_fields():
            if reference.ref is None:
                continue
            graph.add_reference(
                model_name,
                reference.ref,
                field.name,
                strict=reference.strict,
                is_array=field.type == "array",
            )

    return graph
