"""Run every static check over a schema file."""

from pathlib import Path

from ..graph.builder import build_graph
from ..graph.reference_graph import ReferenceGraph
from ..schema.loader import parse_schema
from ..schema.models import SchemaFile
from .base import CheckResult
from .cycles import check_strict_cycles
from .reference_targets import check_reference_targets, check_strict_flags


def run_validators(schema_file: SchemaFile, graph: ReferenceGraph) -> CheckResult:
    """Run all static checks on a schema file.

    Args:
        schema_file: The parsed schema file.
        graph: The reference graph built from it.

    Returns:
        Combined CheckResult, target errors first.
    """
    result = CheckResult()

    result.merge(check_reference_targets(schema_file))
    result.merge(check_strict_flags(schema_file))
    result.merge(check_strict_cycles(graph))

    return result


def validate_schema_file(path: str | Path) -> CheckResult:
    """Load and check a schema file.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the file fails schema validation.
    """
    schema_file = parse_schema(path)
    return run_validators(schema_file, build_graph(schema_file))
