"""Output formatting for check results, reference listings and verdicts."""

import json
from typing import Any, Literal

from ..graph.reference_graph import ReferenceGraph
from ..integrity.analyzer import find_foreign_key_fields
from ..integrity.errors import ReferenceIntegrityError
from ..integrity.reporter import WriteState
from ..integrity.resolver import model_name_of
from ..schema.descriptor import describe_model
from ..schema.models import SchemaFile
from ..validators.base import CheckResult, SchemaIssue, Severity

OutputFormat = Literal["text", "json"]

SYMBOLS = {Severity.ERROR: "✘", Severity.WARNING: "⚠"}


def format_validation_result(result: CheckResult, format: OutputFormat = "text") -> str:
    """Format the static check result of a schema file.

    Text output groups issues under the model that declares the offending
    field; JSON output keeps them in the order they were found.
    """
    if format == "json":
        return json.dumps(
            {
                "passed": result.is_valid,
                "error_count": len(result.errors),
                "warning_count": len(result.warnings),
                "issues": [_issue_record(issue) for issue in result.issues],
            },
            indent=2,
        )

    lines: list[str] = []
    for model, issues in result.by_model().items():
        lines.append(f"{model}:")
        for issue in issues:
            lines.append(f"  {_format_issue_text(issue)}")
        lines.append("")

    errors, warnings = len(result.errors), len(result.warnings)
    if result.is_valid:
        lines.append(f"Check passed with {warnings} warning(s)" if warnings else "Check passed")
    else:
        lines.append(f"Check failed: {errors} error(s), {warnings} warning(s)")
    return "\n".join(lines)


def _format_issue_text(issue: SchemaIssue) -> str:
    flag = " (strict)" if issue.strict and not issue.cycle else ""
    return (
        f"{SYMBOLS[issue.severity]} {issue.code.value} "
        f"{issue.location}{flag}: {issue.message}"
    )


def _issue_record(issue: SchemaIssue) -> dict[str, Any]:
    return {
        "code": issue.code.value,
        "severity": issue.severity.value,
        "model": issue.model,
        "path": issue.path,
        "referenced_model": issue.referenced_model,
        "strict": issue.strict,
        "shape": issue.shape.value if issue.shape else None,
        "cycle": list(issue.cycle) or None,
        "message": issue.message,
    }


def format_foreign_keys(
    schema_file: SchemaFile,
    graph: ReferenceGraph,
    format: OutputFormat = "text",
) -> str:
    """List each model's strict references and the strict fields pointing at it."""
    listing = {
        name: {
            "references": [
                {"path": fk.path, "shape": fk.shape.value, "target": model_name_of(fk.target)}
                for fk in find_foreign_key_fields(describe_model(spec))
            ],
            "referenced_by": [
                f"{source}.{path}" for source, path in graph.get_referrers(name, strict_only=True)
            ],
        }
        for name, spec in schema_file.models.items()
    }

    if format == "json":
        return json.dumps(listing, indent=2)

    lines: list[str] = []
    for name, entry in listing.items():
        lines.append(f"{name}:")
        if not entry["references"]:
            lines.append("  (no strict references)")
        for fk in entry["references"]:
            suffix = "[]" if fk["shape"] == "array" else ""
            lines.append(f"  {fk['path']}{suffix} -> {fk['target']}")
        if entry["referenced_by"]:
            lines.append(f"  referenced by: {', '.join(entry['referenced_by'])}")
    return "\n".join(lines)


def format_write_outcome(
    model: str,
    error: ReferenceIntegrityError | None = None,
    format: OutputFormat = "text",
) -> str:
    """Format the verdict on a single write."""
    state = WriteState.ALLOWED if error is None else WriteState.REJECTED

    if format == "json":
        return json.dumps(
            {
                "model": model,
                "state": state.value,
                "allowed": state == WriteState.ALLOWED,
                "error": type(error).__name__ if error else None,
                "message": str(error) if error else None,
                "path": getattr(error, "path", None),
            },
            indent=2,
        )

    verdict = f"Write to {model} {state.value}"
    if error is None:
        return verdict
    return f"{verdict}: {type(error).__name__}: {error}"
