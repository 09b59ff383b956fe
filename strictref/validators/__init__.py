"""Static checks on schema files."""

from .base import CheckResult, IssueCode, SchemaIssue, Severity
from .cycles import check_strict_cycles
from .reference_targets import check_reference_targets, check_strict_flags
from .runner import run_validators, validate_schema_file

__all__ = [
    "CheckResult",
    "IssueCode",
    "SchemaIssue",
    "Severity",
    "check_strict_cycles",
    "check_reference_targets",
    "check_strict_flags",
    "run_validators",
    "validate_schema_file",
]
