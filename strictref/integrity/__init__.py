"""Reference integrity engine: analysis, interception, resolution, checks."""

from .analyzer import ForeignKeyField, ReferenceShape, find_foreign_key_fields
from .checker import CheckOutcome, ReferenceCheck, check_existence
from .errors import (
    ConfigurationError,
    MissingReferenceError,
    ReferenceIntegrityError,
    StoreError,
)
from .operations import (
    RECOGNIZED_OPERATORS,
    InsertOperation,
    OperationKind,
    TrackedDocument,
    UpdateOperation,
    WriteOperation,
    identifier_of,
)
from .reporter import WriteState, report_outcomes
from .resolver import QueryableModel, ResolvedReference, model_name_of, resolve_reference
from .validator import ForeignRefValidator

__all__ = [
    "ForeignKeyField",
    "ReferenceShape",
    "find_foreign_key_fields",
    "CheckOutcome",
    "ReferenceCheck",
    "check_existence",
    "ConfigurationError",
    "MissingReferenceError",
    "ReferenceIntegrityError",
    "StoreError",
    "RECOGNIZED_OPERATORS",
    "InsertOperation",
    "OperationKind",
    "TrackedDocument",
    "UpdateOperation",
    "WriteOperation",
    "identifier_of",
    "WriteState",
    "report_outcomes",
    "QueryableModel",
    "ResolvedReference",
    "model_name_of",
    "resolve_reference",
    "ForeignRefValidator",
]
