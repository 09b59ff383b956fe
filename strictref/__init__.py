"""strictref: referential integrity for document models.

Fields declared as strict references must point at documents that exist
when a document is created or updated; otherwise the write is vetoed.
"""

from .integrity import (
    ConfigurationError,
    ForeignRefValidator,
    InsertOperation,
    MissingReferenceError,
    ReferenceIntegrityError,
    StoreError,
    UpdateOperation,
    WriteState,
    find_foreign_key_fields,
)
from .plugin import foreign_ref_plugin
from .schema import SchemaDescriptor, array_of, field, ref

__all__ = [
    "ConfigurationError",
    "ForeignRefValidator",
    "InsertOperation",
    "MissingReferenceError",
    "ReferenceIntegrityError",
    "StoreError",
    "UpdateOperation",
    "WriteState",
    "find_foreign_key_fields",
    "foreign_ref_plugin",
    "SchemaDescriptor",
    "array_of",
    "field",
    "ref",
]
