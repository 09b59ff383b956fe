"""Pre-commit hook enforcing strict foreign references."""

import logging
from typing import Any, Mapping

from ..schema.descriptor import SchemaDescriptor
from .analyzer import ForeignKeyField, find_foreign_key_fields
from .checker import ReferenceCheck, check_existence
from .operations import WriteOperation
from .reporter import WriteState, report_outcomes
from .resolver import QueryableModel, resolve_reference

logger = logging.getLogger(__name__)


class ForeignRefValidator:
    """Veto writes whose strict references point to missing documents.

    The foreign key fields are computed once, when the validator is built;
    every call then only inspects the fields the write touches.

    Args:
        schema: Descriptor of the model being written.
        registry: Model name to model handle mapping, used for references
            declared by name.
        model_name: Name of the model being written. Defaults to the schema
            name.
    """

    def __init__(
        self,
        schema: SchemaDescriptor,
        registry: Mapping[str, QueryableModel],
        model_name: str | None = None,
    ):
        self.schema = schema
        self.registry = registry
        self.model_name = model_name or schema.name
        self.foreign_keys = find_foreign_key_fields(schema)

    def modified_foreign_keys(self, operation: WriteOperation) -> list[ForeignKeyField]:
        """Get the foreign key fields the write touches, in declaration order."""
        return [fk for fk in self.foreign_keys if operation.is_modified(fk.path)]

    def candidate_identifiers(
        self, field: ForeignKeyField, operation: WriteOperation
    ) -> list[Any]:
        """Get the identifiers a write proposes for a field."""
        return operation.values(field.path)

    def _owner(self, operation: WriteOperation) -> str | None:
        return operation.model_name or self.model_name

    async def validate(self, operation: WriteOperation) -> WriteState:
        """Check every strict reference the write touches.

        Args:
            operation: The pending write. It is never mutated.

        Returns:
            WriteState.ALLOWED if the write may proceed.

        Raises:
            ConfigurationError: If a referenced model is not registered.
            MissingReferenceError: If a referenced document does not exist.
            StoreError: If a lookup failed.
        """
        owner = self._owner(operation)
        modified = self.modified_foreign_keys(operation)

        if not operation.is_new and not modified:
            logger.debug(
                "%s: %s -> %s, no strict references touched",
                owner,
                WriteState.PENDING.value,
                WriteState.ALLOWED.value,
            )
            return WriteState.ALLOWED

        # Resolve everything first so a configuration error aborts before any lookup
        references = [resolve_reference(fk, self.registry, owner) for fk in modified]

        checks = [
            ReferenceCheck(reference=reference, identifier=identifier)
            for reference in references
            for identifier in self.candidate_identifiers(reference.field, operation)
        ]
        logger.debug(
            "%s: %s -> %s for %s, %d check(s)",
            owner,
            WriteState.PENDING.value,
            WriteState.RESOLVING.value,
            [fk.path for fk in modified],
            len(checks),
        )

        outcomes = await check_existence(checks, owner)
        return report_outcomes(outcomes, owner)

    async def __call__(self, operation: WriteOperation) -> WriteState:
        return await self.validate(operation)
