"""Static detection of strict foreign reference fields."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..schema.descriptor import FieldDescriptor, SchemaDescriptor

logger = logging.getLogger(__name__)


class ReferenceShape(str, Enum):
    """Shape of a reference field."""

    SCALAR = "scalar"
    ARRAY = "array"


@dataclass(frozen=True)
class ForeignKeyField:
    """A field whose referenced documents must exist at write time."""

    path: str
    shape: ReferenceShape
    target: Any  # model name or model handle

    @property
    def is_array(self) -> bool:
        return self.shape == ReferenceShape.ARRAY


def _as_foreign_key(descriptor: FieldDescriptor) -> ForeignKeyField | None:
    if descriptor.is_reference and descriptor.strict:
        return ForeignKeyField(
            path=descriptor.path,
            shape=ReferenceShape.SCALAR,
            target=descriptor.reference_target,
        )

    # The strict flag lives on the element, not on the array itself
    if descriptor.is_array_of_references and descriptor.element.strict:
        return ForeignKeyField(
            path=descriptor.path,
            shape=ReferenceShape.ARRAY,
            target=descriptor.element.reference_target,
        )

    return None


def find_foreign_key_fields(schema: SchemaDescriptor) -> tuple[ForeignKeyField, ...]:
    """Find the strict foreign reference fields of a schema.

    A field qualifies if it is a strict scalar reference, or an array whose
    element is a strict reference.

    Args:
        schema: The schema to scan.

    Returns:
        The foreign key fields, in declaration order.
    """
    foreign_keys = tuple(
        fk for fk in (_as_foreign_key(d) for d in schema) if fk is not None
    )
    logger.debug(
        "Schema %s has strict references: %s",
        schema.name or "<anonymous>",
        [fk.path for fk in foreign_keys],
    )
    return foreign_keys
