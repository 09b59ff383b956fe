"""Typed schema descriptors consumed by the integrity engine.

A :class:`SchemaDescriptor` is the only view of a schema the integrity engine
relies on. It can be built from a parsed YAML :class:`ModelSpec` with
:func:`describe_model`, or directly in Python with the :func:`field`,
:func:`ref` and :func:`array_of` helpers, which also accept a model handle as
the reference target.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterator

from .models import FieldSpec, ModelSpec


class StorageKind(str, Enum):
    """Storage type of a declared field."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    MIXED = "mixed"
    REFERENCE = "reference"
    ARRAY = "array"


@dataclass(frozen=True)
class FieldDescriptor:
    """Description of a single declared field."""

    path: str
    storage_kind: StorageKind
    is_array: bool = False
    reference_target: Any = None  # model name or model handle
    strict: bool = False
    element: "FieldDescriptor | None" = None

    @property
    def is_reference(self) -> bool:
        return self.storage_kind == StorageKind.REFERENCE

    @property
    def is_array_of_references(self) -> bool:
        return (
            self.is_array
            and self.element is not None
            and self.element.storage_kind == StorageKind.REFERENCE
        )


@dataclass(frozen=True)
class SchemaDescriptor:
    """Ordered, immutable collection of field descriptors."""

    fields: tuple[FieldDescriptor, ...] = ()
    name: str | None = None

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.fields]

    def get(self, path: str) -> FieldDescriptor | None:
        for descriptor in self.fields:
            if descriptor.path == path:
                return descriptor
        return None

    @classmethod
    def build(
        cls, fields: dict[str, FieldDescriptor], name: str | None = None
    ) -> "SchemaDescriptor":
        """Build a descriptor from a ``{path: FieldDescriptor}`` mapping.

        The helpers below leave ``path`` empty; it is filled in from the key.
        """
        return cls(
            fields=tuple(replace(d, path=path) for path, d in fields.items()),
            name=name,
        )


def field(kind: StorageKind | str = StorageKind.MIXED, strict: bool = False) -> FieldDescriptor:
    """Describe a plain (non-reference) field."""
    return FieldDescriptor(path="", storage_kind=StorageKind(kind), strict=strict)


def ref(target: Any, strict: bool = False) -> FieldDescriptor:
    """Describe a single reference to ``target`` (a model name or handle)."""
    return FieldDescriptor(
        path="",
        storage_kind=StorageKind.REFERENCE,
        reference_target=target,
        strict=strict,
    )


def array_of(element: FieldDescriptor, strict: bool = False) -> FieldDescriptor:
    """Describe an array whose items are described by ``element``."""
    return FieldDescriptor(
        path="",
        storage_kind=StorageKind.ARRAY,
        is_array=True,
        strict=strict,
        element=element,
    )


def _describe_field(path: str, spec: FieldSpec) -> FieldDescriptor:
    element = None
    if spec.of is not None:
        element = _describe_field(path, spec.of)

    return FieldDescriptor(
        path=path,
        storage_kind=StorageKind(spec.type),
        is_array=spec.type == "array",
        reference_target=spec.ref,
        strict=spec.strict,
        element=element,
    )


def describe_model(spec: ModelSpec) -> SchemaDescriptor:
    """Build a SchemaDescriptor from a parsed ModelSpec.

    Args:
        spec: The parsed model specification.

    Returns:
        The descriptor, with fields in declaration order.
    """
    return SchemaDescriptor(
        fields=tuple(_describe_field(path, f) for path, f in spec.fields.items()),
        name=spec.name or None,
    )
