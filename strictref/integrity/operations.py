"""Pending write operations inspected before they commit.

A write is either an :class:`InsertOperation`, carrying the whole candidate
document, or an :class:`UpdateOperation`, carrying sparse operator maps such
as ``{"$set": {...}, "$push": {...}}``. Each variant answers two questions
for a field path: was it modified, and which values does the write carry.

Update operator maps are never merged with the stored document, so a field
changed through ``$push`` is only checked against the pushed values.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Protocol, runtime_checkable

# Operators inspected on updates, in the order their values are read
RECOGNIZED_OPERATORS = ("$set", "$push", "$inc")


class OperationKind(str, Enum):
    """Kind of pending write."""

    INSERT = "insert"
    UPDATE = "update"


@runtime_checkable
class TrackedDocument(Protocol):
    """A candidate document with dirty-field tracking."""

    @property
    def is_new(self) -> bool: ...

    def get(self, path: str, default: Any = None) -> Any: ...

    def is_modified(self, path: str) -> bool: ...


def identifier_of(value: Any) -> Any:
    """Reduce a materialised sub-document to its identifier."""
    if isinstance(value, Mapping) and "_id" in value:
        return value["_id"]
    return getattr(value, "id", value)


def _flatten(raw: Any) -> list[Any]:
    if isinstance(raw, (list, tuple)):
        return list(raw)
    return [raw]


@dataclass(frozen=True)
class InsertOperation:
    """Whole-document save of a new or existing document."""

    document: TrackedDocument
    model_name: str | None = None

    kind = OperationKind.INSERT

    @property
    def is_new(self) -> bool:
        return self.document.is_new

    def is_modified(self, path: str) -> bool:
        return self.document.is_modified(path) and self.document.get(path) is not None

    def values(self, path: str) -> list[Any]:
        identifiers = [identifier_of(v) for v in _flatten(self.document.get(path))]
        return [i for i in identifiers if i is not None]


@dataclass(frozen=True)
class UpdateOperation:
    """Partial update expressed as operator maps."""

    update: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    model_name: str | None = None

    kind = OperationKind.UPDATE

    @property
    def is_new(self) -> bool:
        return False

    def _operator_maps(self):
        for operator in RECOGNIZED_OPERATORS:
            operands = self.update.get(operator)
            if operands:
                yield operator, operands

    def modified_paths(self) -> set[str]:
        """Paths appearing as keys of a recognised operator map."""
        paths: set[str] = set()
        for _, operands in self._operator_maps():
            paths.update(operands.keys())
        return paths

    def is_modified(self, path: str) -> bool:
        return any(path in operands for _, operands in self._operator_maps())

    def values(self, path: str) -> list[Any]:
        collected: list[Any] = []
        for operator, operands in self._operator_maps():
            if path not in operands:
                continue
            raw = operands[path]
            if operator == "$push" and isinstance(raw, Mapping) and "$each" in raw:
                raw = raw["$each"]
            collected.extend(_flatten(raw))

        identifiers = [identifier_of(v) for v in collected]
        return [i for i in identifiers if i is not None]


WriteOperation = InsertOperation | UpdateOperation
