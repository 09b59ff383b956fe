"""In-memory documents and collections."""

import asyncio
import copy
import uuid
from typing import Any, Iterator, Mapping


def new_id() -> str:
    """Generate a fresh document identifier."""
    return uuid.uuid4().hex


def get_path(data: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Read a dotted path out of nested mappings."""
    current: Any = data
    for part in path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return default
        current = current[part]
    return current


def set_path(data: dict[str, Any], path: str, value: Any) -> None:
    """Write a dotted path into nested dicts, creating parents as needed."""
    parts = path.split(".")
    current = data
    for part in parts[:-1]:
        current = current.setdefault(part, {})
    current[parts[-1]] = value


def unset_path(data: dict[str, Any], path: str) -> None:
    parts = path.split(".")
    parent = get_path(data, ".".join(parts[:-1])) if len(parts) > 1 else data
    if isinstance(parent, dict):
        parent.pop(parts[-1], None)


def _each(value: Any) -> list[Any]:
    if isinstance(value, Mapping) and "$each" in value:
        return list(value["$each"])
    return [value]


def apply_update(record: dict[str, Any], update: Mapping[str, Mapping[str, Any]]) -> None:
    """Apply update operators to a stored record in place.

    Supports ``$set``, ``$unset``, ``$inc``, ``$push`` and ``$addToSet``.

    Raises:
        ValueError: If an operator is not supported.
    """
    for operator, operands in update.items():
        for path, value in operands.items():
            if operator == "$set":
                set_path(record, path, copy.deepcopy(value))
            elif operator == "$unset":
                unset_path(record, path)
            elif operator == "$inc":
                set_path(record, path, get_path(record, path, 0) + value)
            elif operator in ("$push", "$addToSet"):
                items = list(get_path(record, path) or [])
                for item in _each(value):
                    if operator == "$push" or item not in items:
                        items.append(item)
                set_path(record, path, items)
            else:
                raise ValueError(f"Unsupported update operator: {operator}")


class Document:
    """A document with dirty-field tracking.

    Fields given at construction of a new document count as modified, as do
    fields assigned afterwards. Saving clears the modified set.
    """

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        id: Any = None,
        is_new: bool = True,
    ):
        data = dict(data or {})
        self.id = id if id is not None else data.pop("_id", None)
        data.pop("_id", None)
        if self.id is None:
            self.id = new_id()
        self._data = data
        self.is_new = is_new
        self._modified: set[str] = set(data) if is_new else set()

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Document(id={self.id!r}, data={self._data!r})"

    def get(self, path: str, default: Any = None) -> Any:
        return get_path(self._data, path, default)

    def set(self, path: str, value: Any) -> None:
        set_path(self._data, path, value)
        self._modified.add(path)

    def is_modified(self, path: str) -> bool:
        """Check whether a path, or a parent or child of it, was assigned."""
        return any(
            m == path or m.startswith(path + ".") or path.startswith(m + ".")
            for m in self._modified
        )

    @property
    def modified_paths(self) -> frozenset[str]:
        return frozenset(self._modified)

    def to_dict(self) -> dict[str, Any]:
        return {"_id": self.id, **copy.deepcopy(self._data)}

    def mark_saved(self) -> None:
        self.is_new = False
        self._modified.clear()


class MemoryCollection:
    """Dict-backed collection keyed by document identifier.

    Records are copied on the way in and out so callers never share state
    with the collection.
    """

    def __init__(self, name: str, records: list[Mapping[str, Any]] | None = None):
        self.name = name
        self._records: dict[Any, dict[str, Any]] = {}
        for record in records or []:
            self._put(record)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, identifier: Any) -> bool:
        return identifier in self._records

    def _put(self, record: Mapping[str, Any]) -> None:
        if "_id" not in record:
            raise ValueError(f"Record in collection '{self.name}' has no _id")
        self._records[record["_id"]] = copy.deepcopy(dict(record))

    async def find_by_id(self, identifier: Any) -> dict[str, Any] | None:
        """Find a record by identifier.

        Raises:
            TypeError: If the identifier is not hashable.
        """
        await asyncio.sleep(0)
        record = self._records.get(identifier)
        return copy.deepcopy(record) if record is not None else None

    async def insert(self, record: Mapping[str, Any]) -> None:
        await asyncio.sleep(0)
        if record.get("_id") in self._records:
            raise ValueError(f"Duplicate _id {record['_id']!r} in '{self.name}'")
        self._put(record)

    async def replace(self, record: Mapping[str, Any]) -> None:
        await asyncio.sleep(0)
        self._put(record)

    async def delete(self, identifier: Any) -> bool:
        await asyncio.sleep(0)
        return self._records.pop(identifier, None) is not None
