"""Model handles with pre-write hooks, and the registry that names them."""

import copy
import logging
from dataclasses import replace
from typing import Any, Awaitable, Callable, Iterator, Mapping

from ..integrity.operations import InsertOperation, UpdateOperation, WriteOperation
from ..schema.descriptor import SchemaDescriptor
from .memory import Document, MemoryCollection, apply_update

logger = logging.getLogger(__name__)

Hook = Callable[[WriteOperation], Awaitable[Any]]
Plugin = Callable[["Model"], None]


class Model:
    """A queryable model backed by a collection.

    Pre-write hooks run before anything is written; a hook that raises aborts
    the write and leaves the collection untouched.
    """

    def __init__(
        self,
        name: str,
        schema: SchemaDescriptor,
        collection: MemoryCollection | None = None,
    ):
        self.model_name = name
        self.schema = schema
        self.collection = collection if collection is not None else MemoryCollection(name)
        self.plugins: list[Plugin] = []
        self._pre_write: list[Hook] = []

    def __repr__(self) -> str:
        return f"Model({self.model_name!r})"

    def pre_write(self, hook: Hook) -> Hook:
        """Register a hook run before every save and update."""
        self._pre_write.append(hook)
        return hook

    def use(self, plugin: Plugin) -> "Model":
        """Apply a plugin to this model. Applying it twice is a no-op."""
        if plugin not in self.plugins:
            plugin(self)
            self.plugins.append(plugin)
        return self

    async def _run_hooks(self, operation: WriteOperation) -> None:
        for hook in self._pre_write:
            await hook(operation)

    async def find_by_id(self, identifier: Any) -> Document | None:
        record = await self.collection.find_by_id(identifier)
        if record is None:
            return None
        return Document(record, is_new=False)

    def new(self, data: Mapping[str, Any] | None = None, **fields: Any) -> Document:
        """Build an unsaved document."""
        return Document({**(data or {}), **fields})

    async def create(self, data: Mapping[str, Any] | None = None, **fields: Any) -> Document:
        """Build and save a new document."""
        document = self.new(data, **fields)
        await self.save(document)
        return document

    async def save(self, document: Document) -> Document:
        """Insert a new document or write back an existing one."""
        await self._run_hooks(InsertOperation(document, self.model_name))

        if document.is_new:
            await self.collection.insert(document.to_dict())
        else:
            await self.collection.replace(document.to_dict())
        document.mark_saved()
        return document

    async def update_one(
        self, identifier: Any, update: Mapping[str, Mapping[str, Any]]
    ) -> bool:
        """Apply an operator update to one document.

        Returns:
            True if a document matched and was updated.
        """
        await self._run_hooks(UpdateOperation(update, self.model_name))

        record = await self.collection.find_by_id(identifier)
        if record is None:
            return False

        updated = copy.deepcopy(record)
        apply_update(updated, update)
        await self.collection.replace(updated)
        return True

    async def delete(self, identifier: Any) -> bool:
        return await self.collection.delete(identifier)


class ModelRegistry(Mapping[str, Model]):
    """Named models, plus plugins applied to every model defined later."""

    def __init__(self):
        self._models: dict[str, Model] = {}
        self._plugins: list[Plugin] = []

    def __getitem__(self, name: str) -> Model:
        return self._models[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def plugin(self, plugin: Plugin) -> Plugin:
        """Register a plugin for every model defined from now on."""
        self._plugins.append(plugin)
        return plugin

    def define(
        self,
        name: str,
        schema: SchemaDescriptor,
        collection: MemoryCollection | None = None,
        plugins: list[Plugin] | tuple[Plugin, ...] = (),
    ) -> Model:
        """Define a model and apply schema-level then global plugins.

        Raises:
            ValueError: If a model with that name already exists.
        """
        if name in self._models:
            raise ValueError(f"Model '{name}' is already defined")

        if schema.name is None:
            schema = replace(schema, name=name)

        model = Model(name, schema, collection)
        for plugin in [*plugins, *self._plugins]:
            model.use(plugin)

        self._models[name] = model
        logger.debug("Defined model %s with %d plugin(s)", name, len(model.plugins))
        return model
