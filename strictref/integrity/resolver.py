"""Resolution of declared reference targets to queryable models."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable

from .analyzer import ForeignKeyField
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@runtime_checkable
class QueryableModel(Protocol):
    """The only capability required from the backing store."""

    model_name: str

    async def find_by_id(self, identifier: Any) -> Any | None: ...


@dataclass(frozen=True)
class ResolvedReference:
    """A foreign key field paired with the model it points to."""

    field: ForeignKeyField
    model: QueryableModel
    model_name: str


def model_name_of(target: Any) -> str:
    """Display name for a reference target (name or handle)."""
    if isinstance(target, str):
        return target
    return getattr(target, "model_name", None) or type(target).__name__


def resolve_reference(
    field: ForeignKeyField,
    registry: Mapping[str, QueryableModel],
    owner: str | None = None,
) -> ResolvedReference:
    """Resolve the model a foreign key field points to.

    Direct handles are used as-is. Names are looked up in ``registry``; there
    is no fallback to any process-wide registry.

    Args:
        field: The foreign key field.
        registry: Model name to model handle mapping.
        owner: Name of the model being written, for error messages.

    Returns:
        The resolved reference.

    Raises:
        ConfigurationError: If the named model is not in the registry.
    """
    target = field.target
    if isinstance(target, str):
        model = registry.get(target)
        if model is None:
            raise ConfigurationError(field.path, target, owner)
    elif target is None:
        raise ConfigurationError(field.path, "<undefined>", owner)
    else:
        model = target

    logger.debug("Resolved %s.%s -> %s", owner, field.path, model_name_of(target))
    return ResolvedReference(field=field, model=model, model_name=model_name_of(target))
