"""Attach the foreign reference validator to models."""

import logging
from typing import Mapping

from .integrity.resolver import QueryableModel
from .integrity.validator import ForeignRefValidator
from .store.models import Model, Plugin

logger = logging.getLogger(__name__)


def foreign_ref_plugin(registry: Mapping[str, QueryableModel]) -> Plugin:
    """Create a plugin enforcing strict foreign references.

    The plugin can be applied to one model (``model.use(plugin)`` or
    ``registry.define(..., plugins=[plugin])``) or registered globally with
    ``registry.plugin(plugin)`` so every model defined afterwards gets it.
    Reference names are resolved against ``registry`` when a write happens,
    so models defined after the plugin is created are found.

    Args:
        registry: Model name to model handle mapping.

    Returns:
        A plugin callable taking a Model.
    """

    def plugin(model: Model) -> None:
        validator = ForeignRefValidator(model.schema, registry, model.model_name)
        model.pre_write(validator)
        logger.debug(
            "Attached foreign reference validator to %s (%d strict field(s))",
            model.model_name,
            len(validator.foreign_keys),
        )

    return plugin
