"""Exceptions raised when a write is vetoed."""

from typing import Any


class ReferenceIntegrityError(Exception):
    """Base exception for rejected writes."""

    pass


class ConfigurationError(ReferenceIntegrityError):
    """Raised when a field references a model absent from the registry."""

    def __init__(self, path: str, reference: str, model_name: str | None = None):
        self.path = path
        self.reference = reference
        self.model_name = model_name
        owner = f' of model "{model_name}"' if model_name else ""
        super().__init__(
            f'Model "{reference}" referenced by path "{path}"{owner} does not exist'
        )


class MissingReferenceError(ReferenceIntegrityError):
    """Raised when a candidate identifier matches no document."""

    def __init__(
        self,
        path: str,
        model_name: str | None,
        referenced_model: str,
        identifier: Any = None,
    ):
        self.path = path
        self.model_name = model_name
        self.referenced_model = referenced_model
        self.identifier = identifier
        super().__init__(
            f'Invalid reference id to document in model "{referenced_model}"'
            f' for path "{path}" of model "{model_name}"'
        )


class StoreError(ReferenceIntegrityError):
    """Raised when the existence lookup itself fails.

    The store's exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        path: str,
        model_name: str | None,
        referenced_model: str,
        identifier: Any = None,
        reason: str | None = None,
    ):
        self.path = path
        self.model_name = model_name
        self.referenced_model = referenced_model
        self.identifier = identifier
        self.reason = reason
        message = (
            f'Lookup of {identifier!r} in model "{referenced_model}"'
            f' for path "{path}" of model "{model_name}" failed'
        )
        if reason:
            message += f": {reason}"
        super().__init__(message)
