"""Errors raised while reading schema, snapshot and write files."""

from dataclasses import dataclass
from typing import Any


class SchemaLoadError(Exception):
    """Raised when an input file cannot be read or has the wrong shape.

    Covers schema files, data snapshots and write files alike; ``path`` is
    the offending file when the input came from disk.
    """

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


@dataclass(frozen=True)
class FieldError:
    """One problem found in a schema file, located by model and field."""

    loc: str
    msg: str
    type: str
    model: str | None = None
    field: str | None = None

    @classmethod
    def from_pydantic(cls, error: dict[str, Any]) -> "FieldError":
        """Locate a pydantic error under ``models.<Model>.fields.<field>``."""
        loc = [str(part) for part in error["loc"]]
        model = loc[1] if len(loc) > 1 and loc[0] == "models" else None
        field = loc[3] if model and len(loc) > 3 and loc[2] == "fields" else None
        return cls(".".join(loc), error["msg"], error["type"], model, field)

    @property
    def location(self) -> str:
        if self.model is None:
            return self.loc or "(root)"
        if self.field is None:
            return self.model
        return f"{self.model}.{self.field}"


class SchemaValidationError(Exception):
    """Raised when a schema file parses as YAML but declares invalid models."""

    def __init__(
        self,
        message: str,
        errors: list[FieldError] | None = None,
        path: str | None = None,
    ):
        self.errors = list(errors or [])
        self.path = path
        super().__init__(message)
