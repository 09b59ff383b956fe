"""Pydantic models for the strictref schema language."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

FieldType = Literal[
    "string", "number", "boolean", "date", "mixed", "reference", "array"
]


class FieldSpec(BaseModel):
    """A declared field of a model."""

    name: str = ""  # Will be set from the key
    type: FieldType = "mixed"
    ref: str | None = None
    strict: bool = False
    of: "FieldSpec | None" = None
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_field(cls, data):
        """Normalize shorthand field syntax.

        - ``string`` -> ``{type: string}``
        - ``[{ref: User}]`` -> ``{type: array, of: {ref: User}}``
        - ``{ref: User}`` -> ``{type: reference, ref: User}``
        """
        if isinstance(data, str):
            return {"type": data}

        if isinstance(data, list):
            if len(data) != 1:
                raise ValueError("array shorthand must contain exactly one element")
            return {"type": "array", "of": data[0]}

        if isinstance(data, dict):
            data = dict(data)
            if "type" not in data:
                if data.get("ref") is not None:
                    data["type"] = "reference"
                elif data.get("of") is not None:
                    data["type"] = "array"
            if data.get("type") == "ref":
                data["type"] = "reference"

        return data

    @model_validator(mode="after")
    def check_element(self) -> "FieldSpec":
        """Arrays need an element spec; nothing else may carry one."""
        if self.type == "array" and self.of is None:
            raise ValueError(f"array field '{self.name}' needs an 'of' element")
        if self.type != "array" and self.of is not None:
            raise ValueError(f"only array fields may declare 'of' ({self.name})")
        return self


class ModelSpec(BaseModel):
    """A model (collection) declared in a schema file."""

    name: str = ""  # Will be set from the key
    fields: dict[str, FieldSpec] = Field(default_factory=dict)
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def set_field_names(cls, data):
        """Set field names from their keys."""
        if not isinstance(data, dict):
            return data

        fields = data.get("fields")
        if isinstance(fields, dict):
            normalized = {}
            for name, spec in fields.items():
                if isinstance(spec, dict):
                    spec = {**spec, "name": name}
                elif isinstance(spec, str):
                    spec = {"type": spec, "name": name}
                elif isinstance(spec, list) and len(spec) == 1:
                    spec = {"type": "array", "of": spec[0], "name": name}
                normalized[name] = spec
            data = {**data, "fields": normalized}

        return data

    def iter_reference_fields(self):
        """Yield ``(field, reference_spec)`` for scalar and array references."""
        for field in self.fields.values():
            if field.type == "reference":
                yield field, field
            elif field.type == "array" and field.of and field.of.type == "reference":
                yield field, field.of


class SchemaFile(BaseModel):
    """Root model for a strictref YAML schema file."""

    models: dict[str, ModelSpec] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_schema(cls, data):
        """Set model names from keys."""
        if not isinstance(data, dict):
            return data

        models = data.get("models", {})
        if isinstance(models, dict):
            data = {
                **data,
                "models": {
                    name: {**spec, "name": name} if isinstance(spec, dict) else spec
                    for name, spec in models.items()
                },
            }

        return data

    def get_model(self, name: str) -> ModelSpec | None:
        """Get a model by name."""
        return self.models.get(name)

    def get_all_model_names(self) -> list[str]:
        """Get all model names."""
        return list(self.models.keys())
