"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from strictref.schema.models import FieldSpec, ModelSpec, SchemaFile


class TestFieldSpec:
    def test_string_shorthand(self):
        spec = FieldSpec.model_validate("string")
        assert spec.type == "string"
        assert spec.strict is False

    def test_ref_implies_reference_type(self):
        spec = FieldSpec.model_validate({"ref": "User", "strict": True})
        assert spec.type == "reference"
        assert spec.ref == "User"
        assert spec.strict is True

    def test_ref_alias_type(self):
        spec = FieldSpec.model_validate({"type": "ref", "ref": "User"})
        assert spec.type == "reference"

    def test_list_shorthand_is_array(self):
        spec = FieldSpec.model_validate([{"ref": "User", "strict": True}])
        assert spec.type == "array"
        assert spec.of is not None
        assert spec.of.type == "reference"
        assert spec.of.strict is True

    def test_array_requires_element(self):
        with pytest.raises(ValidationError):
            FieldSpec.model_validate({"type": "array"})

    def test_element_only_on_arrays(self):
        with pytest.raises(ValidationError):
            FieldSpec.model_validate({"type": "string", "of": "string"})

    def test_array_shorthand_needs_one_element(self):
        with pytest.raises(ValidationError):
            FieldSpec.model_validate([{"ref": "A"}, {"ref": "B"}])

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            FieldSpec.model_validate({"type": "objectid"})


class TestModelSpec:
    def test_field_names_from_keys(self):
        model = ModelSpec.model_validate(
            {"fields": {"title": "string", "author": {"ref": "User"}}}
        )
        assert model.fields["title"].name == "title"
        assert model.fields["author"].name == "author"

    def test_field_order_preserved(self):
        model = ModelSpec.model_validate(
            {"fields": {"b": "string", "a": "number", "c": "date"}}
        )
        assert list(model.fields) == ["b", "a", "c"]

    def test_iter_reference_fields(self):
        model = ModelSpec.model_validate(
            {
                "fields": {
                    "name": "string",
                    "lead": {"ref": "User"},
                    "members": [{"ref": "User", "strict": True}],
                    "tags": ["string"],
                }
            }
        )
        refs = [(f.name, r.ref) for f, r in model.iter_reference_fields()]
        assert refs == [("lead", "User"), ("members", "User")]


class TestSchemaFile:
    def test_model_names_from_keys(self, minimal_schema):
        assert minimal_schema.get_all_model_names() == ["Image", "Profile"]
        assert minimal_schema.get_model("Profile").name == "Profile"

    def test_empty_schema(self):
        schema = SchemaFile.model_validate({})
        assert schema.models == {}

    def test_get_missing_model(self, minimal_schema):
        assert minimal_schema.get_model("Nope") is None
