"""Tests for strict foreign reference detection."""

from strictref.integrity.analyzer import ReferenceShape, find_foreign_key_fields
from strictref.schema.descriptor import (
    SchemaDescriptor,
    array_of,
    describe_model,
    field,
    ref,
)


class TestFindForeignKeyFields:
    def test_strict_scalar_reference(self, minimal_schema):
        fks = find_foreign_key_fields(describe_model(minimal_schema.models["Profile"]))

        assert [fk.path for fk in fks] == ["image"]
        assert fks[0].shape == ReferenceShape.SCALAR
        assert fks[0].target == "Image"
        assert not fks[0].is_array

    def test_strict_array_reference_uses_element_flag(self, band_schema):
        fks = find_foreign_key_fields(describe_model(band_schema.models["Band"]))

        # lead is a reference but not strict
        assert [fk.path for fk in fks] == ["members"]
        assert fks[0].shape == ReferenceShape.ARRAY
        assert fks[0].target == "User"

    def test_strict_flag_on_array_itself_is_ignored(self):
        schema = SchemaDescriptor.build(
            {"members": array_of(ref("User"), strict=True)}
        )
        assert find_foreign_key_fields(schema) == ()

    def test_non_reference_fields_excluded(self):
        schema = SchemaDescriptor.build(
            {
                "name": field("string", strict=True),
                "scores": array_of(field("number", strict=True)),
                "owner": ref("User"),
            }
        )
        assert find_foreign_key_fields(schema) == ()

    def test_declaration_order(self):
        schema = SchemaDescriptor.build(
            {
                "b": ref("B", strict=True),
                "plain": field("string"),
                "a": array_of(ref("A", strict=True)),
                "c": ref("C", strict=True),
            }
        )
        assert [fk.path for fk in find_foreign_key_fields(schema)] == ["b", "a", "c"]

    def test_direct_handle_target(self, make_model):
        fuel = make_model("Fuel")
        schema = SchemaDescriptor.build({"fuelType": ref(fuel, strict=True)})

        (fk,) = find_foreign_key_fields(schema)
        assert fk.target is fuel

    def test_empty_schema(self):
        assert find_foreign_key_fields(SchemaDescriptor()) == ()
