"""Tests for schema descriptors."""

from dataclasses import FrozenInstanceError

import pytest

from strictref.schema.descriptor import (
    SchemaDescriptor,
    StorageKind,
    array_of,
    describe_model,
    field,
    ref,
)


class TestDescribeModel:
    def test_scalar_reference(self, minimal_schema):
        schema = describe_model(minimal_schema.models["Profile"])

        assert schema.name == "Profile"
        assert schema.paths == ["username", "image"]

        image = schema.get("image")
        assert image.storage_kind == StorageKind.REFERENCE
        assert image.reference_target == "Image"
        assert image.strict is True
        assert image.is_array is False

    def test_array_of_references(self, band_schema):
        schema = describe_model(band_schema.models["Band"])

        members = schema.get("members")
        assert members.is_array is True
        assert members.strict is False
        assert members.is_array_of_references
        assert members.element.reference_target == "User"
        assert members.element.strict is True

    def test_plain_field(self, minimal_schema):
        schema = describe_model(minimal_schema.models["Profile"])

        username = schema.get("username")
        assert username.storage_kind == StorageKind.STRING
        assert not username.is_reference
        assert username.reference_target is None

    def test_get_unknown_path(self, minimal_schema):
        schema = describe_model(minimal_schema.models["Image"])
        assert schema.get("nope") is None


class TestBuild:
    def test_paths_filled_from_keys(self):
        schema = SchemaDescriptor.build(
            {
                "title": field("string"),
                "author": ref("User", strict=True),
                "tags": array_of(field("string")),
            },
            name="Post",
        )

        assert schema.name == "Post"
        assert schema.paths == ["title", "author", "tags"]
        assert len(schema) == 3
        assert schema.get("author").path == "author"

    def test_ref_accepts_model_handle(self, make_model):
        image = make_model("Image")
        schema = SchemaDescriptor.build({"image": ref(image, strict=True)})

        assert schema.get("image").reference_target is image

    def test_descriptors_are_immutable(self):
        schema = SchemaDescriptor.build({"author": ref("User")})

        with pytest.raises(FrozenInstanceError):
            schema.get("author").strict = True
