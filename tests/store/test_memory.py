"""Tests for in-memory documents and collections."""

import pytest

from strictref.store.memory import (
    Document,
    MemoryCollection,
    apply_update,
    get_path,
    set_path,
)


class TestDocument:
    def test_new_document_fields_are_modified(self):
        doc = Document({"a": 1, "b": None})

        assert doc.is_new
        assert doc.modified_paths == {"a", "b"}
        assert doc.is_modified("a")

    def test_id_taken_from_data(self):
        doc = Document({"_id": "x1", "a": 1})

        assert doc.id == "x1"
        assert "_id" not in doc
        assert doc.to_dict() == {"_id": "x1", "a": 1}

    def test_generated_id(self):
        assert Document().id != Document().id

    def test_assignment_marks_modified(self):
        doc = Document({"a": 1}, is_new=False)
        assert not doc.is_modified("a")

        doc["a"] = 2
        assert doc.is_modified("a")
        assert doc["a"] == 2

    def test_nested_paths(self):
        doc = Document({"meta": {"owner": "u1"}})

        assert doc.get("meta.owner") == "u1"
        assert doc.is_modified("meta.owner")
        assert doc.get("meta.missing", "default") == "default"

    def test_mark_saved(self):
        doc = Document({"a": 1})
        doc.mark_saved()

        assert not doc.is_new
        assert doc.modified_paths == frozenset()


class TestPaths:
    def test_set_creates_parents(self):
        data = {}
        set_path(data, "a.b.c", 1)
        assert data == {"a": {"b": {"c": 1}}}
        assert get_path(data, "a.b.c") == 1

    def test_get_through_non_mapping(self):
        assert get_path({"a": 1}, "a.b") is None


class TestApplyUpdate:
    def test_operators(self):
        record = {"_id": "b1", "name": "x", "count": 1, "members": ["a"], "lead": "u"}

        apply_update(
            record,
            {
                "$set": {"name": "y"},
                "$inc": {"count": 2},
                "$push": {"members": {"$each": ["b", "a"]}},
                "$unset": {"lead": 1},
            },
        )

        assert record == {"_id": "b1", "name": "y", "count": 3, "members": ["a", "b", "a"]}

    def test_add_to_set(self):
        record = {"members": ["a"]}
        apply_update(record, {"$addToSet": {"members": {"$each": ["a", "b"]}}})
        assert record["members"] == ["a", "b"]

    def test_unsupported_operator(self):
        with pytest.raises(ValueError, match="Unsupported"):
            apply_update({}, {"$rename": {"a": "b"}})


class TestMemoryCollection:
    @pytest.mark.asyncio
    async def test_find_by_id(self):
        collection = MemoryCollection("Image", [{"_id": "A1", "url": "x"}])

        assert await collection.find_by_id("A1") == {"_id": "A1", "url": "x"}
        assert await collection.find_by_id("B2") is None

    @pytest.mark.asyncio
    async def test_records_are_copied(self):
        collection = MemoryCollection("Image")
        record = {"_id": "A1", "tags": ["a"]}
        await collection.insert(record)

        record["tags"].append("b")
        found = await collection.find_by_id("A1")
        found["tags"].append("c")

        assert (await collection.find_by_id("A1"))["tags"] == ["a"]

    @pytest.mark.asyncio
    async def test_duplicate_insert(self):
        collection = MemoryCollection("Image", [{"_id": "A1"}])

        with pytest.raises(ValueError, match="Duplicate"):
            await collection.insert({"_id": "A1"})

    @pytest.mark.asyncio
    async def test_delete(self):
        collection = MemoryCollection("Image", [{"_id": "A1"}])

        assert await collection.delete("A1") is True
        assert await collection.delete("A1") is False
        assert len(collection) == 0

    @pytest.mark.asyncio
    async def test_unhashable_identifier_raises(self):
        collection = MemoryCollection("Image")

        with pytest.raises(TypeError):
            await collection.find_by_id({"not": "an id"})

    def test_record_without_id(self):
        with pytest.raises(ValueError):
            MemoryCollection("Image", [{"url": "x"}])
