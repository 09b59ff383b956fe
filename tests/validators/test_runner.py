"""Tests for validation runner."""

from strictref.graph.builder import build_graph
from strictref.schema.loader import parse_schema_from_string
from strictref.validators.runner import run_validators, validate_schema_file


class TestRunValidators:
    def test_combines_all_validators(self, minimal_schema, minimal_graph):
        assert run_validators(minimal_schema, minimal_graph).is_valid

    def test_collects_issues_from_multiple_validators(self):
        yaml = """
models:
  Node:
    fields:
      parent: {ref: Node, strict: true}
      owner: {ref: Ghost, strict: true}
      label: {type: string, strict: true}
"""
        schema = parse_schema_from_string(yaml)

        result = run_validators(schema, build_graph(schema))

        codes = {i.code for i in result.issues}
        assert codes == {
            "UNDEFINED_MODEL_REF",
            "STRICT_WITHOUT_REFERENCE",
            "STRICT_REFERENCE_CYCLE",
        }
        assert len(result.errors) == 1
        assert len(result.warnings) == 2


class TestValidateSchemaFile:
    def test_validate_valid_file(self, examples_dir):
        assert validate_schema_file(examples_dir / "garage.yaml").is_valid

    def test_validate_broken_file(self, examples_dir):
        result = validate_schema_file(examples_dir / "invalid" / "undefined_reference.yaml")

        assert not result.is_valid
        assert len(result.errors) == 3
