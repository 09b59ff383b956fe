"""Tests for strict reference cycle detection."""

from strictref.graph.builder import build_graph
from strictref.schema.loader import parse_schema, parse_schema_from_string
from strictref.validators.base import IssueCode, Severity
from strictref.validators.cycles import check_strict_cycles


class TestCheckStrictCycles:
    def test_no_cycles(self, minimal_graph):
        assert check_strict_cycles(minimal_graph).issues == []

    def test_optional_back_reference_is_not_a_cycle(self):
        schema = parse_schema_from_string(
            """
models:
  Post:
    fields:
      author: {ref: User, strict: true}
  User:
    fields:
      pinned: {ref: Post}
"""
        )

        assert check_strict_cycles(build_graph(schema)).issues == []

    def test_cycles_in_example(self, examples_dir):
        schema = parse_schema(examples_dir / "invalid" / "strict_cycle.yaml")

        result = check_strict_cycles(build_graph(schema))

        assert result.is_valid
        assert sorted(w.cycle for w in result.warnings) == [("Husband", "Wife"), ("Node",)]
        assert all(w.code == IssueCode.STRICT_REFERENCE_CYCLE for w in result.warnings)
        assert all(w.severity == Severity.WARNING for w in result.warnings)

    def test_cycle_reported_in_reference_order(self):
        schema = parse_schema_from_string(
            """
models:
  A:
    fields:
      c: {ref: C, strict: true}
  B:
    fields:
      a: {ref: A, strict: true}
  C:
    fields:
      b: {ref: B, strict: true}
"""
        )

        (warning,) = check_strict_cycles(build_graph(schema)).warnings

        assert warning.cycle == ("A", "C", "B")
        assert warning.model == "A"
        assert warning.referenced_model == "C"
        assert "A -> C -> B -> A" in warning.message

    def test_self_reference(self):
        schema = parse_schema_from_string(
            "models:\n  Node:\n    fields:\n      parent: {ref: Node, strict: true}\n"
        )

        (warning,) = check_strict_cycles(build_graph(schema)).warnings
        assert warning.location == "Node -> Node"
