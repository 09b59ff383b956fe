"""Strict reference cycle detection."""

from ..graph.reference_graph import ReferenceGraph
from .base import CheckResult, IssueCode


def check_strict_cycles(graph: ReferenceGraph) -> CheckResult:
    """Check for cycles made only of strict references.

    The first document created in such a cycle has nothing to point at yet,
    so it can only be saved with the reference left empty.

    Args:
        graph: The reference graph.

    Returns:
        CheckResult with a warning per cycle.
    """
    result = CheckResult()

    for cycle in graph.get_strict_cycles():
        path = " -> ".join([*cycle, cycle[0]])
        result.add(
            IssueCode.STRICT_REFERENCE_CYCLE,
            cycle[0],
            f"Models form a cycle of strict references: {path}",
            referenced_model=cycle[1] if len(cycle) > 1 else cycle[0],
            strict=True,
            cycle=tuple(cycle),
        )

    return result
