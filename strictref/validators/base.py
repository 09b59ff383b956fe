"""Issues found by the static checks on reference declarations."""

from dataclasses import dataclass, field
from enum import Enum

from ..integrity.analyzer import ReferenceShape


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class IssueCode(str, Enum):
    """What is wrong with a reference declaration."""

    UNDEFINED_MODEL_REF = "UNDEFINED_MODEL_REF"
    MISSING_REF_TARGET = "MISSING_REF_TARGET"
    STRICT_FLAG_ON_ARRAY = "STRICT_FLAG_ON_ARRAY"
    STRICT_WITHOUT_REFERENCE = "STRICT_WITHOUT_REFERENCE"
    STRICT_REFERENCE_CYCLE = "STRICT_REFERENCE_CYCLE"

    @property
    def severity(self) -> Severity:
        # Every write touching a broken target fails; the rest only never enforce
        if self in (IssueCode.UNDEFINED_MODEL_REF, IssueCode.MISSING_REF_TARGET):
            return Severity.ERROR
        return Severity.WARNING


@dataclass(frozen=True)
class SchemaIssue:
    """A problem with one reference field, or with a cycle of models.

    Attributes:
        code: What is wrong.
        model: The model declaring the field (the first model of a cycle).
        message: Human readable explanation.
        path: The field path, if the issue is about a single field.
        referenced_model: The model the field points at, if it names one.
        strict: Whether the field (or its element) is declared strict.
        shape: Whether the field holds one reference or an array of them.
        cycle: Models along a cycle of strict references, in reference order.
    """

    code: IssueCode
    model: str
    message: str
    path: str | None = None
    referenced_model: str | None = None
    strict: bool | None = None
    shape: ReferenceShape | None = None
    cycle: tuple[str, ...] = ()

    @property
    def severity(self) -> Severity:
        return self.code.severity

    @property
    def location(self) -> str:
        if self.cycle:
            return " -> ".join((*self.cycle, self.cycle[0]))
        location = self.model if self.path is None else f"{self.model}.{self.path}"
        if self.shape == ReferenceShape.ARRAY:
            location += "[]"
        if self.referenced_model:
            location += f" -> {self.referenced_model}"
        return location

    def __str__(self) -> str:
        return f"{self.severity.value.upper()}: {self.code.value} [{self.location}] - {self.message}"


@dataclass
class CheckResult:
    """Issues collected over one schema file, in the order they were found."""

    issues: list[SchemaIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[SchemaIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[SchemaIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def is_valid(self) -> bool:
        """Every reference declared in the file can be enforced."""
        return not self.has_errors

    def add(self, code: IssueCode, model: str, message: str, **attrs) -> SchemaIssue:
        """Record an issue; its severity follows from the code."""
        issue = SchemaIssue(code=code, model=model, message=message, **attrs)
        self.issues.append(issue)
        return issue

    def by_model(self) -> dict[str, list[SchemaIssue]]:
        """Group issues under the model they were raised for."""
        grouped: dict[str, list[SchemaIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.model, []).append(issue)
        return grouped

    def merge(self, other: "CheckResult") -> None:
        self.issues.extend(other.issues)
