"""Static checks on reference field declarations."""

from ..integrity.analyzer import ReferenceShape
from ..schema.models import FieldSpec, SchemaFile
from .base import CheckResult, IssueCode


def _shape(field: FieldSpec) -> ReferenceShape:
    return ReferenceShape.ARRAY if field.type == "array" else ReferenceShape.SCALAR


def check_reference_targets(schema_file: SchemaFile) -> CheckResult:
    """Check that every reference names a model defined in the schema file.

    A reference to an undeclared model would fail every write touching it
    with a configuration error, so it is reported as an error here.

    Args:
        schema_file: The parsed schema file.

    Returns:
        CheckResult with errors for missing or undefined targets.
    """
    result = CheckResult()
    defined = set(schema_file.get_all_model_names())

    for model_name, model in schema_file.models.items():
        for field, reference in model.iter_reference_fields():
            if reference.ref is None:
                result.add(
                    IssueCode.MISSING_REF_TARGET,
                    model_name,
                    f"Reference field '{field.name}' does not name a model",
                    path=field.name,
                    strict=reference.strict,
                    shape=_shape(field),
                )
            elif reference.ref not in defined:
                result.add(
                    IssueCode.UNDEFINED_MODEL_REF,
                    model_name,
                    f"Field references undefined model '{reference.ref}'",
                    path=field.name,
                    referenced_model=reference.ref,
                    strict=reference.strict,
                    shape=_shape(field),
                )

    return result


def check_strict_flags(schema_file: SchemaFile) -> CheckResult:
    """Check for strict flags that will never be enforced.

    Only scalar references and array elements are inspected for the strict
    flag; anywhere else it is silently ignored at write time.
    """
    result = CheckResult()

    for model_name, model in schema_file.models.items():
        for field in model.fields.values():
            element = field.of
            element_ref = element.ref if element is not None else None

            if field.type == "array" and field.strict:
                hint = ""
                if element is not None and element.type == "reference":
                    hint = "; set it on the element instead"
                result.add(
                    IssueCode.STRICT_FLAG_ON_ARRAY,
                    model_name,
                    f"Strict flag on array '{field.name}' has no effect{hint}",
                    path=field.name,
                    referenced_model=element_ref,
                    strict=element.strict if element is not None else False,
                    shape=ReferenceShape.ARRAY,
                )
            elif field.type not in ("reference", "array") and field.strict:
                result.add(
                    IssueCode.STRICT_WITHOUT_REFERENCE,
                    model_name,
                    f"Strict flag on non-reference field '{field.name}' has no effect",
                    path=field.name,
                    strict=True,
                )

            if element is not None and element.strict and element.type != "reference":
                result.add(
                    IssueCode.STRICT_WITHOUT_REFERENCE,
                    model_name,
                    f"Strict flag on non-reference elements of '{field.name}' has no effect",
                    path=field.name,
                    strict=True,
                    shape=ReferenceShape.ARRAY,
                )

    return result
