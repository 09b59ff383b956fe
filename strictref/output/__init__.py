"""Output formatting."""

from .formatter import format_foreign_keys, format_validation_result, format_write_outcome

__all__ = [
    "format_foreign_keys",
    "format_validation_result",
    "format_write_outcome",
]
