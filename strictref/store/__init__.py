"""In-memory document store used to host and exercise the validator."""

from .memory import Document, MemoryCollection, apply_update, new_id
from .models import Hook, Model, ModelRegistry, Plugin
from .snapshot import build_registry, load_records

__all__ = [
    "Document",
    "MemoryCollection",
    "apply_update",
    "new_id",
    "Hook",
    "Model",
    "ModelRegistry",
    "Plugin",
    "build_registry",
    "load_records",
]
