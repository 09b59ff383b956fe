"""Concurrent existence checks for candidate identifiers."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from .errors import StoreError
from .resolver import ResolvedReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceCheck:
    """One identifier to look up in one resolved model."""

    reference: ResolvedReference
    identifier: Any

    @property
    def path(self) -> str:
        return self.reference.field.path


@dataclass(frozen=True)
class CheckOutcome:
    """Result of a single existence lookup."""

    check: ReferenceCheck
    exists: bool
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.exists and self.error is None


async def _lookup(check: ReferenceCheck, owner: str | None) -> CheckOutcome:
    reference = check.reference
    try:
        found = await reference.model.find_by_id(check.identifier)
    except Exception as e:
        error = StoreError(
            check.path, owner, reference.model_name, check.identifier, reason=str(e)
        )
        error.__cause__ = e
        logger.debug("Lookup of %r in %s failed: %s", check.identifier, reference.model_name, e)
        return CheckOutcome(check=check, exists=False, error=error)

    return CheckOutcome(check=check, exists=found is not None)


async def check_existence(
    checks: list[ReferenceCheck], owner: str | None = None
) -> list[CheckOutcome]:
    """Look up every candidate identifier concurrently.

    Every lookup runs to completion; a passing identifier never masks a
    missing one.

    Args:
        checks: The lookups to perform.
        owner: Name of the model being written, for error messages.

    Returns:
        One outcome per check, in the same order as ``checks``.
    """
    if not checks:
        return []
    logger.debug("Issuing %d existence lookup(s) for %s", len(checks), owner)
    return list(await asyncio.gather(*(_lookup(c, owner) for c in checks)))
