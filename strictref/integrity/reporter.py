"""Turn existence check outcomes into an allow/reject decision."""

import logging
from enum import Enum

from .checker import CheckOutcome
from .errors import MissingReferenceError

logger = logging.getLogger(__name__)


class WriteState(str, Enum):
    """Validation state of a pending write."""

    PENDING = "pending"
    RESOLVING = "resolving"
    ALLOWED = "allowed"
    REJECTED = "rejected"


def report_outcomes(outcomes: list[CheckOutcome], owner: str | None = None) -> WriteState:
    """Allow the write, or raise for the first failed check.

    Outcomes are scanned in the order they were issued (field declaration
    order, then element order), so the reported failure does not depend on
    which lookup finished first.

    Raises:
        MissingReferenceError: If an identifier matched no document.
        StoreError: If a lookup failed.
    """
    for outcome in outcomes:
        if outcome.ok:
            continue

        check = outcome.check
        logger.info(
            "%s: %s -> %s, check of %s=%r against %s failed",
            owner,
            WriteState.RESOLVING.value,
            WriteState.REJECTED.value,
            check.path,
            check.identifier,
            check.reference.model_name,
        )
        if outcome.error is not None:
            raise outcome.error
        raise MissingReferenceError(
            check.path, owner, check.reference.model_name, check.identifier
        )

    return WriteState.ALLOWED
