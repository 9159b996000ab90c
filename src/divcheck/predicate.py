"""Divisibility predicate.

Contract:
  - zero divisor or zero dividend -> False, no division is attempted
  - otherwise True iff ``dividend % divisor == 0``
  - pure: same record, same answer
"""

from __future__ import annotations

import logging

from divcheck.model import DivisionRecord, DivisionResult, Reason

logger = logging.getLogger(__name__)


def evaluate(record: DivisionRecord) -> DivisionResult:
    """Evaluate *record* and report the remainder and the deciding reason.

    The divisor is checked before the dividend, so a record with both
    operands zero reports ``Reason.ZERO_DIVISOR``.
    """
    if record.divisor == 0:
        logger.debug("zero divisor, dividend=%d: not divisible", record.dividend)
        return DivisionResult(record, False, None, Reason.ZERO_DIVISOR)
    if record.dividend == 0:
        logger.debug("zero dividend, divisor=%d: not divisible", record.divisor)
        return DivisionResult(record, False, None, Reason.ZERO_DIVIDEND)

    remainder = record.dividend % record.divisor
    if remainder == 0:
        return DivisionResult(record, True, 0, Reason.DIVISIBLE)
    return DivisionResult(record, False, remainder, Reason.REMAINDER)


def is_divisible(record: DivisionRecord) -> bool:
    """Return True if ``record.divisor`` evenly divides ``record.dividend``."""
    if not record.divisor or not record.dividend:
        return False
    return record.dividend % record.divisor == 0
