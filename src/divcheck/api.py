"""Programmatic entrypoints — the same surface the CLI drives.

Usage::

    from divcheck.api import check, result_to_dict

    result = check(5, 55)
    result.divisible           # True
    result_to_dict(result)     # JSON-ready, matches division_result.schema.json
"""

from __future__ import annotations

from typing import Any

from divcheck.contracts.load import validate_instance as _validate_instance
from divcheck.model import DivisionRecord, DivisionResult
from divcheck.predicate import evaluate

SCHEMA_VERSION = "division_result_v1"
RESULT_SCHEMA = "division_result.schema.json"


def check(divisor: int, dividend: int) -> DivisionResult:
    """Build a record from two operands and evaluate it.

    Raises
    ------
    OperandTypeError
        If either operand is not an ``int``.
    OperandRangeError
        If either operand is outside the unsigned 32-bit range.
    """
    return evaluate(DivisionRecord(divisor=divisor, dividend=dividend))


def result_to_dict(result: DivisionResult) -> dict[str, Any]:
    """Flatten *result* into the ``division_result_v1`` wire shape."""
    return {
        "schema_version": SCHEMA_VERSION,
        **result.record.to_dict(),
        "divisible": result.divisible,
        "remainder": result.remainder,
        "reason": result.reason.value,
    }


def validate_instance(
    instance: dict[str, Any],
    schema_name: str = RESULT_SCHEMA,
) -> None:
    """Validate a dict against a named bundled schema.

    Raises
    ------
    jsonschema.ValidationError
        If validation fails.
    """
    _validate_instance(instance, schema_name)
