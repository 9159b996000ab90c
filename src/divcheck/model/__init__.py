"""Record and result types shared by the predicate, API and CLI layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from divcheck.errors import OperandRangeError, OperandTypeError

U32_MAX = 2**32 - 1


class Reason(str, Enum):
    """Why a record was judged divisible or not."""

    DIVISIBLE = "divisible"
    REMAINDER = "remainder"
    ZERO_DIVISOR = "zero_divisor"
    ZERO_DIVIDEND = "zero_dividend"


def _require_u32(name: str, value: Any) -> None:
    # bool is an int subclass; True/False are not operands.
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandTypeError(
            f"{name} must be an int, got {type(value).__name__}"
        )
    if not 0 <= value <= U32_MAX:
        raise OperandRangeError(
            f"{name} must be in [0, {U32_MAX}], got {value}"
        )


@dataclass(frozen=True, slots=True)
class DivisionRecord:
    """Two unsigned 32-bit operands: ``dividend`` is tested against ``divisor``."""

    divisor: int
    dividend: int

    def __post_init__(self) -> None:
        _require_u32("divisor", self.divisor)
        _require_u32("dividend", self.dividend)

    def to_dict(self) -> dict[str, int]:
        return {"divisor": self.divisor, "dividend": self.dividend}


@dataclass(frozen=True, slots=True)
class DivisionResult:
    """Outcome of evaluating one ``DivisionRecord``.

    ``remainder`` is ``None`` when a zero operand short-circuits the check.
    """

    record: DivisionRecord
    divisible: bool
    remainder: int | None
    reason: Reason
