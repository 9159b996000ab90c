"""Run configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass

from divcheck.model import DivisionRecord


@dataclass(frozen=True)
class CheckConfig:
    """Immutable run configuration.

    The operands are fixed; only output options vary between runs.
    """

    divisor: int = 5
    dividend: int = 55
    json_out: bool = False
    ci_mode: bool = False
    verbose: bool = False

    def record(self) -> DivisionRecord:
        return DivisionRecord(divisor=self.divisor, dividend=self.dividend)


DEFAULT_CONFIG = CheckConfig()
