"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — the divisor evenly divides the dividend
  1   Not divisible — remainder, or a zero operand
  2   Error — usage error, malformed result in CI mode
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    NOT_DIVISIBLE = 1
    ERROR = 2
