"""Exception hierarchy for operand validation."""

from __future__ import annotations


class DivCheckError(Exception):
    """Base class for all divcheck errors."""


class OperandTypeError(DivCheckError, TypeError):
    """Operand is not an ``int`` (``bool`` is rejected too)."""


class OperandRangeError(DivCheckError, ValueError):
    """Operand falls outside the unsigned 32-bit range."""
