"""divcheck — unsigned 32-bit divisibility predicate."""

__all__ = [
    "__version__",
    "DivisionRecord",
    "DivisionResult",
    "Reason",
    "check",
    "evaluate",
    "is_divisible",
]
__version__ = "0.1.0"

from divcheck.model import DivisionRecord, DivisionResult, Reason  # noqa: E402
from divcheck.predicate import evaluate, is_divisible  # noqa: E402
from divcheck.api import check  # noqa: E402
