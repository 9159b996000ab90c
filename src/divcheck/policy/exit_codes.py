"""Exit-code policy — predicate result → process exit status.

Conventional process semantics: a true predicate exits 0, a false one
exits nonzero. Errors never reach this mapping; they are handled in the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

from divcheck.utils.exit_codes import ExitCode


@dataclass(frozen=True)
class ExitCodePolicy:
    """Exit codes for the two predicate outcomes."""

    divisible: int = ExitCode.SUCCESS
    not_divisible: int = ExitCode.NOT_DIVISIBLE

    def __post_init__(self) -> None:
        if self.divisible == self.not_divisible:
            raise ValueError(
                "divisible and not_divisible exit codes must differ, "
                f"both are {int(self.divisible)}"
            )


DEFAULT_POLICY = ExitCodePolicy()


def exit_code_for_result(
    divisible: bool,
    *,
    policy: ExitCodePolicy = DEFAULT_POLICY,
) -> int:
    """Map the predicate outcome to an exit code."""
    return int(policy.divisible if divisible else policy.not_divisible)
