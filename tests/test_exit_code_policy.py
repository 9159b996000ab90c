"""Tests for policy.exit_codes — predicate result → exit status."""

from __future__ import annotations

import pytest

from divcheck.policy.exit_codes import (
    DEFAULT_POLICY,
    ExitCodePolicy,
    exit_code_for_result,
)
from divcheck.utils.exit_codes import ExitCode


class TestExitCodeForResult:
    def test_divisible_is_success(self) -> None:
        assert exit_code_for_result(True) == 0

    def test_not_divisible_is_nonzero(self) -> None:
        assert exit_code_for_result(False) == ExitCode.NOT_DIVISIBLE
        assert exit_code_for_result(False) != 0

    def test_returns_plain_int(self) -> None:
        assert type(exit_code_for_result(True)) is int

    def test_custom_policy(self) -> None:
        policy = ExitCodePolicy(divisible=0, not_divisible=3)
        assert exit_code_for_result(False, policy=policy) == 3


class TestExitCodePolicy:
    def test_default_policy(self) -> None:
        assert DEFAULT_POLICY.divisible == ExitCode.SUCCESS
        assert DEFAULT_POLICY.not_divisible == ExitCode.NOT_DIVISIBLE

    def test_codes_must_differ(self) -> None:
        with pytest.raises(ValueError, match="must differ"):
            ExitCodePolicy(divisible=1, not_divisible=1)


def test_exit_code_values_are_stable() -> None:
    assert [int(c) for c in ExitCode] == [0, 1, 2]
