"""Exit code contract tests — enforce stable CLI exit semantics.

Code  Meaning
----  -------
  0   Success — divisor evenly divides dividend
  1   Not divisible
  2   Error — usage error, malformed result
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

from divcheck.api import validate_instance

REPO_ROOT = Path(__file__).resolve().parents[1]


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    env = {**os.environ}
    env["PYTHONPATH"] = str(REPO_ROOT / "src") + (
        os.pathsep + env["PYTHONPATH"] if env.get("PYTHONPATH") else ""
    )
    return subprocess.run(
        [sys.executable, "-m", "divcheck", *args],
        capture_output=True,
        text=True,
        env=env,
    )


class TestDefaultRun:
    """The fixed record (5, 55) is divisible → exit 0."""

    def test_no_args_returns_0(self) -> None:
        r = _run()
        assert r.returncode == 0, r.stderr
        assert r.stdout == ""
        assert "5 divides 55" in r.stderr

    def test_json_returns_0_and_valid_payload(self) -> None:
        r = _run("--json")
        assert r.returncode == 0, r.stderr
        payload = json.loads(r.stdout)
        validate_instance(payload)
        assert payload["divisible"] is True

    def test_ci_json_is_deterministic(self) -> None:
        a = _run("--json", "--ci")
        b = _run("--json", "--ci")
        assert a.returncode == 0, a.stderr
        assert a.stdout == b.stdout
        assert a.stdout.count("\n") == 1

    def test_verbose_logs_debug(self) -> None:
        r = _run("-v")
        assert r.returncode == 0, r.stderr
        assert "DEBUG" in r.stderr
        assert "divisor=5 dividend=55 divisible=True" in r.stderr

    def test_deterministic_alias_matches_ci(self) -> None:
        a = _run("--json", "--ci")
        b = _run("--json", "--deterministic")
        assert b.returncode == 0, b.stderr
        assert b.stdout == a.stdout
        assert b.stdout.count("\n") == 1


class TestUsageErrors:
    def test_unknown_flag_returns_2(self) -> None:
        r = _run("--divisor", "7")
        assert r.returncode == 2

    def test_positional_operands_rejected(self) -> None:
        r = _run("7", "10")
        assert r.returncode == 2
