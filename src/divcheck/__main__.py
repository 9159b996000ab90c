"""CLI entry-point for divcheck.

Usage:
    python -m divcheck
    python -m divcheck --json
    python -m divcheck --json --ci
    python -m divcheck -v

The operands are fixed (divisor=5, dividend=55). The exit status is the
predicate result: 0 when divisible, 1 when not.
"""

from __future__ import annotations

import argparse
import logging
import sys

import jsonschema

from divcheck import __version__
from divcheck.api import result_to_dict, validate_instance
from divcheck.core.config import DEFAULT_CONFIG, CheckConfig
from divcheck.model import DivisionResult
from divcheck.policy.exit_codes import exit_code_for_result
from divcheck.predicate import evaluate
from divcheck.utils.exit_codes import ExitCode
from divcheck.utils.json_norm import stable_json_dumps

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="divcheck",
        description="Check whether 5 evenly divides 55; the answer is the exit status.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the DivisionResult JSON to stdout.",
    )
    p.add_argument(
        "--ci",
        "--deterministic",
        dest="ci_mode",
        action="store_true",
        default=False,
        help="Validate the result against its schema and emit compact JSON.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug output to stderr.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_human(result: DivisionResult) -> None:
    """One-line summary to stderr."""
    rec = result.record
    if result.divisible:
        print(f"{rec.divisor} divides {rec.dividend}", file=sys.stderr)
    elif result.remainder is None:
        print(
            f"{rec.divisor} does not divide {rec.dividend} ({result.reason.value})",
            file=sys.stderr,
        )
    else:
        print(
            f"{rec.divisor} does not divide {rec.dividend} "
            f"(remainder {result.remainder})",
            file=sys.stderr,
        )


def run(config: CheckConfig = DEFAULT_CONFIG) -> int:
    """Evaluate the configured record and emit output; returns an exit code."""
    if config.verbose:
        logging.getLogger("divcheck").setLevel(logging.DEBUG)
    result = evaluate(config.record())
    logger.debug(
        "divisor=%d dividend=%d divisible=%s reason=%s",
        result.record.divisor,
        result.record.dividend,
        result.divisible,
        result.reason.value,
    )

    if config.json_out or config.ci_mode:
        payload = result_to_dict(result)
        if config.ci_mode:
            try:
                validate_instance(payload)
            except (jsonschema.ValidationError, FileNotFoundError) as e:
                print(f"error: result failed schema validation: {e}", file=sys.stderr)
                return int(ExitCode.ERROR)
        if config.json_out:
            sys.stdout.write(stable_json_dumps(payload, ci_mode=config.ci_mode))
    if not config.json_out:
        _print_human(result)

    return exit_code_for_result(result.divisible)


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = divisible, 1 = not, 2 = error)."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    config = CheckConfig(
        divisor=DEFAULT_CONFIG.divisor,
        dividend=DEFAULT_CONFIG.dividend,
        json_out=args.json_out,
        ci_mode=args.ci_mode,
        verbose=args.verbose,
    )
    return run(config)


if __name__ == "__main__":
    raise SystemExit(main())
