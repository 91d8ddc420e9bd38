"""Payroll calculator command line interface.

Usage:
    payroll-calc calculate --input worker.json [--year 2024 --month 2]
    payroll-calc batch --input workers.jsonl --on-error collect
    payroll-calc simulate --count 1000
    payroll-calc serve
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

from payroll_calc.boundary import (
    BatchErrorPolicy,
    MalformedInputError,
    parse_worker,
    parse_workers,
)
from payroll_calc.calculators.batch import BatchProcessor, simulate_bulk
from payroll_calc.calculators.calculator import PayrollCalculator
from payroll_calc.calculators.types import PayPeriod
from payroll_calc.config import configure_logging, get_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RECORD_ERRORS = 1
EXIT_MALFORMED = 2


def load_json_input(path: str) -> Any:
    """Load JSON from a file, or JSON Lines when the suffix is ``.jsonl``.

    ``-`` reads from stdin.
    """
    if path == "-":
        text = sys.stdin.read()
        suffix = ""
    else:
        text = Path(path).read_text(encoding="utf-8")
        suffix = Path(path).suffix.lower()

    if suffix == ".jsonl":
        return [json.loads(line) for line in text.splitlines() if line.strip()]
    return json.loads(text)


class PayrollCli:
    """Payroll calculator command line interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="payroll-calc",
            description="Monthly payroll calculator",
        )
        parser.add_argument(
            "--log-level",
            type=str,
            help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # calculate command
        calculate = subparsers.add_parser(
            "calculate",
            help="Compute payroll for one worker",
        )
        calculate.add_argument(
            "--input",
            required=True,
            help="JSON file holding one worker object ('-' for stdin)",
        )
        calculate.add_argument("--year", type=int, help="Payroll year (not used by the formula)")
        calculate.add_argument("--month", type=int, help="Payroll month (not used by the formula)")

        # batch command
        batch = subparsers.add_parser(
            "batch",
            help="Compute payroll for a list of workers",
        )
        batch.add_argument(
            "--input",
            required=True,
            help="JSON array or .jsonl file of worker objects ('-' for stdin)",
        )
        batch.add_argument(
            "--on-error",
            choices=[p.value for p in BatchErrorPolicy],
            default=BatchErrorPolicy.FAIL_FAST.value,
            help="fail: stop at the first malformed worker; collect: report and skip it",
        )
        batch.add_argument(
            "--workers",
            type=int,
            help="Thread pool size (default: BATCH_MAX_WORKERS)",
        )

        # simulate command
        simulate = subparsers.add_parser(
            "simulate",
            help="Run the bulk simulation over synthetic workers",
        )
        simulate.add_argument(
            "--count",
            type=int,
            default=1000,
            help="Number of synthetic workers (default: 1000)",
        )

        # serve command
        subparsers.add_parser("serve", help="Run the HTTP API")

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run CLI with given arguments."""
        parsed = self.parser.parse_args(args)
        if parsed.command == "calculate" and (parsed.year is None) != (parsed.month is None):
            self.parser.error("--year and --month must be given together")
        configure_logging(parsed.log_level)

        if not parsed.command:
            self.parser.print_help()
            return EXIT_OK

        handlers: dict[str, Callable[[argparse.Namespace], int]] = {
            "calculate": self._cmd_calculate,
            "batch": self._cmd_batch,
            "simulate": self._cmd_simulate,
            "serve": self._cmd_serve,
        }

        try:
            return handlers[parsed.command](parsed)
        except MalformedInputError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return EXIT_MALFORMED
        except (OSError, json.JSONDecodeError) as e:
            print(f"ERROR: cannot read input: {e}", file=sys.stderr)
            return EXIT_MALFORMED

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Execute calculate command."""
        worker = parse_worker(load_json_input(args.input))
        period = None
        if args.year is not None and args.month is not None:
            period = PayPeriod(year=args.year, month=args.month)

        result = PayrollCalculator.compute(worker, period)
        print(json.dumps(result.to_dict(), indent=2))
        return EXIT_OK

    def _cmd_batch(self, args: argparse.Namespace) -> int:
        """Execute batch command."""
        data = load_json_input(args.input)
        if not isinstance(data, list):
            raise MalformedInputError(
                [{"loc": (), "msg": "Expected a list of workers", "type": "list_type"}]
            )

        policy = BatchErrorPolicy(args.on_error)
        parsed = parse_workers(data, policy=policy)

        max_workers = args.workers
        if max_workers is None:
            max_workers = get_settings().batch_max_workers
        results = BatchProcessor(max_workers=max_workers).compute_all(parsed.records)

        logger.info(
            "Computed %d of %d workers (%d rejected)",
            len(results),
            len(data),
            len(parsed.errors),
        )
        output = {
            "results": [
                {"index": i, **r.to_dict()}
                for i, r in zip(parsed.indices, results)
            ],
            "errors": [e.to_dict() for e in parsed.errors],
        }
        print(json.dumps(output, indent=2))
        return EXIT_RECORD_ERRORS if parsed.has_errors else EXIT_OK

    def _cmd_simulate(self, args: argparse.Namespace) -> int:
        """Execute simulate command."""
        total = simulate_bulk(args.count)
        print(json.dumps({"count": args.count, "totalNetSalary": total}))
        return EXIT_OK

    def _cmd_serve(self, args: argparse.Namespace) -> int:
        """Execute serve command."""
        from payroll_calc.__main__ import main as serve

        serve()
        return EXIT_OK


def main() -> int:
    """CLI entry point."""
    cli = PayrollCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
