"""Command-line front end: ``python -m tabeval [x y z] [--data-dir DIR]``."""
import argparse
import logging
import sys
from typing import List, Optional

from tabeval.algorithms.orchestrator import Algorithm, evaluate_request
from tabeval.core.context import TableContext
from tabeval.core.exceptions import InputParseError
from tabeval.core.outcomes import EvaluationResult, TableUnavailable
from tabeval.parsing.input_parser import parse_request

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_UNEXPECTED_ERROR = 2

_RESULT_LABELS = {
    Algorithm.PRIMARY: "Result fun(x,y,z)",
    Algorithm.SECONDARY: "Algorithm 2 result",
    Algorithm.TERTIARY: "Algorithm 3 result",
}


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabeval",
        description="Evaluate fun(x, y, z), falling back to simpler algorithms when preconditions fail.")
    parser.add_argument("values", nargs="*", metavar="VALUE",
                        help="the three inputs x y z; prompted for when omitted")
    parser.add_argument("--data-dir", default=None,
                        help="directory holding the lookup tables (default: current directory)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def report(result: EvaluationResult, out=None):
    """Print the escalation narrative and the final value."""
    out = out or sys.stdout
    print("=== Trying Algorithm 1 ===", file=out)
    for step, failure in enumerate(result.escalations, start=1):
        if isinstance(failure, TableUnavailable):
            print(f"Algorithm {step} failed due to file loading error, switching to Algorithm 3...", file=out)
        elif step == 1:
            print("Algorithm 1 failed, switching to Algorithm 2...", file=out)
        else:
            print(f"Algorithm {step} also failed, switching to Algorithm 3...", file=out)
    print(f"SUCCESS: Algorithm {int(result.algorithm)} completed successfully!", file=out)
    print(f"{_RESULT_LABELS[Algorithm(result.algorithm)]} = {result.value:g}", file=out)


def _read_values(values: List[str]) -> str:
    if values:
        return " ".join(values)
    try:
        return input("Enter values x, y, z: ")
    except EOFError:
        return ""


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        request = parse_request(_read_values(args.values))
        print()
        result = evaluate_request(request, TableContext(args.data_dir))
        report(result)
    except InputParseError as e:
        print(f"Input error: invalid numeric input. Please enter valid numbers. ({e})", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except Exception as e:
        logger.error("Unexpected error: %s", e, exc_info=True)
        print("ERROR: Unexpected error occurred.", file=sys.stderr)
        return EXIT_UNEXPECTED_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
