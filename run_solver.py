#!/usr/bin/env python3
# run_solver.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Command-line interface for the tableau solver with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import Iterable, List, Optional

from core import (
    BranchLimitExceeded,
    SearchOrder,
    TableauSolver,
    formula_depth,
    formula_size,
)
from parser import parse
from parser.exceptions import ParseError, EmptyFormulaError
from utils.formula_reader import (
    FormulaLine,
    FormulaFileError,
    read_formulas,
    read_formula_stream,
)
from utils.logger import TableauLogger, configure_logging, get_logger

MODES = ("sat", "valid", "both")

EXIT_OK = 0
EXIT_FILE_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_BRANCH_LIMIT = 3
EXIT_INTERRUPTED = 4
EXIT_UNEXPECTED = 5


def collect_inputs(args: argparse.Namespace) -> Iterable[FormulaLine]:
    """Select the formula source requested on the command line.

    Inline formulas (-e) are numbered by their position on the command line;
    they are passed through unstripped so that an empty formula is reported
    as such by the parser.

    Args:
        args: Parsed command line arguments

    Returns:
        Iterable of formulas to process
    """
    if args.formula:
        return [FormulaLine(i, text) for i, text in enumerate(args.formula, start=1)]
    if args.file:
        return read_formulas(str(args.file))
    return read_formula_stream(sys.stdin)


def solve_formula(
    text: str, solver: TableauSolver, mode: str, logger: TableauLogger, verbose: bool
) -> None:
    """Parse one formula and report the requested answers.

    Args:
        text: Formula text
        solver: Configured solver instance
        mode: One of "sat", "valid" or "both"
        logger: Logger used for result output
        verbose: Also report formula measures and search statistics

    Raises:
        ParseError: The formula text is empty or ill-formed
        BranchLimitExceeded: The configured branch limit was reached
    """
    formula = parse(text)
    results = {}
    stats = {}

    if mode in ("sat", "both"):
        results["satisfiable"] = solver.is_satisfiable(formula)
        stats["sat_search"] = solver.stats.as_dict()

    if mode in ("valid", "both"):
        results["valid"] = solver.is_valid(formula)
        stats["validity_search"] = solver.stats.as_dict()

    logger.formula_result(str(formula), **results)

    if verbose:
        logger.search_statistics(
            str(formula), size=formula_size(formula), depth=formula_depth(formula)
        )
        for search, counters in stats.items():
            logger.search_statistics(f"  {search}", **counters)


def process_formulas(
    inputs: Iterable[FormulaLine],
    solver: TableauSolver,
    mode: str,
    validate_only: bool,
    verbose: bool,
) -> int:
    """Run the solver over every input formula.

    Parse errors are reported with their line number and do not stop the
    remaining formulas from being processed.

    Returns:
        Number of formulas rejected by the parser
    """
    logger = get_logger()
    failures = 0

    for item in inputs:
        try:
            if validate_only:
                formula = parse(item.text)
                logger.validation_result(True, f"line {item.line_number}: {formula}")
            else:
                solve_formula(item.text, solver, mode, logger, verbose)

        except EmptyFormulaError as e:
            failures += 1
            _report_parse_failure(
                logger, validate_only, f"Line {item.line_number}: empty formula: {e}"
            )

        except ParseError as e:
            failures += 1
            _report_parse_failure(
                logger,
                validate_only,
                f"Line {item.line_number}: ill-formed formula '{item.text}': {e}",
            )

    return failures


def _report_parse_failure(logger: TableauLogger, validate_only: bool, message: str) -> None:
    if validate_only:
        logger.validation_result(False, message)
    else:
        logger.error(message)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Propositional Tableau Solver: decides satisfiability and validity",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_solver.py -e "((a^b)->a)"
  python run_solver.py -f formulas.txt --mode valid
  python run_solver.py -f formulas.txt -v --depth-first
  echo "(p|(-p))" | python run_solver.py --debug

Formula syntax (every operator application is parenthesised):
  a   (-A)   (A^B)   (A|B)   (A->B)   (A<->B)
  Alternatives: ~ for -, & for ^, => for ->, <=> for <->
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-f", "--file", type=Path, help="Path to a file with one formula per line"
    )
    source.add_argument(
        "-e",
        "--formula",
        action="append",
        help="Formula given inline (repeatable)",
    )

    parser.add_argument(
        "--mode",
        choices=MODES,
        default="both",
        help="Which questions to answer (default: both)",
    )

    parser.add_argument(
        "--depth-first",
        action="store_true",
        help="Explore branches depth-first instead of breadth-first",
    )

    parser.add_argument(
        "--max-branches",
        type=int,
        default=None,
        help="Abort a search after exploring this many branches",
    )

    parser.add_argument(
        "--validate-only", action="store_true", help="Only check formula syntax"
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report formula measures and search statistics",
    )

    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only report errors"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Trace every branch of the search"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the tableau solver application.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:]

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.max_branches is not None and args.max_branches < 1:
        parser.error("--max-branches must be a positive integer")

    logger = configure_logging(debug=args.debug, quiet=args.quiet)

    try:
        order = SearchOrder.DEPTH_FIRST if args.depth_first else SearchOrder.BREADTH_FIRST
        solver = TableauSolver(
            order=order,
            max_branches=args.max_branches,
            logger=logger if args.debug else None,
        )

        failures = process_formulas(
            collect_inputs(args),
            solver,
            args.mode,
            validate_only=args.validate_only,
            verbose=args.verbose,
        )

        if failures:
            logger.warning(f"⚠️  {failures} formula(s) could not be parsed")
            return EXIT_PARSE_ERROR

        return EXIT_OK

    except FormulaFileError as e:
        logger.error(f"Formula file error: {e}")
        return EXIT_FILE_ERROR

    except BranchLimitExceeded as e:
        logger.error(f"Search aborted: {e}")
        return EXIT_BRANCH_LIMIT

    except KeyboardInterrupt:
        logger.error("Solving interrupted by user")
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
