"""
Line oriented front end

    $ python -m logical_solver truth-table
    Enter variables> A, B
    Enter equation> A => B
"""

import argparse
import logging
import sys

from .assignment import Assignment, UnboundVariable
from .expression import evaluate, get_variables, has_variable
from .logging_config import setup_logging
from .logic import (
    ErrorPolicy,
    TooManyVariables,
    TruthTableError,
    enumerate_assignments,
    generate_truth_table,
    solve_truth_table,
)
from .settings import SolverConfig
from .shunting_yard_parser import ParseError, parse

logger = logging.getLogger(__name__)


def parse_value(item):
    name, sep, value = item.partition("=")
    value = value.strip().lower()
    if not sep or value not in ("true", "false"):
        raise argparse.ArgumentTypeError(f"expected NAME=true|false, got {item!r}")
    return name.strip(), value == "true"


def build_arg_parser():
    arg_parser = argparse.ArgumentParser(
        prog="logical_solver",
        description="Evaluate propositional formulas and print truth tables",
    )
    arg_parser.add_argument(
        "mode", nargs="?", choices=["evaluate", "truth-table"], default="evaluate"
    )
    arg_parser.add_argument(
        "--set",
        dest="values",
        metavar="NAME=BOOL",
        type=parse_value,
        action="append",
        default=[],
        help="value of a variable when evaluating, may be repeated",
    )
    arg_parser.add_argument(
        "--on-error",
        choices=[policy.value for policy in ErrorPolicy],
        default=ErrorPolicy.FAIL_FAST.value,
        help="stop at the first failing row or report every failing row",
    )
    arg_parser.add_argument("--max-variables", type=int, default=16)
    arg_parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )
    arg_parser.add_argument(
        "--raw", action="store_true", help="print the truth table as a list of booleans"
    )
    return arg_parser


def read_line(prompt, stdin, stdout):
    print(prompt, end="", file=stdout)
    stdout.flush()
    return stdin.readline()


def split_variables(line):
    return [name.strip() for name in line.split(",") if name.strip()]


def run_evaluate(args, config, stdin, stdout):
    expr = parse(read_line("Enter equation> ", stdin, stdout))
    print(repr(expr), file=stdout)
    print(expr, file=stdout)
    logger.info("formula has variables: %s", has_variable(expr))

    print(evaluate(expr, Assignment(args.values)), file=stdout)


def run_truth_table(args, config, stdin, stdout):
    names = split_variables(read_line("Enter variables> ", stdin, stdout))
    expr = parse(read_line("Enter equation> ", stdin, stdout))
    print(expr, file=stdout)
    names = names or get_variables(expr)

    if args.raw:
        logger.info("Generating permutations...")
        states = enumerate_assignments(names, limit=config.max_variables)
        logger.info("Solving truth table...")
        result = solve_truth_table(expr, states, policy=config.error_policy)
        print(result, file=stdout)
        return

    table = generate_truth_table(
        expr,
        names,
        policy=config.error_policy,
        limit=config.max_variables,
    )
    print(table.to_string(index=False), file=stdout)


def main(argv=None, stdin=None, stdout=None, stderr=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_arg_parser().parse_args(argv)
    config = SolverConfig.from_args(args)
    setup_logging(config.log_level, stderr)

    run = run_truth_table if args.mode == "truth-table" else run_evaluate
    try:
        run(args, config, stdin, stdout)
    except TruthTableError as e:
        print(f"error: {e}", file=stderr)
        for idx, error in e.failures:
            print(f"  row {idx}: {error}", file=stderr)
        return 1
    except (ParseError, UnboundVariable, TooManyVariables) as e:
        print(f"error: {e}", file=stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
