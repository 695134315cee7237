from enum import Enum
import itertools
import logging

import pandas as pd

from .assignment import Assignment, UnboundVariable
from .expression import Expression, evaluate, get_variables
from .shunting_yard_parser import parse

logger = logging.getLogger(__name__)


class ErrorPolicy(Enum):
    FAIL_FAST = "fail-fast"
    COLLECT = "collect"


class TooManyVariables(ValueError):
    def __init__(self, count, limit):
        super().__init__(f"{count} variables exceed the limit of {limit}")
        self.count = count
        self.limit = limit


class TruthTableError(Exception):
    """
    Raised under ErrorPolicy.COLLECT once every row has been tried.

    `rows` holds the result of each row, either a bool or the
    UnboundVariable that row raised. `failures` lists (index, error) pairs
    """

    def __init__(self, rows, failures):
        names = sorted({error.name for _, error in failures})
        super().__init__(
            f"{len(failures)} of {len(rows)} rows failed, unbound: {', '.join(names)}"
        )
        self.rows = rows
        self.failures = failures


def boolean_permutation(length):
    return itertools.product([False, True], repeat=length)


def enumerate_assignments(names, limit=None):
    """
    Every assignment of truth values to `names`, counting in binary from all
    false to all true with the last name as the least significant bit.

    >>> [dict(a) for a in enumerate_assignments(["A", "B"])]
    [{'A': False, 'B': False}, {'A': False, 'B': True}, {'A': True, 'B': False}, {'A': True, 'B': True}]

    Names are not de-duplicated, a repeated name takes its last value in
    each row. Callers are expected to pass distinct names
    """
    names = list(names)
    if limit is not None and len(names) > limit:
        raise TooManyVariables(len(names), limit)

    logger.debug("enumerating %d assignments for %s", 2 ** len(names), names)
    return [Assignment(zip(names, perm)) for perm in boolean_permutation(len(names))]


# Name used by earlier versions of this API
permutate = enumerate_assignments


def solve_truth_table(expr: Expression, assignments, policy=ErrorPolicy.FAIL_FAST):
    """
    Evaluate `expr` once per assignment, keeping their order
    """
    rows = []
    failures = []
    for idx, assignment in enumerate(assignments):
        try:
            rows.append(evaluate(expr, assignment))
        except UnboundVariable as e:
            e.row = idx
            if policy is ErrorPolicy.FAIL_FAST:
                raise
            logger.debug("row %d failed: %s", idx, e)
            rows.append(e)
            failures.append((idx, e))

    if failures:
        raise TruthTableError(rows, failures)

    return rows


def generate_truth_table(
    formula, names=None, policy=ErrorPolicy.FAIL_FAST, limit=None
):
    """
    Returns pandas dataframe

    One column per variable followed by a column named after the formula
    """
    expr = formula if isinstance(formula, Expression) else parse(formula)
    title = formula.strip() if isinstance(formula, str) else expr.render()

    variables = get_variables(expr) if names is None else list(names)
    assignments = enumerate_assignments(variables, limit=limit)
    results = solve_truth_table(expr, assignments, policy=policy)

    headers = [*variables, title]
    rows = [
        [*(assignment[var] for var in variables), res]
        for assignment, res in zip(assignments, results)
    ]

    return pd.DataFrame(rows, columns=headers)


def print_truth_table(formula, names=None, **kwargs):
    s = generate_truth_table(formula, names, **kwargs).to_string(index=False)

    print(s)
