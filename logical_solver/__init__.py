from .assignment import Assignment, UnboundVariable
from .expression import (
    BinaryOp,
    BinaryOperator,
    Expression,
    Literal,
    UnaryOp,
    UnaryOperator,
    Variable,
    evaluate,
    get_variables,
    has_variable,
    walk,
)
from .logic import (
    ErrorPolicy,
    TooManyVariables,
    TruthTableError,
    enumerate_assignments,
    generate_truth_table,
    permutate,
    print_truth_table,
    solve_truth_table,
)
from .shunting_yard_parser import (
    NestingTooDeep,
    ParseError,
    Parser,
    UnexpectedEndOfInput,
    UnparsableText,
    UnparsableToken,
    UnterminatedParenthesis,
    parse,
)

__version__ = "0.1.0"
