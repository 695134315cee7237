from dataclasses import dataclass
from enum import Enum

from .assignment import lookup

##############
# Operators  #
##############

# Values are the symbols used when rendering a tree


class BinaryOperator(Enum):
    AND = "∧"
    OR = "∨"
    CONDITIONAL = "⇒"
    BICONDITIONAL = "⇔"

    def apply(self, left: bool, right: bool) -> bool:
        if self is BinaryOperator.AND:
            return left and right
        if self is BinaryOperator.OR:
            return left or right
        if self is BinaryOperator.CONDITIONAL:
            return not left or right
        return left == right


class UnaryOperator(Enum):
    NOT = "¬"

    def apply(self, operand: bool) -> bool:
        return not operand


###############
# Expressions #
###############


class Expression:
    """
    Base of the expression tree. Nodes are frozen so one parsed formula can
    be evaluated against any number of assignments
    """

    is_leaf = False

    def evaluate(self, assignment):
        raise NotImplementedError()

    def render(self) -> str:
        raise NotImplementedError()

    def children(self):
        return ()

    def __str__(self):
        return self.render()


@dataclass(frozen=True)
class Literal(Expression):
    value: bool

    is_leaf = True

    def evaluate(self, assignment):
        return self.value

    def render(self):
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Variable(Expression):
    name: str

    is_leaf = True

    def evaluate(self, assignment):
        return lookup(assignment, self.name)

    def render(self):
        return self.name


@dataclass(frozen=True)
class BinaryOp(Expression):
    left: Expression
    operator: BinaryOperator
    right: Expression

    def __post_init__(self):
        if not isinstance(self.operator, BinaryOperator):
            raise TypeError(
                f"{self.operator.__repr__()} is not a BinaryOperator. Illegal argument"
            )

    def evaluate(self, assignment):
        # Both sides are always evaluated, left first
        left = self.left.evaluate(assignment)
        right = self.right.evaluate(assignment)
        return self.operator.apply(left, right)

    def children(self):
        return (self.left, self.right)

    def render(self):
        return f"({self.left.render()} {self.operator.value} {self.right.render()})"


@dataclass(frozen=True)
class UnaryOp(Expression):
    operator: UnaryOperator
    operand: Expression

    def __post_init__(self):
        if not isinstance(self.operator, UnaryOperator):
            raise TypeError(
                f"{self.operator.__repr__()} is not a UnaryOperator. Illegal argument"
            )

    def evaluate(self, assignment):
        return self.operator.apply(self.operand.evaluate(assignment))

    def children(self):
        return (self.operand,)

    def render(self):
        return f"{self.operator.value}{self.operand.render()}"


def evaluate(expr: Expression, assignment) -> bool:
    """
    Reduce `expr` to a single truth value under `assignment`, any mapping of
    variable names to booleans.

    Raises UnboundVariable if the formula mentions a name the assignment
    does not contain
    """
    return expr.evaluate(assignment)


def walk(expr: Expression):
    """
    Pre-order traversal, left to right
    """
    stack = [expr]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children()))


def get_variables(expr: Expression):
    variables = {}
    for node in walk(expr):
        if isinstance(node, Variable):
            variables.setdefault(node.name, None)
    return [*variables]


def has_variable(expr: Expression) -> bool:
    return any(isinstance(node, Variable) for node in walk(expr))
