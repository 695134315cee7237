import logging
import re

from .expression import BinaryOp, BinaryOperator, Literal, UnaryOp, UnaryOperator, Variable

logger = logging.getLogger(__name__)

###########
# Library #
###########

# A shunting yard parser for propositional formulas
# It keeps a two state machine (expecting an operand or expecting an operator)
# so malformed input is rejected at the token that breaks it instead of
# producing a broken RPN

# Utils

# Keywords and identifiers must not run into a following word character
WORD_END = r"(?![A-Za-z0-9_])"

# Expression trees are walked recursively once built, keep them well within
# the interpreter recursion limit
MAX_DEPTH = 200


def str_match(string: str, m: str, l=None):
    l = l or (lambda x: x)
    if len(string) == 0:
        return None
    if string.startswith(m):
        return l(string[: len(m)]), len(m)
    return None


def re_match(string, r, l=None):
    l = l or (lambda x: x.group(0))
    m = re.match(r, string)
    if m:
        return l(m), m.end()
    return None


class IToken:
    m_re = None
    m_str = None

    re_l = None
    str_l = None

    def __init__(self, value, start, end):
        self.value = value
        self.start = start
        self.end = end

    @classmethod
    def match(cls, string):
        """
        A match function returns
        (value, length)
        """
        if cls.m_re:
            return re_match(string, cls.m_re, cls.re_l)
        elif cls.m_str:
            return str_match(string, cls.m_str, cls.str_l)
        raise NotImplementedError()

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.value.__repr__()}>"


class WhitespaceToken(IToken):
    pass


class ISingleExpression(IToken):
    def to_expression(self):
        raise NotImplementedError()


class ConstantToken(ISingleExpression):
    pass


class IdentifierToken(ISingleExpression):
    pass


class UnaryOperatorToken(IToken):
    operator = None
    # Prefix operators bind tighter than every binary operator
    precedence = float("inf")


class BinaryOperatorToken(IToken):
    """
    Must provide a precedence value
    All binary operators associate to the left
    """

    operator = None
    precedence = None


class OpenParenthesisToken(IToken):
    pass


class CloseParenthesisToken(IToken):
    pass


class ParseError(Exception):
    """
    `token` is the offending source text, None when the input ran out
    """

    def __init__(self, err, start, end, token=None):
        super().__init__(err, start, end, token)
        self.err = err
        self.start = start
        self.end = end
        self.token = token

    def __str__(self):
        return f"@[{self.start}, {self.end}]: {self.err}"


class UnparsableText(ParseError):
    pass


class UnparsableToken(ParseError):
    pass


class UnterminatedParenthesis(UnparsableToken):
    pass


class UnexpectedEndOfInput(ParseError):
    pass


class NestingTooDeep(UnparsableToken):
    pass


class Parser:
    def __init__(self, tokens, max_depth=MAX_DEPTH):
        for token in tokens:
            if not issubclass(token, IToken):
                raise Exception(token, "is not a token")
            if issubclass(token, BinaryOperatorToken):
                if token.precedence is None:
                    raise Exception(
                        f"class '{token.__name__}' has no precedence. BinaryOperatorToken must have a precedence"
                    )
        self.tokens = tokens
        self.max_depth = max_depth

    @staticmethod
    def should_pop_op(stack, op):
        if not stack:
            return False

        top_op = stack[-1]

        if isinstance(top_op, OpenParenthesisToken):
            return False

        return op.precedence <= top_op.precedence

    def tokenize(self, string):
        pointer = 0
        while string:
            for token in self.tokens:
                if m := token.match(string):
                    v, l = m[:2]
                    if not issubclass(token, WhitespaceToken):
                        yield token(v, pointer, pointer + l)
                    pointer += l
                    string = string[l:]
                    break
            else:
                symbol = re.match(r"\w+|\S", string).group(0)
                raise UnparsableText(
                    f"Unknown symbol {symbol.__repr__()}",
                    pointer,
                    pointer + len(symbol),
                    symbol,
                )

    def parse_to_rpn(self, tokens):
        # True while the next token has to start an operand
        expect_operand = True

        output = []
        operator_stack = []

        def unexpected(token, reason):
            return UnparsableToken(
                f"Unexpected token {token.value.__repr__()}: {reason}",
                token.start,
                token.end,
                token.value,
            )

        for token in tokens:
            if expect_operand:
                if isinstance(token, ISingleExpression):
                    output.append(token)
                    expect_operand = False
                elif isinstance(token, (OpenParenthesisToken, UnaryOperatorToken)):
                    operator_stack.append(token)
                else:
                    raise unexpected(token, "expected a literal, a variable, 'not' or '('")
            elif isinstance(token, BinaryOperatorToken):
                while self.should_pop_op(operator_stack, token):
                    output.append(operator_stack.pop())
                operator_stack.append(token)
                expect_operand = True
            elif isinstance(token, CloseParenthesisToken):
                while operator_stack and not isinstance(
                    operator_stack[-1], OpenParenthesisToken
                ):
                    output.append(operator_stack.pop())

                if not operator_stack:
                    raise unexpected(token, "no matching '('")

                # Pop the open parenthesis
                operator_stack.pop()
            else:
                raise unexpected(token, "expected an operator or ')'")

        if expect_operand:
            end = output[-1].end if output else 0
            if operator_stack:
                end = max(end, operator_stack[-1].end)
            raise UnexpectedEndOfInput("Unexpected end of input", end, end)

        rpn = []
        for token in reversed(operator_stack):
            if isinstance(token, OpenParenthesisToken):
                raise UnterminatedParenthesis(
                    "Unterminated parenthesis", token.start, token.end, token.value
                )
            rpn.append(token)

        return [*output, *rpn]

    def rpn_to_ast(self, rpn):
        # Pairs of (expression, depth of its tree)
        stack = []
        for token in rpn:
            if isinstance(token, ISingleExpression):
                stack.append((token.to_expression(), 1))
                continue

            if isinstance(token, UnaryOperatorToken):
                operand, depth = stack.pop()
                node = UnaryOp(token.operator, operand)
            else:
                right, right_depth = stack.pop()
                left, left_depth = stack.pop()
                node = BinaryOp(left, token.operator, right)
                depth = max(left_depth, right_depth)

            if depth >= self.max_depth:
                raise NestingTooDeep(
                    f"Formula is more than {self.max_depth} levels deep at {token.value.__repr__()}",
                    token.start,
                    token.end,
                    token.value,
                )
            stack.append((node, depth + 1))

        assert len(stack) == 1, f"Invalid RPN. Stack: {stack}"

        return stack[0][0]

    def parse(self, string):
        tokens = list(self.tokenize(string))
        logger.debug("tokens: %s", tokens)
        rpn = self.parse_to_rpn(tokens)
        logger.debug("rpn: %s", rpn)
        return self.rpn_to_ast(rpn)


# Built in tokens


class Whitespace(WhitespaceToken):
    m_re = r"\s+"


class OpenParenthesis(OpenParenthesisToken):
    m_str = "("


class CloseParenthesis(CloseParenthesisToken):
    m_str = ")"


class Identifier(IdentifierToken):
    m_re = r"[A-Z]+" + WORD_END

    def to_expression(self):
        return Variable(self.value)


class Boolean(ConstantToken):
    re_l = lambda x: x.group(0).lower() == "true"
    m_re = r"(?i:true|false)" + WORD_END

    def to_expression(self):
        return Literal(self.value)


class Negation(UnaryOperatorToken):
    operator = UnaryOperator.NOT
    m_re = r"(?i:not)" + WORD_END + r"|¬"


class And(BinaryOperatorToken):
    operator = BinaryOperator.AND
    precedence = 3
    m_re = r"(?i:and)" + WORD_END + r"|∧"


class Or(BinaryOperatorToken):
    operator = BinaryOperator.OR
    precedence = 2
    m_re = r"(?i:or)" + WORD_END + r"|∨"


class Implies(BinaryOperatorToken):
    operator = BinaryOperator.CONDITIONAL
    precedence = 1
    m_re = r"=>|⇒|→"


class Iff(BinaryOperatorToken):
    operator = BinaryOperator.BICONDITIONAL
    precedence = 0
    m_re = r"<=>|⇔|↔"


# Identifiers come before the keywords so an all-uppercase word such as
# TRUE or AND is always a variable
TOKENS = [
    Whitespace,
    OpenParenthesis,
    CloseParenthesis,
    Identifier,
    Boolean,
    Negation,
    And,
    Or,
    Iff,
    Implies,
]

parser = Parser(TOKENS)


def parse(text):
    """
    Parse a formula into an expression tree

    Trees deeper than MAX_DEPTH levels, such as a chain of more than
    MAX_DEPTH operands joined by one operator, raise NestingTooDeep.
    Redundant parentheses do not add depth

    >>> str(parse("not A and B or C"))
    '((¬A ∧ B) ∨ C)'
    """
    return parser.parse(text)
