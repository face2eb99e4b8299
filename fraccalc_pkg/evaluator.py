"""Four-operator arithmetic evaluator.

Pipeline
--------
1) Tokenizer: canonical expression string -> flat list of number/operator tokens.
2) Parser: builds a small AST (Number, BinOp) with '*' and '/' binding tighter
   than '+' and '-', left-associative within a precedence level.
3) Evaluator: walks the AST in floating point.

A '-' directly in front of a number where an operand is expected is a sign,
not an operator, so signed literals produced by number extraction
("3.0*-2.0") evaluate as written. Parentheses and exponents are not
supported.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import TOKEN_REGEX
from .logging_config import get_logger
from .types import MathError, UndefinedError

logger = get_logger("evaluator")

ADDITIVE_OPERATORS = ("+", "-")
MULTIPLICATIVE_OPERATORS = ("*", "/")


@dataclass(frozen=True)
class Token:
    kind: str  # "number" or "op"
    text: str
    position: int


class Number:
    """AST node for a numeric literal."""

    def __init__(self, value: float):
        self.value = value

    def evaluate(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


class BinOp:
    """AST node for a binary operation: left <operator> right."""

    def __init__(self, left, operator: str, right):
        self.left = left
        self.operator = operator
        self.right = right

    def evaluate(self) -> float:
        left_value = self.left.evaluate()
        right_value = self.right.evaluate()

        if self.operator == "+":
            result = left_value + right_value
        elif self.operator == "-":
            result = left_value - right_value
        elif self.operator == "*":
            result = left_value * right_value
        elif self.operator == "/":
            if right_value == 0:
                raise UndefinedError()
            result = left_value / right_value
        else:
            raise MathError(f"Unknown operator: {self.operator}")

        if not math.isfinite(result):
            raise UndefinedError()
        return result

    def __repr__(self) -> str:
        return f"BinOp({self.left!r}, {self.operator!r}, {self.right!r})"


def tokenize(expr: str) -> list[Token]:
    """Split a canonical expression into tokens.

    Raises:
        MathError: On any character that is not part of a number or operator
    """
    tokens: list[Token] = []
    expr = expr.rstrip()
    position = 0
    while position < len(expr):
        match = TOKEN_REGEX.match(expr, position)
        if match is None:
            offending = expr[position:].lstrip()[:1]
            raise MathError(f"Unexpected character {offending!r} in {expr!r}")
        if match.group("number") is not None:
            tokens.append(Token("number", match.group("number"), match.start("number")))
        else:
            tokens.append(Token("op", match.group("op"), match.start("op")))
        position = match.end()
    return tokens


class _Parser:
    """Precedence-climbing parser over a token list; loops only, no recursion."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.index = 0

    def _peek(self) -> Token | None:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def _operand(self) -> Number:
        token = self._peek()
        sign = 1.0
        if token is not None and token.kind == "op" and token.text == "-":
            sign = -1.0
            self.index += 1
            token = self._peek()
        if token is None:
            raise MathError("Expression ends where a number was expected")
        if token.kind != "number":
            raise MathError(f"Unexpected operator {token.text!r} at {token.position}")
        self.index += 1
        value = float(token.text)
        if not math.isfinite(value):
            raise MathError(f"Number too large: {token.text}")
        return Number(sign * value)

    def _term(self):
        node = self._operand()
        token = self._peek()
        while token is not None and token.text in MULTIPLICATIVE_OPERATORS:
            self.index += 1
            node = BinOp(node, token.text, self._operand())
            token = self._peek()
        return node

    def parse(self):
        if not self.tokens:
            raise MathError("Empty expression")
        node = self._term()
        token = self._peek()
        while token is not None and token.text in ADDITIVE_OPERATORS:
            self.index += 1
            node = BinOp(node, token.text, self._term())
            token = self._peek()
        if token is not None:
            raise MathError(f"Unexpected {token.text!r} at {token.position}")
        return node


def parse_expression(expr: str):
    """Parse a canonical expression string into an AST.

    Raises:
        MathError: If the expression is empty or malformed
    """
    return _Parser(tokenize(expr)).parse()


def evaluate_expression(expr: str) -> float:
    """Evaluate a canonical '+ - * /' expression.

    Args:
        expr: Expression such as "2.0+3.0*-4.0"

    Returns:
        Finite float result

    Raises:
        MathError: If the expression cannot be parsed
        UndefinedError: On division by zero or a non-finite result
    """
    tree = parse_expression(expr)
    logger.debug(f"Parsed {expr!r} as {tree!r}")
    return tree.evaluate()
