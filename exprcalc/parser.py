"""
Recursive descent parser that evaluates a token list as it goes.

No AST is built; each production returns its value directly.
"""

from typing import List, Optional, Sequence

import numpy as np

from .errors import MalformedExpressionError
from .lexer import Token, TokenKind


def parse(tokens: Sequence[Token]) -> float:
    """
    Evaluate a token sequence produced by `tokenize`.

    The result may be infinite or NaN (e.g. after a division by zero);
    rejecting those is left to the caller.

    Raises:
        MalformedExpressionError: On unbalanced parentheses, a premature end,
                                  an unexpected token, or trailing tokens.
    """
    parser = _Parser(tokens)
    value = parser.parse_expression()

    if parser.pos < len(parser.tokens):
        raise MalformedExpressionError(
            f"Unexpected token after expression: "
            f"{parser.tokens[parser.pos].value!r}"
        )
    return value


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 gives +-inf, 0/0 gives nan."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.divide(np.float64(left), np.float64(right)))


class _Parser:
    """Recursive descent parser for arithmetic expressions.

    Grammar:
        expression := term (('+' | '-') term)*
        term       := percentage (('*' | '/') percentage)*
        percentage := unary '%'?
        unary      := ('+' | '-') unary | primary
        primary    := NUMBER | '(' expression ')'
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens: List[Token] = list(tokens)
        self.pos = 0

    def _peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _consume(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _peek_operator(self, *symbols: str) -> bool:
        token = self._peek()
        return token is not None and token.is_operator(*symbols)

    def parse_expression(self) -> float:
        """Parse an expression: term (('+' | '-') term)*"""
        result = self._parse_term()
        while self._peek_operator('+', '-'):
            op = self._consume().value
            right = self._parse_term()
            if op == '+':
                result = result + right
            else:
                result = result - right
        return result

    def _parse_term(self) -> float:
        """Parse a term: percentage (('*' | '/') percentage)*"""
        result = self._parse_percentage()
        while self._peek_operator('*', '/'):
            op = self._consume().value
            right = self._parse_percentage()
            if op == '*':
                result = result * right
            else:
                result = _divide(result, right)
        return result

    def _parse_percentage(self) -> float:
        value = self._parse_unary()
        if self._peek_operator('%'):
            self._consume()
            value = value / 100
        return value

    def _parse_unary(self) -> float:
        if self._peek_operator('+', '-'):
            op = self._consume().value
            value = self._parse_unary()
            return value if op == '+' else -value
        return self._parse_primary()

    def _parse_primary(self) -> float:
        """Parse a primary: NUMBER | '(' expression ')'"""
        token = self._peek()
        if token is None:
            raise MalformedExpressionError("Unexpected end of expression")

        if token.kind is TokenKind.NUMBER:
            self._consume()
            return float(token.value)

        if token.is_paren('('):
            self._consume()  # eat '('
            value = self.parse_expression()
            next_token = self._peek()
            if next_token is None or not next_token.is_paren(')'):
                raise MalformedExpressionError("Missing closing parenthesis")
            self._consume()  # eat ')'
            return value

        raise MalformedExpressionError(f"Unexpected token: {token.value!r}")
