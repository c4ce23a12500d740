"""
Tokenizer for arithmetic expressions.

Turns a string into a flat list of number, operator and parenthesis tokens.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from .errors import MalformedExpressionError

DIGITS = '0123456789'
OPERATORS = '+-*/%'
PARENS = '()'


class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    PAREN = "paren"


@dataclass(frozen=True)
class Token:
    """A single lexical unit. `value` is a float for numbers, else the symbol."""
    kind: TokenKind
    value: Union[float, str]

    def is_operator(self, *symbols: str) -> bool:
        return self.kind is TokenKind.OPERATOR and self.value in symbols

    def is_paren(self, symbol: str) -> bool:
        return self.kind is TokenKind.PAREN and self.value == symbol


def tokenize(expr: str) -> List[Token]:
    """
    Tokenize an expression into numbers, operators, and parentheses.

    A number is a maximal run of digits and dots starting with a digit.
    Runs holding more than one dot (e.g. "1.2.3") are rejected.

    Raises:
        MalformedExpressionError: On any character that cannot start a token,
                                  or on a malformed number literal.
    """
    tokens: List[Token] = []
    i = 0
    while i < len(expr):
        ch = expr[i]
        if ch.isspace():
            i += 1
            continue
        if ch in DIGITS:
            j = i
            while j < len(expr) and (expr[j] in DIGITS or expr[j] == '.'):
                j += 1
            literal = expr[i:j]
            if literal.count('.') > 1:
                raise MalformedExpressionError(
                    f"Malformed number literal: {literal!r}"
                )
            tokens.append(Token(TokenKind.NUMBER, float(literal)))
            i = j
        elif ch in OPERATORS:
            tokens.append(Token(TokenKind.OPERATOR, ch))
            i += 1
        elif ch in PARENS:
            tokens.append(Token(TokenKind.PAREN, ch))
            i += 1
        else:
            raise MalformedExpressionError(f"Unexpected character: {ch!r}")
    return tokens
