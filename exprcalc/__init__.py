"""
exprcalc: safe arithmetic expression evaluation for amount inputs.

This module exposes the public API: the guarded evaluator, the lexer and
parser it is built from, the error types, and the field helpers.
"""

from .config import EvaluatorConfig
from .errors import (
    DisallowedCharacterError,
    ExpressionError,
    InputEmptyError,
    InputTooLongError,
    MalformedExpressionError,
    NonFiniteResultError,
)
from .evaluator import evaluate, evaluate_many, evaluate_strict, is_valid_expression
from .field import clean_expression, contains_math_operators, evaluate_field, format_result
from .lexer import Token, TokenKind, tokenize
from .parser import parse

__all__ = [
    "EvaluatorConfig",
    "ExpressionError",
    "InputEmptyError",
    "InputTooLongError",
    "DisallowedCharacterError",
    "MalformedExpressionError",
    "NonFiniteResultError",
    "evaluate",
    "evaluate_strict",
    "evaluate_many",
    "is_valid_expression",
    "Token",
    "TokenKind",
    "tokenize",
    "parse",
    "contains_math_operators",
    "clean_expression",
    "format_result",
    "evaluate_field",
]
