"""
Safe arithmetic expression evaluator.

No eval(), no ast module. Handles +, -, *, /, postfix %, parentheses and
decimal numbers. `evaluate` never raises: every failure collapses to None.
"""

import logging
import math
import re
from typing import Iterable, Optional

import numpy as np

from .config import EvaluatorConfig, default_config
from .errors import (
    DisallowedCharacterError,
    ExpressionError,
    InputEmptyError,
    InputTooLongError,
    MalformedExpressionError,
    NonFiniteResultError,
)
from .lexer import tokenize
from .parser import parse

logger = logging.getLogger(__name__)

# Allowed characters in expressions
_ALLOWED_CHARS = re.compile(r'^[0-9.\s+\-*/%()]+$')


def evaluate_strict(
    expr: str, config: Optional[EvaluatorConfig] = None
) -> float:
    """
    Evaluate an arithmetic expression, raising on any failure.

    Args:
        expr: Arithmetic expression string (e.g. "10 * (5 + 3)", "100 * 50%")
        config: Guard limits; defaults to a 200 character maximum.

    Returns:
        The finite result as a float.

    Raises:
        InputEmptyError: Blank input.
        InputTooLongError: Trimmed input longer than `config.max_length`.
        DisallowedCharacterError: Characters outside digits, '.', whitespace
                                  and "+-*/%()".
        MalformedExpressionError: Syntax errors, unbalanced parentheses,
                                  or nesting deeper than the interpreter allows.
        NonFiniteResultError: The result is infinite or NaN (division by zero).
    """
    config = config or default_config
    expr = expr.strip()

    if not expr:
        raise InputEmptyError("Empty expression")
    if len(expr) > config.max_length:
        raise InputTooLongError(len(expr), config.max_length)
    if not _ALLOWED_CHARS.match(expr):
        raise DisallowedCharacterError(
            f"Expression contains disallowed characters: {expr!r}"
        )

    try:
        value = parse(tokenize(expr))
    except RecursionError:
        raise MalformedExpressionError("Expression is nested too deeply") from None

    if not math.isfinite(value):
        raise NonFiniteResultError(value)
    return value


def evaluate(expr: str, config: Optional[EvaluatorConfig] = None) -> Optional[float]:
    """
    Evaluate an arithmetic expression.

    Returns:
        The finite result, or None if the expression is invalid for any reason.

    Example:
        >>> evaluate("10%")
        0.1
        >>> evaluate("100 * 50%")
        50.0
        >>> evaluate("5 / 0") is None
        True
    """
    try:
        return evaluate_strict(expr, config)
    except ExpressionError as e:
        logger.debug(f"Expression rejected: {type(e).__name__}: {e}")
        return None


def is_valid_expression(expr: str, config: Optional[EvaluatorConfig] = None) -> bool:
    """Return True when `evaluate` would produce a finite result."""
    return evaluate(expr, config) is not None


def evaluate_many(
    exprs: Iterable[str], config: Optional[EvaluatorConfig] = None
) -> np.ndarray:
    """
    Evaluate each expression independently.

    Returns:
        float64 array aligned with `exprs`; invalid expressions are NaN.
    """
    values = [evaluate(expr, config) for expr in exprs]
    return np.array(
        [np.nan if value is None else value for value in values],
        dtype=np.float64,
    )
