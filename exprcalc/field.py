"""
Helpers for evaluating arithmetic typed into a formatted amount field.

A field value may carry a currency prefix/suffix and locale separators
("$1,000 + 10%", "1.234,5 * 2 EUR"). These helpers detect whether the user
typed an expression, normalize it to the evaluator's canonical form, and
format the result back for display.
"""

import re
from typing import Optional

import numpy as np

from .config import EvaluatorConfig
from .evaluator import evaluate

# Multiply, divide, percentage, parentheses, or an explicit plus
_OPERATOR_CHARS = re.compile(r'[*/%()+]')

# A sign that follows something other than a sign, i.e. not a leading minus
_INFIX_SIGN = re.compile(r'[^-+][-+]')


def _strip_affixes(value: str, prefix: str, suffix: str) -> str:
    if prefix:
        value = value.replace(prefix, '', 1)
    if suffix:
        value = value.replace(suffix, '', 1)
    return value


def contains_math_operators(value: str, prefix: str = '', suffix: str = '') -> bool:
    """
    Check whether a field value is an arithmetic expression.

    A lone leading sign ("-12") is a negative amount, not an expression.
    """
    stripped = _strip_affixes(value, prefix, suffix)
    if _OPERATOR_CHARS.search(stripped):
        return True
    return bool(_INFIX_SIGN.search(stripped))


def clean_expression(
    value: str,
    prefix: str = '',
    suffix: str = '',
    group_separator: str = '',
    decimal_separator: str = '.',
) -> str:
    """Strip affixes and group separators, and use '.' as the decimal point."""
    cleaned = _strip_affixes(value, prefix, suffix).strip()
    if group_separator:
        cleaned = cleaned.replace(group_separator, '')
    if decimal_separator and decimal_separator != '.':
        cleaned = cleaned.replace(decimal_separator, '.')
    return cleaned


def format_result(value: float, decimal_separator: str = '.') -> str:
    """
    Render a result the way the field displays it: 50.0 -> "50", 0.5 -> "0,5".

    Always positional notation (1e-07 -> "0.0000001"); the display text must
    not itself read as an expression.
    """
    # -0.0 + 0.0 is 0.0, so negative zero displays as "0"
    text = np.format_float_positional(value + 0.0, trim="-")
    return text.replace('.', decimal_separator or '.', 1)


def evaluate_field(
    value: str,
    prefix: str = '',
    suffix: str = '',
    group_separator: str = '',
    decimal_separator: str = '.',
    config: Optional[EvaluatorConfig] = None,
) -> Optional[str]:
    """
    Evaluate a field value if it holds an expression.

    Returns:
        The result formatted with `decimal_separator`, or None when the value
        is not an expression or does not evaluate. On None the field keeps its
        last valid value.
    """
    if not contains_math_operators(value, prefix, suffix):
        return None

    expression = clean_expression(
        value,
        prefix=prefix,
        suffix=suffix,
        group_separator=group_separator,
        decimal_separator=decimal_separator,
    )
    result = evaluate(expression, config)
    if result is None:
        return None
    return format_result(result, decimal_separator)
