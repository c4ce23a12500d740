#!/usr/bin/env python3
"""
01: Hello Expression - Arithmetic in an Amount Field

GOAL: Let users type "100 * 50%" where a number is expected

evaluate() takes a string and returns a finite float, or None when the
input is not a valid expression. It never raises, so the caller only has
to decide what to do with None (usually: keep the previous value).
"""

from exprcalc import evaluate, evaluate_strict, ExpressionError


if __name__ == "__main__":
    test_cases = [
        "2 + 3 * 4",      # Precedence
        "(2 + 3) * 4",    # Grouping
        "100 * 50%",      # Postfix percentage
        "-50%",           # Sign before percentage
        "5 / 0",          # Not finite
        "(2 + 3",         # Unbalanced
        "1.2.3",          # Malformed number
    ]

    print("Hello Expression Example")
    print("=" * 30)

    for expr in test_cases:
        value = evaluate(expr)
        if value is not None:
            print(f"{expr!r:>16} -> {value}")
            continue
        try:
            evaluate_strict(expr)
        except ExpressionError as e:
            print(f"{expr!r:>16} -> invalid ({type(e).__name__}: {e})")

    print()
    print("NEXT: Evaluate formatted field values with prefixes and separators...")
