#!/usr/bin/env python3
"""
02: Amount Field - Prefixes, Separators and Batches

GOAL: Evaluate what a user typed into a currency input

Field values carry display formatting ("$1,000 + 10%", "1.000,5 * 2 €").
evaluate_field() strips it, evaluates, and formats the result back; None
means the field should revert. evaluate_many() scores a whole column at
once and marks invalid rows as NaN.
"""

import numpy as np

from exprcalc import contains_math_operators, evaluate_field, evaluate_many


if __name__ == "__main__":
    print("Amount Field Example")
    print("=" * 30)

    us = {"prefix": "$", "group_separator": ","}
    eu = {"suffix": " €", "group_separator": ".", "decimal_separator": ","}

    for value, options in [
        ("$1,000 + 10%", us),
        ("$-12", us),
        ("1.000,5 * 2 €", eu),
        ("10 / 0 €", eu),
    ]:
        is_expr = contains_math_operators(value, options.get("prefix", ""), options.get("suffix", ""))
        display = evaluate_field(value, **options)
        outcome = display if display is not None else "revert"
        print(f"{value!r:>18} expression={is_expr!s:<5} -> {outcome}")

    print()
    column = ["19.99 * 3", "250 - 10%", "(1 + ", "120 / 4"]
    values = evaluate_many(column)
    print(f"Batch: {values}")
    print(f"Valid rows: {int(np.count_nonzero(~np.isnan(values)))}/{len(column)}")
    print(f"Total of valid rows: {np.nansum(values):.2f}")
