"""
Minimal CLI entry point for exprcalc.

Commands:
- `eval`: evaluate one or more expressions
- `field`: evaluate a formatted amount field value (prefix, separators)

Exit codes: 0 on success, 1 when an expression is invalid, 2 on usage errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List

from pydantic import ValidationError

from .config import EvaluatorConfig
from .errors import ExpressionError
from .evaluator import evaluate_strict
from .field import contains_math_operators, evaluate_field


_GLOBAL_FLAGS = ("-v", "--verbose")

# Options each command accepts, with the number of values they take
_COMMAND_OPTIONS: Dict[str, Dict[str, int]] = {
    "eval": {"--json": 0, "--max-length": 1},
    "field": {
        "--json": 0,
        "--max-length": 1,
        "--prefix": 1,
        "--suffix": 1,
        "--group-separator": 1,
        "--decimal-separator": 1,
    },
}


def _normalize_argv(argv: List[str]) -> List[str]:
    """Move a command's positionals behind "--".

    Expressions such as "--5" or "-5+3" look like flags to argparse; anything
    after the command that is not one of its own options is an expression.
    An explicit "--" still works and ends option scanning.
    """
    i = 0
    while i < len(argv) and argv[i] in _GLOBAL_FLAGS:
        i += 1
    if i >= len(argv) or argv[i] not in _COMMAND_OPTIONS:
        return list(argv)

    known = _COMMAND_OPTIONS[argv[i]]
    rest = argv[i + 1:]
    options: List[str] = []
    positionals: List[str] = []
    j = 0
    while j < len(rest):
        arg = rest[j]
        if arg == "--":
            positionals.extend(rest[j + 1:])
            break
        if arg in ("-h", "--help") or ("=" in arg and arg.split("=", 1)[0] in known):
            options.append(arg)
        elif arg in known:
            options.extend(rest[j:j + 1 + known[arg]])
            j += known[arg]
        else:
            positionals.append(arg)
        j += 1
    return argv[:i + 1] + options + ["--"] + positionals


def _load_config(args: argparse.Namespace) -> EvaluatorConfig:
    if args.max_length is not None:
        return EvaluatorConfig(max_length=args.max_length)
    return EvaluatorConfig.from_env()


def _cmd_eval(args: argparse.Namespace) -> int:
    """Evaluate each expression and print one result per line (or JSON)."""
    config = _load_config(args)
    results: List[Dict[str, Any]] = []
    for expression in args.expressions:
        try:
            value = evaluate_strict(expression, config)
            results.append({"expression": expression, "value": value, "valid": True, "error": None})
        except ExpressionError as e:
            results.append({"expression": expression, "value": None, "valid": False, "error": str(e)})

    if args.json:
        print(json.dumps(results, indent=2))
    else:
        for result in results:
            print(result["value"] if result["valid"] else "invalid")
    return 0 if all(r["valid"] for r in results) else 1


def _cmd_field(args: argparse.Namespace) -> int:
    """Evaluate a field value; exit 1 when the field should revert."""
    config = _load_config(args)
    display = evaluate_field(
        args.value,
        prefix=args.prefix,
        suffix=args.suffix,
        group_separator=args.group_separator,
        decimal_separator=args.decimal_separator,
        config=config,
    )
    if args.json:
        report = {
            "value": args.value,
            "is_expression": contains_math_operators(args.value, args.prefix, args.suffix),
            "display": display,
        }
        print(json.dumps(report, indent=2))
    elif display is not None:
        print(display)
    return 0 if display is not None else 1


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="exprcalc", description="Safe arithmetic expression evaluator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log rejected expressions")
    subparsers = parser.add_subparsers(dest="command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    common.add_argument("--max-length", type=int, default=None, help="Override the maximum expression length")

    p_eval = subparsers.add_parser("eval", parents=[common], help="Evaluate expressions")
    p_eval.add_argument("expressions", nargs="+", metavar="EXPR")
    p_eval.set_defaults(func=_cmd_eval)

    p_field = subparsers.add_parser("field", parents=[common], help="Evaluate a formatted field value")
    p_field.add_argument("value", metavar="VALUE")
    p_field.add_argument("--prefix", default="", help="Currency prefix, e.g. '$'")
    p_field.add_argument("--suffix", default="", help="Currency suffix, e.g. ' EUR'")
    p_field.add_argument("--group-separator", default="", help="Thousands separator to drop")
    p_field.add_argument("--decimal-separator", default=".", help="Decimal separator used in the field")
    p_field.set_defaults(func=_cmd_field)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Prints help when no command is provided."""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_normalize_argv(argv))
    if not hasattr(args, "func"):
        parser.print_help()
        return 2
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
