"""Error types raised while evaluating an arithmetic expression."""


class ExpressionError(Exception):
    """Raised when an expression is invalid or cannot be evaluated."""
    pass


class InputEmptyError(ExpressionError):
    """The expression is empty after trimming whitespace."""
    pass


class InputTooLongError(ExpressionError):
    """The expression exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Expression too long: {length} characters (max {max_length})"
        )
        self.length = length
        self.max_length = max_length


class DisallowedCharacterError(ExpressionError):
    """The expression contains a character outside the admissible set."""
    pass


class MalformedExpressionError(ExpressionError):
    """The expression does not follow the grammar."""
    pass


class NonFiniteResultError(ExpressionError):
    """The expression evaluated to infinity or NaN."""

    def __init__(self, value: float):
        super().__init__(f"Result is not finite: {value!r}")
        self.value = value
