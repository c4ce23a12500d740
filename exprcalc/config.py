"""
Evaluator configuration.

Values default to the limits the evaluator guarantees; `EvaluatorConfig.from_env`
lets deployments tighten them without code changes.
"""

import os

from pydantic import BaseModel, Field

DEFAULT_MAX_LENGTH = 200


class EvaluatorConfig(BaseModel):
    """Limits applied by the input guard before an expression is parsed."""
    max_length: int = Field(
        DEFAULT_MAX_LENGTH,
        ge=1,
        description="Maximum expression length after trimming whitespace",
    )

    @classmethod
    def from_env(cls) -> "EvaluatorConfig":
        """Build a config from EXPRCALC_* environment variables."""
        max_length = os.getenv('EXPRCALC_MAX_LENGTH')
        if max_length is None:
            return cls()
        return cls(max_length=max_length)


# Used when callers pass no config.
default_config = EvaluatorConfig()
