"""
Token counting result models.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class TokenType(str, Enum):
    """Tokenizer families that can count tokens."""

    OPENAI = "openai"
    CLAUDE = "claude"
    GEMINI = "gemini"


# Order used when benchmarking every family
BENCHMARK_ORDER = (TokenType.CLAUDE, TokenType.OPENAI, TokenType.GEMINI)


class TokenCountResult(BaseModel):
    """
    Outcome of counting tokens for a single text.

    A successful count with count == 0 for non-empty text means the
    underlying engine failed and the adapter masked the error.
    """

    model_config = {"frozen": True}

    count: int = Field(default=0, ge=0, description="Number of tokens")
    timing: float = Field(default=0.0, ge=0.0, description="Elapsed time in milliseconds")
    # Unrecognized families are echoed back as given
    token_type: TokenType | str
    text: str = ""
    success: bool
    error: str | None = None

    @model_validator(mode="after")
    def _check_error_matches_success(self) -> "TokenCountResult":
        if self.success and self.error is not None:
            raise ValueError("Successful result cannot carry an error")
        if not self.success and not self.error:
            raise ValueError("Failed result requires an error message")
        return self


class TimingStats(BaseModel):
    """Timing statistics for one tokenizer family, in milliseconds."""

    model_config = {"frozen": True}

    avg_time: float
    min_time: float
    max_time: float
    samples: int = Field(..., gt=0)

    @classmethod
    def from_samples(cls, times: list[float]) -> "TimingStats":
        """Build statistics from raw elapsed times."""
        min_time = min(times)
        max_time = max(times)
        # Clamp float rounding so min <= avg <= max always holds
        avg_time = min(max(sum(times) / len(times), min_time), max_time)
        return cls(
            avg_time=avg_time,
            min_time=min_time,
            max_time=max_time,
            samples=len(times),
        )


class WarmUpStatus(BaseModel):
    """
    Result of a best-effort cache warm-up.

    completed is only True once every requested engine has been built.
    """

    completed: bool = False
    openai_models: list[str] = Field(default_factory=list)
    gemini_loaded: bool = False
    errors: list[str] = Field(default_factory=list)

    @property
    def partial(self) -> bool:
        """True when at least one engine failed to load."""
        return bool(self.errors)
