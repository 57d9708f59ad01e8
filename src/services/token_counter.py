"""
Token Counter - uniform token counting across tokenizer families.

Counts tokens with OpenAI (tiktoken), Claude (Anthropic API) or Gemini
(local tokenizer) and always answers with a TokenCountResult.

Failure policy:
- Adapters: any engine error is logged and counted as 0 tokens.
- count_tokens: invalid input and dispatch errors become success=False
  results; it never raises.
- count_tokens_batch: raises TypeError for non-sequence input only.
"""

import time
from typing import Any

from src.config import TokenizerConfig
from src.core.tokenizer.cache import TokenizerCache
from src.core.tokenizer.claude import ClaudeTokenCounter
from src.models.token_count import (
    BENCHMARK_ORDER,
    TimingStats,
    TokenCountResult,
    TokenType,
    WarmUpStatus,
)
from src.utils.exceptions import UnsupportedTokenTypeError, ValidationError
from src.utils.logger import get_logger

logger = get_logger(__name__)

INVALID_INPUT_ERROR = "Invalid input: text must be a non-empty string"


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class TokenCounter:
    """
    Facade over the per-family tokenizers.

    Usage:
        counter = TokenCounter()
        result = await counter.count_tokens("Hello, world!", TokenType.OPENAI)
        results = await counter.count_tokens_batch(["a", "b"], TokenType.GEMINI)
        stats = await counter.benchmark_tokenizers("Some text", iterations=5)
    """

    def __init__(
        self,
        config: TokenizerConfig | None = None,
        cache: TokenizerCache | None = None,
        claude_counter: ClaudeTokenCounter | None = None,
    ):
        """
        Initialize token counter.

        Args:
            config: Tokenizer configuration. Uses defaults if not provided.
            cache: Engine cache (a new one is created from config if omitted)
            claude_counter: Claude counter (a new one is created from config if omitted)
        """
        self.config = config or TokenizerConfig()
        self.cache = cache or TokenizerCache(self.config)
        self.claude_counter = claude_counter or ClaudeTokenCounter(
            model=self.config.anthropic_model,
            api_key=self.config.anthropic_api_key,
            timeout=self.config.anthropic_timeout,
        )

    async def warm_up(self) -> WarmUpStatus:
        """Preload tokenizer engines. Never raises."""
        return await self.cache.warm_up()

    # Adapters

    def _count_openai(self, text: str, model: str | None = None) -> int:
        try:
            engine = self.cache.get_openai_engine(model or self.config.openai_model)
            return len(engine.encode(text))
        except Exception as e:
            logger.error(f"OpenAI counting error: {e}")
            return 0

    async def _count_claude(self, text: str) -> int:
        try:
            return await self.claude_counter.count_tokens(text)
        except Exception as e:
            logger.error(f"Claude counting error: {e}")
            return 0

    async def _count_gemini(self, text: str) -> int:
        try:
            engine = self.cache.get_gemini_engine()
            return len(engine.encode(text))
        except Exception as e:
            logger.error(f"Gemini local counting error: {e}")
            return 0

    async def _dispatch(self, text: str, token_type: TokenType | str, model: str | None) -> int:
        try:
            family = TokenType(token_type)
        except ValueError:
            raise UnsupportedTokenTypeError(
                f"Unsupported token type: {getattr(token_type, 'value', token_type)}",
                context={"token_type": str(token_type)},
            ) from None

        match family:
            case TokenType.OPENAI:
                return self._count_openai(text, model)
            case TokenType.CLAUDE:
                return await self._count_claude(text)
            case TokenType.GEMINI:
                return await self._count_gemini(text)
            case _:
                raise UnsupportedTokenTypeError(f"Unsupported token type: {family.value}")

    async def count_tokens(
        self,
        text: Any,
        token_type: TokenType | str = TokenType.OPENAI,
        model: str | None = None,
    ) -> TokenCountResult:
        """
        Count tokens in text for one tokenizer family.

        Args:
            text: Text to count; None, non-strings and "" are rejected
            token_type: Tokenizer family (default: OpenAI)
            model: OpenAI model override; ignored for other families

        Returns:
            TokenCountResult; failures are reported with success=False
        """
        if not isinstance(token_type, str):
            token_type = str(token_type)

        if not text or not isinstance(text, str):
            return TokenCountResult(
                count=0,
                timing=0.0,
                token_type=token_type,
                text=text if isinstance(text, str) else "",
                success=False,
                error=INVALID_INPUT_ERROR,
            )

        start = time.perf_counter()

        try:
            count = await self._dispatch(text, token_type, model)
            return TokenCountResult(
                count=count,
                timing=_elapsed_ms(start),
                token_type=token_type,
                text=text,
                success=True,
            )
        except Exception as e:
            timing = _elapsed_ms(start)
            message = str(e) or type(e).__name__
            return TokenCountResult(
                count=0,
                timing=timing,
                token_type=token_type,
                text=text,
                success=False,
                error=f"Token counting failed: {message}",
            )

    async def count_tokens_batch(
        self,
        texts: list[str] | tuple[str, ...],
        token_type: TokenType | str = TokenType.OPENAI,
    ) -> list[TokenCountResult]:
        """
        Count tokens for several texts, one after another.

        Args:
            texts: List or tuple of texts
            token_type: Tokenizer family for every text

        Returns:
            One result per text, in input order

        Raises:
            TypeError: If texts is not a list or tuple
        """
        if not isinstance(texts, (list, tuple)):
            raise TypeError("Input must be a list of strings")

        await self.cache.warm_up()

        start = time.perf_counter()
        results: list[TokenCountResult] = []
        try:
            for text in texts:
                results.append(await self.count_tokens(text, token_type))
        except Exception as e:
            logger.warning(f"Batch processing error: {e}")
            raise

        total = _elapsed_ms(start)
        average = total / len(texts) if texts else 0.0
        logger.info(
            f"Batch processed {len(texts)} texts in {total:.2f}ms "
            f"(avg: {average:.2f}ms per text)"
        )
        return results

    async def benchmark_tokenizers(
        self, text: str, iterations: int | None = None
    ) -> dict[TokenType, TimingStats]:
        """
        Time count_tokens for every family.

        Each round counts text once per family in the order Claude, OpenAI,
        Gemini.

        Args:
            text: Text to count
            iterations: Number of rounds (default: config.benchmark_iterations)

        Returns:
            Average, min and max elapsed milliseconds per family

        Raises:
            ValidationError: If iterations is less than 1
        """
        if iterations is None:
            iterations = self.config.benchmark_iterations
        if iterations < 1:
            raise ValidationError(
                "iterations must be at least 1", context={"iterations": iterations}
            )

        logger.info(f"Running {iterations} iterations for each tokenizer (timings in ms)...")

        await self.cache.warm_up()

        times: dict[TokenType, list[float]] = {family: [] for family in BENCHMARK_ORDER}
        for _ in range(iterations):
            for family in BENCHMARK_ORDER:
                start = time.perf_counter()
                await self.count_tokens(text, family)
                times[family].append(_elapsed_ms(start))

        return {family: TimingStats.from_samples(times[family]) for family in BENCHMARK_ORDER}

    async def close(self):
        """Release the Claude client."""
        await self.claude_counter.close()
