"""
Tokenizer engine cache.

Building an engine loads a vocabulary table, so engines are built once per
model and reused for every count. Entries are never evicted.
"""

from collections.abc import Callable

from src.config import TokenizerConfig
from src.core.tokenizer.base import TokenizerEngine
from src.core.tokenizer.gemini import GeminiLocalEngine
from src.core.tokenizer.openai import TikTokenEngine
from src.models.token_count import WarmUpStatus
from src.utils.logger import get_logger

logger = get_logger(__name__)

OpenAIEngineFactory = Callable[[str], TokenizerEngine]
GeminiEngineFactory = Callable[[], TokenizerEngine]


class TokenizerCache:
    """
    Owns the OpenAI engines (keyed by model) and the Gemini engine.

    Claude has no entry: its counts are remote calls with nothing to reuse.

    Usage:
        cache = TokenizerCache()
        status = await cache.warm_up()
        engine = cache.get_openai_engine("gpt-4o")
    """

    def __init__(
        self,
        config: TokenizerConfig | None = None,
        openai_factory: OpenAIEngineFactory | None = None,
        gemini_factory: GeminiEngineFactory | None = None,
    ):
        """
        Initialize an empty cache.

        Args:
            config: Tokenizer configuration. Uses defaults if not provided.
            openai_factory: Builds an OpenAI engine for a model identifier
            gemini_factory: Builds the Gemini engine
        """
        self.config = config or TokenizerConfig()
        self._openai_factory = openai_factory or TikTokenEngine
        self._gemini_factory = gemini_factory or (
            lambda: GeminiLocalEngine(self.config.gemini_model)
        )
        self._openai_engines: dict[str, TokenizerEngine] = {}
        self._gemini_engine: TokenizerEngine | None = None
        self._initialized = False

    @property
    def is_warm(self) -> bool:
        """True once a warm-up has loaded every configured engine."""
        return self._initialized

    @property
    def cached_openai_models(self) -> list[str]:
        """Models that currently have a cached OpenAI engine."""
        return list(self._openai_engines)

    async def warm_up(self) -> WarmUpStatus:
        """
        Preload the configured OpenAI encoders and the Gemini engine.

        Best effort: a failing engine is logged and reported in the returned
        status, never raised. The cache is only marked warm when every engine
        loaded, so a later call retries whatever failed.

        Returns:
            WarmUpStatus describing what is cached
        """
        if self._initialized:
            return self._status(completed=True, errors=[])

        errors: list[str] = []

        for model in self.config.warmup_models:
            if model in self._openai_engines:
                continue
            try:
                self._openai_engines[model] = self._openai_factory(model)
            except Exception as e:
                logger.warning(f"Cache initialization failed for OpenAI model {model}: {e}")
                errors.append(f"openai:{model}: {e}")

        if self._gemini_engine is None:
            try:
                self._gemini_engine = self._gemini_factory()
            except Exception as e:
                logger.warning(f"Cache initialization failed for Gemini tokenizer: {e}")
                errors.append(f"gemini: {e}")

        self._initialized = not errors
        return self._status(completed=self._initialized, errors=errors)

    def get_openai_engine(self, model: str | None = None) -> TokenizerEngine:
        """
        Get the engine for an OpenAI model, building it on first use.

        Args:
            model: OpenAI model identifier (default: configured flagship model)

        Returns:
            Cached engine instance
        """
        model = model or self.config.openai_model
        engine = self._openai_engines.get(model)
        if engine is None:
            engine = self._openai_factory(model)
            self._openai_engines[model] = engine
        return engine

    def get_gemini_engine(self) -> TokenizerEngine:
        """Get the Gemini engine, building it on first use."""
        if self._gemini_engine is None:
            self._gemini_engine = self._gemini_factory()
        return self._gemini_engine

    def _status(self, completed: bool, errors: list[str]) -> WarmUpStatus:
        return WarmUpStatus(
            completed=completed,
            openai_models=self.cached_openai_models,
            gemini_loaded=self._gemini_engine is not None,
            errors=errors,
        )
