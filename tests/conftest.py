"""
Shared test fixtures for all test modules.

Fake engines stand in for tiktoken, the Gemini local tokenizer and the
Anthropic client so counting logic can be tested without network access.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config import TokenizerConfig
from src.core.tokenizer.base import TokenizerEngine
from src.core.tokenizer.cache import TokenizerCache
from src.services.token_counter import TokenCounter


class FakeEngine(TokenizerEngine):
    """Engine that emits one token per whitespace-separated word."""

    def __init__(self, name: str = "fake"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def encode(self, text: str) -> list[int]:
        return list(range(len(text.split())))


class BrokenEngine(FakeEngine):
    """Engine whose encode always fails."""

    def encode(self, text: str) -> list[int]:
        raise RuntimeError("vocabulary corrupted")


class EngineFactorySpy:
    """Callable engine factory that records every construction."""

    def __init__(self, engine_cls: type[TokenizerEngine] = FakeEngine, fail_on: set | None = None):
        self.engine_cls = engine_cls
        self.fail_on = fail_on or set()
        self.calls: list[str] = []

    def __call__(self, model: str = "gemini") -> TokenizerEngine:
        self.calls.append(model)
        if model in self.fail_on:
            raise RuntimeError(f"cannot load {model}")
        return self.engine_cls(model)


@pytest.fixture
def tokenizer_config() -> TokenizerConfig:
    """Default tokenizer configuration."""
    return TokenizerConfig()


@pytest.fixture
def openai_factory() -> EngineFactorySpy:
    return EngineFactorySpy()


@pytest.fixture
def gemini_factory() -> EngineFactorySpy:
    return EngineFactorySpy()


@pytest.fixture
def cache(tokenizer_config, openai_factory, gemini_factory) -> TokenizerCache:
    """Cache wired to recording fake factories."""
    return TokenizerCache(
        tokenizer_config,
        openai_factory=openai_factory,
        gemini_factory=lambda: gemini_factory("gemini"),
    )


@pytest.fixture
def claude_counter() -> MagicMock:
    """Claude counter returning one token per word."""
    counter = MagicMock()
    counter.count_tokens = AsyncMock(side_effect=lambda text: len(text.split()))
    counter.close = AsyncMock()
    return counter


@pytest.fixture
def token_counter(tokenizer_config, cache, claude_counter) -> TokenCounter:
    """Token counter built entirely from fakes."""
    return TokenCounter(config=tokenizer_config, cache=cache, claude_counter=claude_counter)


@pytest.fixture
def broken_token_counter(tokenizer_config) -> TokenCounter:
    """Token counter whose engines all fail while encoding or counting."""
    broken = EngineFactorySpy(BrokenEngine)
    claude = MagicMock()
    claude.count_tokens = AsyncMock(side_effect=RuntimeError("anthropic unavailable"))
    claude.close = AsyncMock()
    return TokenCounter(
        config=tokenizer_config,
        cache=TokenizerCache(
            tokenizer_config,
            openai_factory=broken,
            gemini_factory=lambda: broken("gemini"),
        ),
        claude_counter=claude,
    )


@pytest.fixture
def failing_factory() -> EngineFactorySpy:
    """OpenAI factory that cannot build gpt-4."""
    return EngineFactorySpy(fail_on={"gpt-4"})
