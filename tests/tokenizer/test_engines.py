"""
Tests for tokenizer engines.

Tests cover:
1. tiktoken engine (real vocabulary)
2. Gemini local engine (mocked google-genai tokenizer)
3. Claude counter (mocked Anthropic client)
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.core.tokenizer.base import TokenizerEngine
from src.core.tokenizer.claude import ClaudeTokenCounter
from src.core.tokenizer.gemini import GeminiLocalEngine
from src.core.tokenizer.openai import TikTokenEngine
from src.utils.exceptions import TokenizerEngineError


@pytest.mark.unit
class TestTikTokenEngine:
    """Tests for the OpenAI tiktoken engine."""

    def test_hello_world_gpt4o(self):
        """Test the known o200k_base count for a short greeting."""
        engine = TikTokenEngine("gpt-4o")
        assert engine.count_tokens("Hello, world!") == 4

    def test_encode_returns_ids(self):
        """Test encode returns integer token IDs."""
        engine = TikTokenEngine("gpt-3.5-turbo")
        tokens = engine.encode("Hello world")
        assert isinstance(tokens, list)
        assert len(tokens) > 0
        assert all(isinstance(t, int) for t in tokens)

    def test_count_deterministic(self):
        """Test counting is deterministic."""
        engine = TikTokenEngine()
        text = "The quick brown fox jumps over the lazy dog."
        assert engine.count_tokens(text) == engine.count_tokens(text)

    def test_unicode(self):
        """Test counting tokens with unicode characters."""
        engine = TikTokenEngine()
        assert engine.count_tokens("Hello, 世界! 🌍") > 0

    def test_special_tokens_counted_as_text(self):
        """Test special-token markers in user text do not raise."""
        engine = TikTokenEngine("gpt-4")
        assert engine.count_tokens("before <|endoftext|> after") > 1

    def test_unknown_model(self):
        """Test unknown models raise TokenizerEngineError."""
        with pytest.raises(TokenizerEngineError) as exc_info:
            TikTokenEngine("definitely-not-a-model")
        assert exc_info.value.context["model"] == "definitely-not-a-model"

    def test_name_and_repr(self):
        """Test engine exposes its model name."""
        engine = TikTokenEngine("gpt-4")
        assert engine.name == "gpt-4"
        assert "gpt-4" in repr(engine)
        assert engine.encoding.name == "cl100k_base"


@pytest.mark.unit
class TestGeminiLocalEngine:
    """Tests for the Gemini local tokenizer wrapper."""

    def test_encode_flattens_token_ids(self):
        """Test token IDs from every tokens_info entry are concatenated."""
        result = MagicMock()
        result.tokens_info = [MagicMock(token_ids=[10, 11]), MagicMock(token_ids=[12])]

        with patch("src.core.tokenizer.gemini.LocalTokenizer") as mock_tokenizer:
            mock_tokenizer.return_value.compute_tokens.return_value = result
            engine = GeminiLocalEngine("gemini-2.0-flash")

            assert engine.encode("Hello, world!") == [10, 11, 12]
            assert engine.count_tokens("Hello, world!") == 3
            mock_tokenizer.assert_called_once_with(model_name="gemini-2.0-flash")
            mock_tokenizer.return_value.compute_tokens.assert_called_with("Hello, world!")

    def test_encode_empty_tokens_info(self):
        """Test missing tokens_info yields no tokens."""
        result = MagicMock()
        result.tokens_info = None

        with patch("src.core.tokenizer.gemini.LocalTokenizer") as mock_tokenizer:
            mock_tokenizer.return_value.compute_tokens.return_value = result
            engine = GeminiLocalEngine()
            assert engine.encode("text") == []

    def test_load_failure(self):
        """Test tokenizer load errors are wrapped."""
        with patch(
            "src.core.tokenizer.gemini.LocalTokenizer", side_effect=ValueError("unsupported")
        ):
            with pytest.raises(TokenizerEngineError, match="unsupported"):
                GeminiLocalEngine("gemini-unknown")

    def test_is_tokenizer_engine(self):
        """Test Gemini engine implements the engine interface."""
        with patch("src.core.tokenizer.gemini.LocalTokenizer"):
            assert isinstance(GeminiLocalEngine(), TokenizerEngine)


@pytest.mark.unit
@pytest.mark.asyncio
class TestClaudeTokenCounter:
    """Tests for the Anthropic-backed Claude counter."""

    async def test_count_tokens(self):
        """Test count sends the text as one user message."""
        mock_client = MagicMock()
        mock_client.messages.count_tokens = AsyncMock(return_value=MagicMock(input_tokens=7))

        with patch("src.core.tokenizer.claude.AsyncAnthropic", return_value=mock_client):
            counter = ClaudeTokenCounter(model="claude-test", api_key="sk-test")
            count = await counter.count_tokens("Hello, world!")

        assert count == 7
        mock_client.messages.count_tokens.assert_awaited_once_with(
            model="claude-test",
            messages=[{"role": "user", "content": "Hello, world!"}],
        )

    async def test_client_created_lazily_once(self):
        """Test the client is built on first use and reused."""
        mock_client = MagicMock()
        mock_client.messages.count_tokens = AsyncMock(return_value=MagicMock(input_tokens=1))

        with patch(
            "src.core.tokenizer.claude.AsyncAnthropic", return_value=mock_client
        ) as mock_cls:
            counter = ClaudeTokenCounter(api_key="sk-test", timeout=5.0)
            mock_cls.assert_not_called()

            await counter.count_tokens("a")
            await counter.count_tokens("b")

        mock_cls.assert_called_once_with(api_key="sk-test", timeout=5.0)

    async def test_errors_propagate(self):
        """Test API errors are raised to the caller."""
        mock_client = MagicMock()
        mock_client.messages.count_tokens = AsyncMock(side_effect=RuntimeError("401"))

        with patch("src.core.tokenizer.claude.AsyncAnthropic", return_value=mock_client):
            counter = ClaudeTokenCounter(api_key="bad")
            with pytest.raises(RuntimeError, match="401"):
                await counter.count_tokens("text")

    async def test_close(self):
        """Test close releases the client."""
        mock_client = MagicMock()
        mock_client.close = AsyncMock()

        with patch("src.core.tokenizer.claude.AsyncAnthropic", return_value=mock_client):
            counter = ClaudeTokenCounter(api_key="sk-test")
            _ = counter.client
            await counter.close()

        mock_client.close.assert_awaited_once()
        assert counter._client is None

    async def test_close_without_client(self):
        """Test close is a no-op before first use."""
        counter = ClaudeTokenCounter()
        await counter.close()  # Should not raise
