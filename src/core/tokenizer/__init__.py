"""
Tokenizer engines and the engine cache.

Wraps tiktoken (OpenAI), the google-genai local tokenizer (Gemini) and the
Anthropic count_tokens endpoint (Claude) behind small uniform interfaces.
"""

from src.config import TokenizerConfig
from src.core.tokenizer.base import TokenizerEngine
from src.core.tokenizer.cache import TokenizerCache
from src.core.tokenizer.claude import ClaudeTokenCounter
from src.core.tokenizer.gemini import GeminiLocalEngine
from src.core.tokenizer.openai import TikTokenEngine

__all__ = [
    "TokenizerConfig",
    "TokenizerEngine",
    "TikTokenEngine",
    "GeminiLocalEngine",
    "ClaudeTokenCounter",
    "TokenizerCache",
]
