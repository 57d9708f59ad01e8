"""
Factory for creating token counting components.
"""

from src.config import Config, TokenizerConfig
from src.core.tokenizer.cache import TokenizerCache
from src.core.tokenizer.claude import ClaudeTokenCounter
from src.services.token_counter import TokenCounter
from src.utils.logger import setup_logging


class TokenizerFactory:
    """Factory for creating tokenizer components from configuration."""

    @staticmethod
    def create_cache(config: TokenizerConfig) -> TokenizerCache:
        """Create an empty engine cache."""
        return TokenizerCache(config)

    @staticmethod
    def create_claude_counter(config: TokenizerConfig) -> ClaudeTokenCounter:
        """Create the Anthropic-backed Claude counter."""
        return ClaudeTokenCounter(
            model=config.anthropic_model,
            api_key=config.anthropic_api_key,
            timeout=config.anthropic_timeout,
        )

    @staticmethod
    def create(config: TokenizerConfig) -> TokenCounter:
        """
        Create a token counter from configuration.

        Args:
            config: Tokenizer configuration

        Returns:
            TokenCounter with its own cache and Claude counter
        """
        return TokenCounter(
            config=config,
            cache=TokenizerFactory.create_cache(config),
            claude_counter=TokenizerFactory.create_claude_counter(config),
        )

    @staticmethod
    def from_config(config: Config) -> TokenCounter:
        """
        Configure logging and create a token counter from the full config.

        Args:
            config: Main configuration

        Returns:
            TokenCounter instance
        """
        setup_logging(**config.logging.model_dump())
        return TokenizerFactory.create(config.tokenizer)
