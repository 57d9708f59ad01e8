"""
Claude token counting through the Anthropic SDK.
"""

from anthropic import AsyncAnthropic

from src.utils.logger import get_logger

logger = get_logger(__name__)


class ClaudeTokenCounter:
    """
    Stateless async Claude token counter.

    Anthropic exposes no reusable local tokenizer for current models, so every
    count is a separate count_tokens request. Only the HTTP client is reused.
    """

    def __init__(
        self,
        model: str = "claude-sonnet-4-5",
        api_key: str | None = None,
        timeout: float = 30.0,
    ):
        """
        Initialize Claude counter.

        Args:
            model: Claude model whose tokenizer should be used
            api_key: Anthropic API key (defaults to ANTHROPIC_API_KEY)
            timeout: Request timeout in seconds
        """
        self.model = model
        self._api_key = api_key
        self._timeout = timeout
        self._client: AsyncAnthropic | None = None

    @property
    def client(self) -> AsyncAnthropic:
        """Lazy-create the Anthropic client."""
        if self._client is None:
            self._client = AsyncAnthropic(api_key=self._api_key, timeout=self._timeout)
        return self._client

    async def count_tokens(self, text: str) -> int:
        """
        Count tokens for text sent as a single user message.

        Args:
            text: Text to count

        Returns:
            Number of input tokens reported by Anthropic
        """
        response = await self.client.messages.count_tokens(
            model=self.model,
            messages=[{"role": "user", "content": text}],
        )
        return response.input_tokens

    async def close(self):
        """Close the Anthropic client if it was created."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.debug("Anthropic client closed")
