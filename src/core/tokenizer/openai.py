"""
OpenAI byte-pair encoding engine backed by tiktoken.
"""

import tiktoken

from src.core.tokenizer.base import TokenizerEngine
from src.utils.exceptions import TokenizerEngineError


class TikTokenEngine(TokenizerEngine):
    """
    tiktoken encoder resolved from an OpenAI model identifier.

    Special-token strings such as <|endoftext|> that appear in user text
    are encoded as ordinary text instead of being rejected.
    """

    def __init__(self, model: str = "gpt-4o"):
        """
        Initialize with the encoding used by an OpenAI model.

        Args:
            model: OpenAI model identifier (e.g., "gpt-4o", "gpt-3.5-turbo")

        Raises:
            TokenizerEngineError: If tiktoken has no encoding for the model
        """
        self._model = model
        try:
            self._encoding: tiktoken.Encoding = tiktoken.encoding_for_model(model)
        except KeyError as e:
            raise TokenizerEngineError(
                f"No tiktoken encoding for model '{model}'", context={"model": model}
            ) from e

    @property
    def name(self) -> str:
        """Return the model identifier."""
        return self._model

    @property
    def encoding(self) -> tiktoken.Encoding:
        """Return the underlying tiktoken Encoding object."""
        return self._encoding

    def encode(self, text: str) -> list[int]:
        return self._encoding.encode(text, disallowed_special=())
