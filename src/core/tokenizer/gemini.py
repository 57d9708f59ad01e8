"""
Gemini engine using the local SentencePiece tokenizer shipped with google-genai.
"""

from google.genai.local_tokenizer import LocalTokenizer

from src.core.tokenizer.base import TokenizerEngine
from src.utils.exceptions import TokenizerEngineError


class GeminiLocalEngine(TokenizerEngine):
    """
    Local Gemini tokenizer.

    The tokenizer model file is fetched and cached by google-genai the first
    time it is constructed; counting afterwards needs no API key or network.
    """

    def __init__(self, model_name: str = "gemini-2.0-flash"):
        """
        Initialize the local tokenizer for a Gemini model.

        Args:
            model_name: Gemini model whose vocabulary should be loaded

        Raises:
            TokenizerEngineError: If the tokenizer cannot be loaded
        """
        self._model_name = model_name
        try:
            self._tokenizer = LocalTokenizer(model_name=model_name)
        except Exception as e:
            raise TokenizerEngineError(
                f"Failed to load Gemini tokenizer for '{model_name}': {e}",
                context={"model": model_name},
            ) from e

    @property
    def name(self) -> str:
        """Return the Gemini model name."""
        return self._model_name

    def encode(self, text: str) -> list[int]:
        result = self._tokenizer.compute_tokens(text)
        return [
            token_id
            for info in result.tokens_info or []
            for token_id in info.token_ids or []
        ]
