"""
Abstract base class for local tokenizer engines.
"""

from abc import ABC, abstractmethod


class TokenizerEngine(ABC):
    """
    Abstract base for a reusable, locally constructed tokenizer.

    Engines are expensive to build (vocabulary loading) and cheap to call,
    so they are meant to be constructed once and cached.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the model or encoding the engine was built for."""
        pass

    @abstractmethod
    def encode(self, text: str) -> list[int]:
        """
        Encode text to token IDs.

        Args:
            text: Text string to encode

        Returns:
            List of token IDs
        """
        pass

    def count_tokens(self, text: str) -> int:
        """Count the number of tokens in text."""
        return len(self.encode(text))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
