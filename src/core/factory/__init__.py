"""
Factory modules for creating polytoken components.
"""

from src.core.factory.tokenizer_factory import TokenizerFactory

__all__ = ["TokenizerFactory"]
