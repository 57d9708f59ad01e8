"""Utility modules for polytoken."""

from src.utils.exceptions import (
    ConfigurationError,
    PolyTokenError,
    TokenizerEngineError,
    UnsupportedTokenTypeError,
    ValidationError,
)
from src.utils.logger import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Exceptions
    "PolyTokenError",
    "ValidationError",
    "ConfigurationError",
    "UnsupportedTokenTypeError",
    "TokenizerEngineError",
]
