"""
Custom exception hierarchy for polytoken.

Provides structured error types for better error handling and debugging.
All exceptions inherit from PolyTokenError for easy catching.
"""


class PolyTokenError(Exception):
    """
    Base exception for all polytoken errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize polytoken error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ValidationError(PolyTokenError):
    """
    Validation errors.
    Raised when input validation fails or data is invalid.
    """

    pass


class ConfigurationError(PolyTokenError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass


class UnsupportedTokenTypeError(PolyTokenError):
    """
    Unknown tokenizer family.
    Raised when a count is requested for a family with no engine.
    """

    pass


class TokenizerEngineError(PolyTokenError):
    """
    Tokenizer engine errors.
    Raised when an underlying tokenizer cannot be constructed or used.
    """

    pass
