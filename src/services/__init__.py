"""Services for polytoken."""

from src.services.token_counter import TokenCounter

__all__ = ["TokenCounter"]
