"""Exceptions raised by tokenx."""


class TokenxError(Exception):
    """Base class for tokenx errors."""


class InvalidMaxTokensError(TokenxError, ValueError):
    """Chunk budget is not a positive integer."""


class TokenizerUnavailableError(TokenxError):
    """Reference tokenizer could not be loaded for comparison."""
