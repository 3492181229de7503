"""
Custom exceptions for the application.
"""


class LanguageApiException(Exception):
    """Base exception for all Language API application exceptions."""
    pass


class InferenceError(LanguageApiException):
    """Raised when the text completion backend fails or returns no usable text."""
    pass


class InferenceNotConfiguredError(InferenceError):
    """Raised when no API key is configured for the text completion backend."""
    pass
