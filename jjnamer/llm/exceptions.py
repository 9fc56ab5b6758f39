"""LLM-related exception classes.

Contains all exception classes for model operations:
- LLMError: Base exception for LLM-related errors
- ModelUnavailable: Raised when the model service cannot be reached in time
- ModelError: Raised when the service answers with a failure or nothing
- ExtractionError: Raised when no bookmark name can be read from the answer
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class ModelUnavailable(LLMError):
    """Raised on connection failure or timeout talking to the model service."""

    pass


class ModelError(LLMError):
    """Raised when the model service returns an error or an empty completion."""

    pass


class ExtractionError(LLMError):
    """Raised when the completion holds no usable bookmark name."""

    pass
