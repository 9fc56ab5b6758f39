"""Model provider module for jjnamer.

This module provides the model side of the pipeline: the provider
interface, the Ollama implementation, the prompt and completion parsing.
"""

from jjnamer.config import NamerConfig
from jjnamer.llm.base import BaseLLMProvider, LLMResult
from jjnamer.llm.exceptions import (
    ExtractionError,
    LLMError,
    ModelError,
    ModelUnavailable,
)
from jjnamer.llm.parsing import extract_bookmark_name, extract_candidate
from jjnamer.llm.prompts import BOOKMARK_PROMPT_TEMPLATE, build_prompt


def get_provider(config: NamerConfig | None = None) -> BaseLLMProvider:
    """Get a model provider instance.

    Args:
        config: The effective configuration. Defaults to built-in defaults.

    Returns:
        An OllamaProvider configured from `config`.
    """
    from jjnamer.llm.ollama_provider import OllamaProvider

    config = config or NamerConfig()
    return OllamaProvider(
        model=config.model,
        host=config.host,
        timeout=config.timeout,
        top_k=config.top_k,
        temperature=config.temperature,
    )


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMResult",
    "LLMError",
    "ModelUnavailable",
    "ModelError",
    "ExtractionError",
    "BOOKMARK_PROMPT_TEMPLATE",
    "build_prompt",
    "extract_candidate",
    "extract_bookmark_name",
    "get_provider",
]
