"""Base classes for model providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class LLMResult:
    """Result from an LLM generation call, including token usage."""

    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


class BaseLLMProvider(ABC):
    """Abstract base class for model providers."""

    model: str

    @abstractmethod
    def generate(self, prompt: str) -> LLMResult:
        """Send a prompt and wait for the full completion.

        Args:
            prompt: The complete prompt text.

        Returns:
            An LLMResult holding the raw completion text.

        Raises:
            ModelUnavailable: If the service cannot be reached or times out.
            ModelError: If the service fails or returns an empty completion.
        """
        pass
