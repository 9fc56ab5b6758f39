"""Ollama provider implementation."""

import requests

from jjnamer.config import DEFAULT_HOST, DEFAULT_MODEL, DEFAULT_TIMEOUT, DEFAULT_TOP_K
from jjnamer.llm.base import BaseLLMProvider, LLMResult
from jjnamer.llm.exceptions import ModelError, ModelUnavailable
from jjnamer.logging import get_logger

logger = get_logger("llm.ollama")


def normalize_host(host: str) -> str:
    """Add a scheme to bare OLLAMA_HOST values like "localhost:11434"."""
    host = host.strip().rstrip("/")
    if "://" not in host:
        host = f"http://{host}"
    return host


class OllamaProvider(BaseLLMProvider):
    """Local models served by Ollama. Requires: ollama serve"""

    def __init__(
        self,
        model: str | None = None,
        host: str | None = None,
        timeout: float | None = None,
        top_k: int | None = DEFAULT_TOP_K,
        temperature: float | None = None,
    ):
        """Initialize the Ollama provider.

        Args:
            model: The model to use. Defaults to llama3.2.
            host: Base URL of the Ollama server.
            timeout: Seconds to wait for the whole completion.
            top_k: Sampling option passed to the model, None to use its default.
            temperature: Sampling option passed to the model, None to use its default.
        """
        self.model = model or DEFAULT_MODEL
        self.host = normalize_host(host or DEFAULT_HOST)
        self.timeout = timeout or DEFAULT_TIMEOUT
        self.top_k = top_k
        self.temperature = temperature

    @property
    def generate_url(self) -> str:
        return f"{self.host}/api/generate"

    def build_payload(self, prompt: str) -> dict:
        options = {}
        if self.top_k is not None:
            options["top_k"] = self.top_k
        if self.temperature is not None:
            options["temperature"] = self.temperature

        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
        }
        if options:
            payload["options"] = options
        return payload

    def generate(self, prompt: str) -> LLMResult:
        """Generate a completion with Ollama's /api/generate endpoint.

        Args:
            prompt: The complete prompt text.

        Returns:
            An LLMResult with the completion and token counts.

        Raises:
            ModelUnavailable: If Ollama cannot be reached or the request times out.
            ModelError: If Ollama answers with an error or an empty completion.
        """
        logger.debug("POST %s (model=%s, timeout=%ss)", self.generate_url, self.model, self.timeout)

        try:
            response = requests.post(
                self.generate_url,
                json=self.build_payload(prompt),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            raise ModelUnavailable(
                f"Ollama did not answer within {self.timeout}s. "
                "Increase the timeout with --timeout or JJNAMER_TIMEOUT."
            )
        except requests.exceptions.ConnectionError:
            raise ModelUnavailable(
                f"Could not connect to Ollama at {self.host}. Start it with: ollama serve"
            )
        except requests.exceptions.RequestException as e:
            raise ModelError(f"Ollama request failed: {e}")

        if response.status_code == 404:
            raise ModelError(f"Model '{self.model}' not found. Run: ollama pull {self.model}")
        if not response.ok:
            raise ModelError(f"Ollama error ({response.status_code}): {response.text.strip()}")

        try:
            data = response.json()
        except ValueError:
            raise ModelError(f"Invalid response from Ollama:\n{response.text}")

        if not isinstance(data, dict):
            raise ModelError(f"Invalid response from Ollama:\n{response.text}")

        if data.get("error"):
            raise ModelError(f"Ollama error: {data['error']}")

        text = data.get("response") or ""
        if not isinstance(text, str):
            raise ModelError(f"Invalid response from Ollama:\n{response.text}")
        if not text.strip():
            raise ModelError(f"Model '{self.model}' returned an empty completion.")

        return LLMResult(
            text=text,
            model=data.get("model", self.model),
            input_tokens=data.get("prompt_eval_count", 0),
            output_tokens=data.get("eval_count", 0),
        )
