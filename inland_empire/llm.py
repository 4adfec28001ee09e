"""LLM client: HTTP connection to the commentary backend.

The voice pass injects an LLM callable matching the protocol:

    async def __call__(self, stage: str, system: str, prompt: str) -> str: ...

`stage` is the id of the voice being generated (e.g. "logic",
"limbic_system"). Implementations may use it for logging; the simplest
ignore it. `system` carries the voice persona and rules, `prompt` the scene.

Two implementations are provided:

    HttpLLM: real HTTP client, supports OpenAI-compatible chat completions
             and KoboldCpp. Selected by provider_format.
    EchoLLM: returns the prompt back unchanged. Useful for smoke-testing
             the pass wiring without a running model.

llm_from_settings() builds an HttpLLM from the stored settings.
Tests use AsyncMock or EchoLLM instead.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from inland_empire.config import ProviderFormat, Settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Protocol: every LLM implementation must match this signature
# ---------------------------------------------------------------------------

class LLM(Protocol):
    async def __call__(self, stage: str, system: str, prompt: str) -> str: ...


# ---------------------------------------------------------------------------
# HttpLLM: connects to a real backend
# ---------------------------------------------------------------------------

class HttpLLM:
    """Async HTTP client for text-completion backends.

    Supported formats:
      "openai"     POST {endpoint}  {"model", "messages", "max_tokens", "temperature"}
                     An endpoint that does not already end in a completions path
                     gets /chat/completions appended.
      "koboldcpp"  POST /api/v1/generate  {"prompt": system + prompt}

    The response text is taken from the first non-empty field among the
    shapes different providers return (choices[0].message.content,
    choices[0].text, content[0].text, content, response, output,
    results[0].text). Empty content is an error.

    Args:
        provider_url:    Endpoint or base URL of the backend.
        api_key:         Bearer token, or empty string if not required.
        provider_format: Wire format to use. Defaults to "openai".
        model:           Model identifier, sent by the openai format.
        max_tokens:      Completion length limit.
        temperature:     Sampling temperature.
        timeout:         HTTP timeout in seconds. Defaults to 120.
    """

    def __init__(
        self,
        provider_url: str,
        api_key: str = "",
        provider_format: ProviderFormat = "openai",
        model: str = "",
        max_tokens: int = 300,
        temperature: float = 0.9,
        timeout: float = 120.0,
    ) -> None:
        self._base_url = provider_url.strip().rstrip("/")
        self._api_key = api_key
        self._format = provider_format
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def _endpoint(self) -> str:
        if self._format == "koboldcpp":
            return f"{self._base_url}/api/v1/generate"
        if "/completions" in self._base_url:
            return self._base_url
        return f"{self._base_url}/chat/completions"

    def _build_request(self, system: str, prompt: str) -> tuple[str, dict]:
        """Return (url, body) for the configured format."""
        url = self._endpoint()
        if self._format == "koboldcpp":
            return url, {"prompt": f"{system}\n\n{prompt}"}

        body: dict[str, Any] = {
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
        }
        if self._model:
            body["model"] = self._model
        return url, body

    @staticmethod
    def _parse_response(data: Any) -> str:
        """Extract the completion text from whichever shape the backend returned."""
        if not isinstance(data, dict):
            raise LLMError("Unexpected response format from LLM backend")

        candidates: list[Any] = []
        choices = data.get("choices")
        if isinstance(choices, list) and choices and isinstance(choices[0], dict):
            message = choices[0].get("message")
            if isinstance(message, dict):
                candidates.append(message.get("content"))
            candidates.append(choices[0].get("text"))
        content = data.get("content")
        if isinstance(content, list) and content and isinstance(content[0], dict):
            candidates.append(content[0].get("text"))
        candidates.append(content)
        candidates.append(data.get("response"))
        candidates.append(data.get("output"))
        results = data.get("results")
        if isinstance(results, list) and results and isinstance(results[0], dict):
            candidates.append(results[0].get("text"))

        for text in candidates:
            if isinstance(text, str) and text.strip():
                return text
        raise LLMError("Empty content from LLM backend")

    async def __call__(self, stage: str, system: str, prompt: str) -> str:
        if not self._base_url:
            raise LLMError("API not configured")

        url, body = self._build_request(system, prompt)
        logger.debug("llm call stage=%s url=%s prompt_len=%d", stage, url, len(prompt))

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(url, json=body, headers=self._headers())
                resp.raise_for_status()
        except httpx.ConnectError as e:
            raise LLMError(f"Cannot connect to LLM backend at {self._base_url}") from e
        except httpx.HTTPStatusError as e:
            raise LLMError(
                f"LLM backend returned HTTP {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            raise LLMError(f"LLM backend timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            raise LLMError(f"LLM request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise LLMError("LLM backend returned invalid JSON") from e

        text = self._parse_response(data)
        logger.debug("llm response stage=%s len=%d", stage, len(text))
        return text


def llm_from_settings(settings: Settings) -> HttpLLM:
    return HttpLLM(
        provider_url=settings.api_endpoint,
        api_key=settings.api_key,
        provider_format=settings.provider_format,
        model=settings.model,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
        timeout=settings.timeout,
    )


# ---------------------------------------------------------------------------
# EchoLLM: returns the prompt unchanged; useful for pipeline smoke tests
# ---------------------------------------------------------------------------

class EchoLLM:
    """Returns the user prompt as-is. No network calls.

    Lets you verify that the pass wiring (detection, selection, checks,
    prompt rendering) works end-to-end without a running model.
    """

    async def __call__(self, stage: str, system: str, prompt: str) -> str:
        logger.debug("EchoLLM stage=%s prompt_len=%d", stage, len(prompt))
        return prompt


# ---------------------------------------------------------------------------
# LLMError: raised by HttpLLM for all connection and protocol failures
# ---------------------------------------------------------------------------

class LLMError(RuntimeError):
    """Raised when the LLM backend cannot be reached, errors, or returns nothing."""
