"""OpenAI-compatible chat completion client used for flood risk analysis.

Talks to any endpoint implementing the OpenAI chat completions API
(xAI Grok by default) through the official openai SDK.
"""
import logging
import time

import openai
from openai import AsyncOpenAI

from floodrisk.errors import InvocationError
from floodrisk.metrics import (
    LLM_API_CALLS_TOTAL,
    LLM_API_CALL_DURATION_SECONDS,
)

logger = logging.getLogger(__name__)


class LLMClient:
    """Async client returning the first completion's text for a prompt."""

    def __init__(self, api_key: str, base_url: str, timeout: float = 60.0):
        """Initialize the LLM client.

        Args:
            api_key: Bearer token for the LLM provider
            base_url: API base URL (e.g., "https://api.x.ai/v1")
            timeout: Request timeout in seconds
        """
        # max_retries=0: one attempt per analysis, failures go to the default assessment
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.close()

    async def complete(
        self,
        prompt: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1000,
    ) -> str:
        """Send a single-message chat completion and return its text.

        Args:
            prompt: User message content
            model: Model identifier (e.g., "grok-beta")
            temperature: Sampling temperature
            max_tokens: Completion token limit

        Returns:
            Text content of the first choice

        Raises:
            InvocationError: On transport, HTTP status, timeout or envelope errors
        """
        start_time = time.perf_counter()
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens,
            )
            if not response.choices:
                raise InvocationError("LLM response contained no choices")
            content = response.choices[0].message.content
            if content is None:
                raise InvocationError("LLM response choice has no message content")

        except openai.OpenAIError as e:
            self._record(model, start_time, "error")
            logger.error(f"[LLMClient] Error calling LLM API: {e}")
            raise InvocationError(f"Failed to call LLM API: {e}") from e
        except InvocationError as e:
            self._record(model, start_time, "error")
            logger.error(f"[LLMClient] Malformed LLM response: {e}")
            raise

        duration = self._record(model, start_time, "success")
        tokens = response.usage.total_tokens if response.usage else "?"
        logger.info(
            f"[LLMClient] Completion in {duration:.1f}s, tokens: {tokens}, "
            f"response: {content[:100]}"
        )
        return content

    def _record(self, model: str, start_time: float, status: str) -> float:
        duration = time.perf_counter() - start_time
        LLM_API_CALL_DURATION_SECONDS.labels(model=model).observe(duration)
        LLM_API_CALLS_TOTAL.labels(model=model, status=status).inc()
        return duration
