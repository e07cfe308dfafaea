"""
OpenAI-compatible provider.

Serves both OpenAI and Groq: Groq exposes the same chat completions API
at https://api.groq.com/openai/v1, so only the base URL and model differ.
"""

from typing import Dict, List, Optional

from openai import AsyncOpenAI

from common.ai.base import AIProvider


class OpenAIProvider(AIProvider):
    """Completes prompts with a chat completions endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        name: str = "openai",
    ):
        """
        Args:
            api_key: Key for the endpoint
            model: Chat model
            base_url: Alternative endpoint, e.g. Groq
            timeout: Per-request timeout in seconds
            name: Provider label used in logs
        """
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0, timeout=timeout)
        self.model = model
        self.name = name

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = 500,
        temperature: float = 0.7,
    ) -> str:
        messages: List[Dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        return response.choices[0].message.content or ""
