"""
Anthropic Claude provider.
"""

from typing import Any, Dict, Optional

from anthropic import AsyncAnthropic

from common.ai.base import AIProvider


class ClaudeProvider(AIProvider):
    """Completes prompts with the Anthropic Messages API."""

    name = "claude"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        timeout: float = 10.0,
    ):
        self.client = AsyncAnthropic(api_key=api_key, max_retries=0, timeout=timeout)
        self.model = model

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = 500,
        temperature: float = 0.7,
    ) -> str:
        request: Dict[str, Any] = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system_prompt:
            request["system"] = system_prompt

        response = await self.client.messages.create(**request)
        return "".join(block.text for block in response.content if block.type == "text")
