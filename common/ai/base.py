"""
AI text provider interface.

Insight generation depends only on this contract, so the backing service
(Groq, Claude or OpenAI) is a configuration choice.
"""

from abc import ABC, abstractmethod
from typing import Optional


class AIProvider(ABC):
    """A single-turn text completion service."""

    name: str = "ai"

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = 500,
        temperature: float = 0.7,
    ) -> str:
        """
        Complete one prompt.

        Args:
            prompt: The full user prompt
            system_prompt: Optional instructions sent separately from the prompt
            max_tokens: Reply length cap
            temperature: Sampling temperature (0-1)

        Returns:
            Reply text, possibly empty

        Raises:
            Any client error; callers decide whether to absorb it
        """
