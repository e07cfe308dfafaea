"""
AI module - Pluggable AI providers (Groq/OpenAI-compatible, Claude).
"""

from common.ai.base import AIProvider
from common.ai.claude import ClaudeProvider
from common.ai.openai import OpenAIProvider

__all__ = ["AIProvider", "ClaudeProvider", "OpenAIProvider"]
