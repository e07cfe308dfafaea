"""
AI-powered insight generator for assessment results.

Generates a short personalized write-up for a founder profile. Any
provider failure is absorbed and replaced by a fixed fallback text.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from common.ai.base import AIProvider
from pulse.assessment.archetypes import Archetype
from pulse.assessment.models import ScoreVector

logger = logging.getLogger(__name__)


FALLBACK_TEXT = "We're generating personalized insights for you. Check back in a moment."


@dataclass(frozen=True)
class InsightResult:
    """Generated insight text, or the fallback when generation failed."""
    text: str
    is_fallback: bool = False

    @classmethod
    def fallback(cls) -> "InsightResult":
        return cls(text=FALLBACK_TEXT, is_fallback=True)


class InsightGenerator:
    """
    Generates AI-powered insights from a profile and its archetype.
    Never raises: callers always receive an InsightResult.
    """

    MIN_INSIGHT_LENGTH = 50

    PROMPT_TEMPLATE = """You are a supportive founder psychologist. A young founder (age 16-24) just completed a psychological assessment. Here are their scores (0-100, higher = more intense):

- Imposter Syndrome: {imposter_syndrome}
- Founder Doubt: {founder_doubt}
- Identity Fusion: {identity_fusion}
- Fear of Rejection: {fear_of_rejection}
- Risk Tolerance: {risk_tolerance}
- Motivation Type: {motivation_type}
- Isolation Level: {isolation_level}

Their archetype is: {archetype}

Provide:
1. A brief assessment of their psychological state (2-3 sentences)
2. 3 specific, actionable recommendations
3. 1 warning sign to watch for

Tone: Warm, supportive, non-clinical. Speak directly to the founder. Keep response under 300 words."""

    def __init__(
        self,
        ai_client: Optional[AIProvider],
        timeout_seconds: float = 3.0,
        max_tokens: int = 500
    ):
        """
        Initialize InsightGenerator.

        Args:
            ai_client: AI provider, or None to always use the fallback
            timeout_seconds: Hard limit on a single generation
            max_tokens: Token cap for the reply
        """
        self._ai_client = ai_client
        self._timeout_seconds = timeout_seconds
        self._max_tokens = max_tokens

    def build_prompt(self, profile: ScoreVector, archetype: Archetype) -> str:
        """Fill the prompt template with all seven dimensions and the archetype."""
        return self.PROMPT_TEMPLATE.format(
            imposter_syndrome=profile.imposterSyndrome,
            founder_doubt=profile.founderDoubt,
            identity_fusion=profile.identityFusion,
            fear_of_rejection=profile.fearOfRejection,
            risk_tolerance=profile.riskTolerance,
            motivation_type=profile.motivationType,
            isolation_level=profile.isolationLevel,
            archetype=archetype.name,
        )

    async def generate(self, profile: ScoreVector, archetype: Archetype) -> InsightResult:
        """
        Generate insight text for a profile.

        Args:
            profile: The founder's ScoreVector
            archetype: The classified archetype

        Returns:
            InsightResult; is_fallback is True when the provider was
            unavailable, timed out, failed, or returned too little text
        """
        if not self._ai_client:
            return InsightResult.fallback()

        try:
            text = await asyncio.wait_for(
                self._ai_client.complete(
                    self.build_prompt(profile, archetype),
                    max_tokens=self._max_tokens,
                    temperature=0.7,
                ),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(f"AI insight generation timed out after {self._timeout_seconds}s")
            return InsightResult.fallback()
        except Exception as e:
            logger.warning(f"AI insight generation failed: {e}")
            return InsightResult.fallback()

        text = (text or "").strip()
        if len(text) < self.MIN_INSIGHT_LENGTH:
            logger.warning("AI insight generation returned insufficient content")
            return InsightResult.fallback()

        return InsightResult(text=text)
