"""
FastAPI dependencies for the assessment system.

Provides dependency injection for assessment-related services.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.ai.base import AIProvider
from pulse.assessment.services.archetype_classifier import ArchetypeClassifier
from pulse.assessment.services.assessment_service import AssessmentService
from pulse.assessment.services.insight_generator import InsightGenerator
from pulse.assessment.services.score_calculator import ScoreCalculator


_score_calculator: Optional[ScoreCalculator] = None
_archetype_classifier: Optional[ArchetypeClassifier] = None
_assessment_service: Optional[AssessmentService] = None
_insight_generator: Optional[InsightGenerator] = None


def init_assessment_services(
    db: AsyncIOMotorDatabase,
    ai_client: Optional[AIProvider] = None,
    insight_timeout: float = 3.0,
    insight_max_tokens: int = 500
) -> None:
    """
    Initialize assessment services with database connection.

    Called once at application startup.

    Args:
        db: MongoDB database connection
        ai_client: Optional AI client for insight generation
        insight_timeout: Seconds before insight generation falls back
        insight_max_tokens: Token cap for generated insights
    """
    global _score_calculator, _archetype_classifier, _assessment_service, _insight_generator

    _score_calculator = ScoreCalculator()
    _archetype_classifier = ArchetypeClassifier()
    _assessment_service = AssessmentService(db=db)
    _insight_generator = InsightGenerator(
        ai_client=ai_client,
        timeout_seconds=insight_timeout,
        max_tokens=insight_max_tokens
    )


def get_score_calculator() -> ScoreCalculator:
    if _score_calculator is None:
        raise RuntimeError("Assessment services not initialized. Call init_assessment_services first.")
    return _score_calculator


def get_archetype_classifier() -> ArchetypeClassifier:
    if _archetype_classifier is None:
        raise RuntimeError("Assessment services not initialized. Call init_assessment_services first.")
    return _archetype_classifier


def get_assessment_service() -> AssessmentService:
    """Get assessment service instance."""
    if _assessment_service is None:
        raise RuntimeError("Assessment services not initialized. Call init_assessment_services first.")
    return _assessment_service


def get_insight_generator() -> InsightGenerator:
    """Get insight generator instance."""
    if _insight_generator is None:
        raise RuntimeError("Assessment services not initialized. Call init_assessment_services first.")
    return _insight_generator
