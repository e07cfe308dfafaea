"""
Assessment pipeline functions.

Stateless orchestration logic for assessment submission and retrieval.
"""

import logging
from typing import Any, Dict, List, Optional

from pulse.assessment.archetypes import get_archetype
from pulse.assessment.services.archetype_classifier import ArchetypeClassifier, recommendations_for
from pulse.assessment.services.assessment_service import AssessmentService
from pulse.assessment.services.insight_generator import InsightGenerator
from pulse.assessment.services.score_calculator import ScoreCalculator

logger = logging.getLogger(__name__)


async def submit_assessment_pipeline(
    score_calculator: ScoreCalculator,
    archetype_classifier: ArchetypeClassifier,
    insight_generator: InsightGenerator,
    assessment_service: AssessmentService,
    user_id: str,
    answers: List[str]
) -> Dict[str, Any]:
    """
    Orchestrates the assessment submission flow.

    Args:
        score_calculator: For answer scoring
        archetype_classifier: For archetype classification
        insight_generator: For AI-generated insights
        assessment_service: For data persistence
        user_id: Current user's ID
        answers: 25 answer codes

    Returns:
        Response dict with scores, archetype, recommendations and insights

    Raises:
        ValidationException: Malformed answer set
    """
    profile = score_calculator.compute(answers)
    archetype = archetype_classifier.classify(profile)
    recommendations = recommendations_for(profile, archetype)

    insight = await insight_generator.generate(profile, archetype)

    # Fallback text is shown to the user but never stored as an insight
    saved = await assessment_service.save_assessment(
        user_id=user_id,
        answers=answers,
        profile=profile,
        archetype=archetype,
        insights=None if insight.is_fallback else insight.text
    )

    if archetype.is_urgent:
        logger.info(f"Urgent archetype assigned to user {user_id}")

    return {
        "id": str(saved["_id"]),
        "scores": profile.model_dump(),
        "archetype": archetype.to_dict(),
        "recommendations": recommendations,
        "insights": insight.text,
        "insightsFallback": insight.is_fallback,
        "createdAt": saved["createdAt"]
    }


async def get_latest_assessment_pipeline(
    assessment_service: AssessmentService,
    user_id: str
) -> Optional[Dict[str, Any]]:
    """
    Get the user's latest assessment result.

    Returns:
        Formatted assessment, or None when the user has not taken it
    """
    doc = await assessment_service.get_latest_assessment(user_id)
    if not doc:
        return None
    return _format_assessment(doc)


async def get_assessment_stats_pipeline(
    assessment_service: AssessmentService,
    user_id: str
) -> Dict[str, Any]:
    """
    Get how often the user has taken the assessment.

    Returns:
        dict with count, lastAssessment and archetype
    """
    return await assessment_service.get_stats(user_id)


def _format_assessment(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Format assessment document for API response."""
    profile = AssessmentService.profile_from_doc(doc)
    archetype = get_archetype(doc["archetype"])
    return {
        "id": str(doc["_id"]),
        "scores": profile.model_dump(),
        "archetype": archetype.to_dict(),
        "recommendations": recommendations_for(profile, archetype),
        "insights": doc.get("insights"),
        "createdAt": doc["createdAt"]
    }
