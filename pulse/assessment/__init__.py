"""
Assessment System

Scores the 25-question founder questionnaire into a 7-dimension profile,
classifies it into one of eight archetypes and generates AI insights.
"""

from pulse.assessment.services.score_calculator import ScoreCalculator
from pulse.assessment.services.archetype_classifier import ArchetypeClassifier
from pulse.assessment.services.insight_generator import InsightGenerator, InsightResult
from pulse.assessment.services.assessment_service import AssessmentService

__all__ = [
    "ScoreCalculator",
    "ArchetypeClassifier",
    "InsightGenerator",
    "InsightResult",
    "AssessmentService",
]
