"""
Questionnaire scoring.

Turns 25 categorical answers into the 7-dimension founder profile.
"""

import logging
from dataclasses import dataclass
from fractions import Fraction
from math import floor
from typing import Dict, List, Sequence, Tuple

from common.utils.exceptions import ValidationException
from pulse.assessment.models import NUMERIC_DIMENSIONS, ScoreVector

logger = logging.getLogger(__name__)


INTRINSIC = "intrinsic"
EXTRINSIC = "extrinsic"

ANSWER_POINTS: Dict[str, int] = {"A": 0, "B": 33, "C": 67, "D": 100}

LIKERT_OPTIONS: Dict[str, str] = {
    "A": "Strongly Disagree",
    "B": "Disagree",
    "C": "Agree",
    "D": "Strongly Agree",
}


@dataclass(frozen=True)
class Question:
    """One questionnaire item and where its answer is counted."""
    id: int
    dimension: str
    text: str
    points: Tuple[Tuple[str, int], ...] = tuple(ANSWER_POINTS.items())

    def contribution(self, answer: str) -> int:
        return dict(self.points)[answer]

    @property
    def max_contribution(self) -> int:
        return max(value for _, value in self.points)


QUIZ_QUESTIONS: Tuple[Question, ...] = (
    # Imposter Syndrome (Q1-5)
    Question(1, "imposterSyndrome", "I feel like a fraud despite my achievements and abilities"),
    Question(2, "imposterSyndrome", "I'm afraid people will discover I'm not as competent as they think"),
    Question(3, "imposterSyndrome", "When I succeed, it feels more like luck than my own doing"),
    Question(4, "imposterSyndrome", "I often feel like I don't deserve my position as a founder"),
    Question(5, "imposterSyndrome", "I'm afraid my startup idea isn't original or good enough"),
    # Founder Doubt (Q6-9)
    Question(6, "founderDoubt", "I doubt whether my startup will actually succeed"),
    Question(7, "founderDoubt", "I question my ability to lead my company effectively"),
    Question(8, "founderDoubt", "I worry that I don't have what it takes to be an entrepreneur"),
    Question(9, "founderDoubt", "I'm unsure if I made the right decision to start this company"),
    # Identity Fusion (Q10-13)
    Question(10, "identityFusion", "My self-worth is deeply tied to my startup's success"),
    Question(11, "identityFusion", "I define myself primarily as a founder"),
    Question(12, "identityFusion", "When my business struggles, it feels like a personal failure"),
    Question(13, "identityFusion", "I struggle to separate my identity from my role as founder"),
    # Fear of Rejection (Q14-18)
    Question(14, "fearOfRejection", "I'm afraid the market will reject my product/service"),
    Question(15, "fearOfRejection", "I worry about what others think of my startup idea"),
    Question(16, "fearOfRejection", "I fear negative feedback on my business"),
    Question(17, "fearOfRejection", "I'm concerned peers or competitors will judge my startup negatively"),
    Question(18, "fearOfRejection", "I worry investors won't believe in my vision"),
    # Risk Tolerance (Q19-21)
    Question(19, "riskTolerance", "I'm comfortable making bold decisions with uncertain outcomes"),
    Question(20, "riskTolerance", "I embrace uncertainty as a necessary part of entrepreneurship"),
    Question(21, "riskTolerance", "I'm willing to take calculated risks for potentially big rewards"),
    # Motivation Type (Q22-24)
    Question(22, INTRINSIC, "I'm driven primarily by my passion for solving this problem"),
    Question(23, EXTRINSIC, "I'm motivated by the potential financial rewards"),
    Question(24, EXTRINSIC, "I'm driven by external validation and recognition"),
    # Isolation (Q25)
    Question(25, "isolationLevel", "I feel isolated or lonely as a founder"),
)


def _round_half_up(value: Fraction) -> int:
    return floor(value + Fraction(1, 2))


class ScoreCalculator:
    """
    Maps a 25-answer questionnaire to a ScoreVector.

    Each dimension score is the raw sum of its questions' contributions
    normalized against the maximum attainable sum, on a 0-100 scale.
    Motivation compares the mean intrinsic-leaning contribution against the
    mean extrinsic-leaning one.
    """

    QUESTION_COUNT = 25
    VALID_ANSWERS = tuple(ANSWER_POINTS)
    MOTIVATION_MARGIN = 10

    def __init__(self, questions: Sequence[Question] = QUIZ_QUESTIONS):
        if len(questions) != self.QUESTION_COUNT:
            raise ValueError(f"Question table must have {self.QUESTION_COUNT} rows")
        self._questions = tuple(questions)

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @classmethod
    def validate_answers(cls, answers: Sequence[str]) -> None:
        """
        Check the answer set shape.

        Raises:
            ValidationException: Not a list, wrong length, or unknown code
        """
        if not isinstance(answers, (list, tuple)):
            raise ValidationException(message="Answers must be a list")

        if len(answers) != cls.QUESTION_COUNT:
            raise ValidationException(
                message=f"Exactly {cls.QUESTION_COUNT} answers required",
                details={"received": len(answers)},
            )

        for position, answer in enumerate(answers, start=1):
            if answer not in cls.VALID_ANSWERS:
                raise ValidationException(
                    message=f"Invalid answer at position {position}: must be A, B, C, or D",
                    details={"position": position},
                )

    def compute(self, answers: Sequence[str]) -> ScoreVector:
        """
        Score a complete answer set.

        Args:
            answers: 25 answer codes in question order

        Returns:
            ScoreVector with every numeric dimension in [0, 100]

        Raises:
            ValidationException: Malformed answer set
        """
        self.validate_answers(answers)

        raw: Dict[str, int] = {}
        attainable: Dict[str, int] = {}
        for question, answer in zip(self._questions, answers):
            raw[question.dimension] = raw.get(question.dimension, 0) + question.contribution(answer)
            attainable[question.dimension] = (
                attainable.get(question.dimension, 0) + question.max_contribution
            )

        scores = {
            dimension: self._normalize(raw.get(dimension, 0), attainable.get(dimension, 0))
            for dimension in NUMERIC_DIMENSIONS
        }
        scores["motivationType"] = self._motivation_type(answers)

        logger.debug(f"Computed profile scores: {scores}")
        return ScoreVector(**scores)

    def _normalize(self, raw: int, attainable: int) -> int:
        if attainable <= 0:
            return 0
        score = _round_half_up(Fraction(raw * 100, attainable))
        return max(0, min(100, score))

    def _motivation_type(self, answers: Sequence[str]) -> str:
        intrinsic: List[int] = []
        extrinsic: List[int] = []
        for question, answer in zip(self._questions, answers):
            if question.dimension == INTRINSIC:
                intrinsic.append(question.contribution(answer))
            elif question.dimension == EXTRINSIC:
                extrinsic.append(question.contribution(answer))

        intrinsic_total = Fraction(sum(intrinsic), len(intrinsic)) if intrinsic else Fraction(0)
        extrinsic_total = Fraction(sum(extrinsic), len(extrinsic)) if extrinsic else Fraction(0)

        if intrinsic_total - extrinsic_total > self.MOTIVATION_MARGIN:
            return "intrinsic"
        if extrinsic_total - intrinsic_total > self.MOTIVATION_MARGIN:
            return "extrinsic"
        return "mixed"
