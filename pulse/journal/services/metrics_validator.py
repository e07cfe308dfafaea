"""
Journal input validation.
"""

from typing import Any, Dict, Optional

from common.utils.exceptions import ValidationException


class MetricsValidator:
    """
    Checks mood, energy and stress are integers in [0, 100] and that notes
    fit in 500 characters once trimmed.

    validate() and validate_notes() return an error message or None;
    check() raises on the first error.
    """

    METRICS = ("mood", "energy", "stress")
    MIN_VALUE = 0
    MAX_VALUE = 100
    MAX_NOTES_LENGTH = 500

    @classmethod
    def validate(cls, metrics: Dict[str, Any]) -> Optional[str]:
        for metric in cls.METRICS:
            value = metrics.get(metric)
            if value is None:
                return f"Missing required field: {metric}"
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                return f"Field '{metric}' must be an integer"
            if not cls.MIN_VALUE <= value <= cls.MAX_VALUE:
                return f"Field '{metric}' must be between {cls.MIN_VALUE} and {cls.MAX_VALUE}"
        return None

    @classmethod
    def validate_notes(cls, notes: Optional[str]) -> Optional[str]:
        if notes is None:
            return None
        if not isinstance(notes, str):
            return "Notes must be a string"
        if len(notes.strip()) > cls.MAX_NOTES_LENGTH:
            return f"Notes cannot exceed {cls.MAX_NOTES_LENGTH} characters"
        return None

    @classmethod
    def check(cls, metrics: Dict[str, Any], notes: Optional[str] = None) -> None:
        """
        Raises:
            ValidationException: The first failing rule
        """
        error = cls.validate(metrics) or cls.validate_notes(notes)
        if error:
            raise ValidationException(message=error)
