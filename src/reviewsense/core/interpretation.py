"""Map a model label/score pair onto a display category."""

from .constants import ThresholdConstants, UIConstants
from .models import ClassificationResult, Interpretation, SentimentCategory, format_confidence


def interpret_label(label: str, score: float) -> Interpretation:
    """Classify a label/score pair as positive, negative or neutral.

    Only the two known labels with a score strictly above the threshold get
    a polar category. Every other label, and any score at or below the
    threshold, is neutral. The score is carried through untouched.
    """
    threshold = ThresholdConstants.CONFIDENCE_THRESHOLD
    if label == ThresholdConstants.POSITIVE_LABEL and score > threshold:
        return Interpretation(
            category=SentimentCategory.POSITIVE,
            label=ThresholdConstants.POSITIVE_LABEL,
            score=score,
            icon=UIConstants.POSITIVE_ICON,
        )
    if label == ThresholdConstants.NEGATIVE_LABEL and score > threshold:
        return Interpretation(
            category=SentimentCategory.NEGATIVE,
            label=ThresholdConstants.NEGATIVE_LABEL,
            score=score,
            icon=UIConstants.NEGATIVE_ICON,
        )
    return Interpretation(
        category=SentimentCategory.NEUTRAL,
        label=ThresholdConstants.NEUTRAL_LABEL,
        score=score,
        icon=UIConstants.NEUTRAL_ICON,
    )


def interpret(result: ClassificationResult) -> Interpretation:
    return interpret_label(result.label, result.score)
