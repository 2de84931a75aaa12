"""Core modules for ReviewSense."""

from .models import *
from .config import settings
from .exceptions import *
from .interpretation import interpret, interpret_label, format_confidence

__all__ = [
    "settings",
    "SentimentCategory",
    "ReviewDataset",
    "ClassificationResult",
    "Interpretation",
    "TelemetryEvent",
    "AnalysisRecord",
    "interpret",
    "interpret_label",
    "format_confidence",
]
