"""Services for ReviewSense."""

from .dataset import load_reviews
from .classifier import ClassifierState, SentimentClassifier
from .telemetry import TelemetrySink
from .credentials import CredentialStore

__all__ = [
    "load_reviews",
    "ClassifierState",
    "SentimentClassifier",
    "TelemetrySink",
    "CredentialStore",
]
