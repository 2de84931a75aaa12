"""ReviewSense - sentiment analysis of sampled product reviews."""

__version__ = "0.1.0"
__author__ = "ReviewSense Team"

from .core.models import *
from .core.config import settings
from .services.classifier import SentimentClassifier
from .services.telemetry import TelemetrySink
from .workflow.controller import SessionContext, WorkflowController

__all__ = [
    "settings",
    "SentimentClassifier",
    "TelemetrySink",
    "SessionContext",
    "WorkflowController",
]
