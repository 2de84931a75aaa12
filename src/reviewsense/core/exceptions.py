"""Error taxonomy for ReviewSense."""

from typing import Any, Dict, Optional


class ReviewSenseError(Exception):
    """Base exception for all ReviewSense errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        recoverable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._get_default_error_code()
        self.context: Dict[str, Any] = context or {}
        self.recoverable = recoverable

    def _get_default_error_code(self) -> str:
        return "REVIEWSENSE_ERROR"

    def add_context(self, key: str, value: Any) -> "ReviewSenseError":
        if key:
            self.context[key] = value
        return self

    def __str__(self) -> str:
        return self.message or ""


# Dataset loading (bootstrap track)

class DatasetError(ReviewSenseError):
    def _get_default_error_code(self) -> str:
        return "DATASET_ERROR"


class FetchError(DatasetError):
    """Dataset resource unreachable or answered with a non-success status."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code

    def _get_default_error_code(self) -> str:
        return "FETCH_ERROR"


class ParseError(DatasetError):
    def _get_default_error_code(self) -> str:
        return "PARSE_ERROR"


class EmptyDatasetError(DatasetError):
    def _get_default_error_code(self) -> str:
        return "EMPTY_DATASET"


# Classifier lifecycle

class ClassifierError(ReviewSenseError):
    def _get_default_error_code(self) -> str:
        return "CLASSIFIER_ERROR"


class InitializationError(ClassifierError):
    def _get_default_error_code(self) -> str:
        return "INITIALIZATION_ERROR"


class NotInitializedError(ClassifierError):
    def _get_default_error_code(self) -> str:
        return "NOT_INITIALIZED"


class InferenceError(ClassifierError):
    """Runtime failure of the underlying model call; scoped to one run."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("recoverable", True)
        super().__init__(message, **kwargs)

    def _get_default_error_code(self) -> str:
        return "INFERENCE_ERROR"


class TelemetryError(ReviewSenseError):
    """Delivery failure. Never leaves the telemetry sink."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("recoverable", True)
        super().__init__(message, **kwargs)

    def _get_default_error_code(self) -> str:
        return "TELEMETRY_ERROR"
