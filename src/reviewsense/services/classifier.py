"""Sentiment classifier wrapping a Hugging Face text-classification pipeline."""

import logging
from enum import Enum
from typing import Callable, Optional

from ..core.constants import ModelConstants
from ..core.exceptions import InferenceError, InitializationError, NotInitializedError
from ..core.models import ClassificationResult

logger = logging.getLogger(__name__)


class ClassifierState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"


class SentimentClassifier:
    """Pretrained sentiment model with an explicit initialize/classify lifecycle.

    ``classify`` is only available once ``initialize`` has succeeded. The
    pipeline factory defaults to :func:`transformers.pipeline` and can be
    swapped out so callers (and tests) control how the model is acquired.
    """

    def __init__(
        self,
        model_id: str = ModelConstants.DEFAULT_MODEL_ID,
        *,
        pipeline_factory=None,
        token: Optional[str] = None,
        on_state_change: Optional[Callable[[ClassifierState], None]] = None,
    ) -> None:
        self.model_id = model_id
        self.token = token
        self._pipeline_factory = pipeline_factory
        self._on_state_change = on_state_change
        self._pipeline = None
        self._state = ClassifierState.UNINITIALIZED

    @property
    def state(self) -> ClassifierState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is ClassifierState.READY

    def _set_state(self, state: ClassifierState) -> None:
        self._state = state
        if self._on_state_change is not None:
            self._on_state_change(state)

    def initialize(self) -> ClassifierState:
        """Acquire the model. Slow on first use while weights download."""
        if self.is_ready:
            return self._state

        self._set_state(ClassifierState.INITIALIZING)
        factory = self._pipeline_factory
        try:
            if factory is None:
                from transformers import pipeline

                factory = pipeline

            kwargs = {"model": self.model_id}
            if self.token:
                kwargs["token"] = self.token
            self._pipeline = factory(ModelConstants.TASK, **kwargs)
        except Exception as e:
            self._pipeline = None
            self._set_state(ClassifierState.FAILED)
            raise InitializationError(
                f"Classifier initialization failed: {e}",
                context={"model_id": self.model_id},
            ) from e

        self._set_state(ClassifierState.READY)
        logger.info(f"[Model] Initialization complete: {self.model_id}")
        return self._state

    def classify(self, text: str) -> ClassificationResult:
        """Return the top-ranked label/score pair for ``text``."""
        if not self.is_ready:
            raise NotInitializedError("Classifier not initialized")

        try:
            results = self._pipeline(text)
        except Exception as e:
            raise InferenceError(f"Model inference failed: {e}") from e

        if isinstance(results, dict):
            results = [results]
        if not results:
            raise InferenceError("Model returned no predictions")

        top = results[0]
        try:
            return ClassificationResult(label=str(top["label"]), score=float(top["score"]))
        except (KeyError, TypeError, ValueError) as e:
            raise InferenceError(f"Unexpected model output: {top!r}") from e
