"""Bootstrap and per-click analysis workflow for ReviewSense."""

import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from ..core.config import settings
from ..core.constants import TelemetryConstants, UIConstants
from ..core.exceptions import DatasetError, ReviewSenseError
from ..core.interpretation import interpret
from ..core.models import AnalysisRecord, Interpretation, ReviewDataset
from ..services.classifier import SentimentClassifier
from ..services.credentials import CredentialStore
from ..services.dataset import load_reviews
from ..services.telemetry import TelemetrySink
from .view import AnalysisView

logger = logging.getLogger(__name__)


class BootstrapState(Enum):
    IDLE = "idle"
    LOADING_DATASET = "loading-dataset"
    LOADING_MODEL = "loading-model"
    READY = "ready"
    FAILED = "bootstrap-failed"


class AnalysisStage(Enum):
    IDLE = "idle"
    SAMPLING = "sampling"
    CLASSIFYING = "classifying"
    INTERPRETING = "interpreting"
    RENDERING = "rendering"
    LOGGING = "logging"


def _new_session_id() -> str:
    return f"{TelemetryConstants.SESSION_PREFIX}{int(time.time() * 1000)}"


@dataclass
class SessionContext:
    """Everything one user session owns: dataset, model, credential."""
    classifier: SentimentClassifier
    dataset_location: str = ""
    dataset: Optional[ReviewDataset] = None
    credential: Optional[str] = None
    credential_store: Optional[CredentialStore] = None
    session_id: str = field(default_factory=_new_session_id)
    user_id: Optional[str] = None
    page_url: str = ""
    user_agent: str = ""
    history: List[AnalysisRecord] = field(default_factory=list)

    @classmethod
    def from_settings(cls, *, pipeline_factory=None, credential_store: Optional[CredentialStore] = None,
                      **overrides) -> "SessionContext":
        model_id = overrides.pop("model_id", None) or settings.model_id
        dataset_location = overrides.pop("dataset_location", None) or settings.dataset_path
        classifier = SentimentClassifier(model_id, pipeline_factory=pipeline_factory)
        return cls(
            classifier=classifier,
            dataset_location=dataset_location,
            credential_store=credential_store,
            **overrides,
        )

    @property
    def telemetry_user(self) -> str:
        return self.user_id or self.session_id


class WorkflowController:
    """Drives the bootstrap track once and the analysis track per command.

    Front ends call :meth:`start` when the page is ready, then
    :meth:`on_analyze_requested` and :meth:`on_credential_changed` in
    response to user input. The disabled action control is the only guard
    against overlapping analysis runs.
    """

    def __init__(
        self,
        context: SessionContext,
        view: AnalysisView,
        *,
        loader: Callable[[str], ReviewDataset] = load_reviews,
        telemetry: Optional[TelemetrySink] = None,
        rng: Optional[random.Random] = None,
    ):
        self.context = context
        self.view = view
        self.loader = loader
        self.telemetry = telemetry
        self.rng = rng or random.Random()
        self.bootstrap_state = BootstrapState.IDLE
        self.stage = AnalysisStage.IDLE
        self.running = False

    # ---- Bootstrap track ----

    def start(self) -> BootstrapState:
        """Restore the stored credential, then bootstrap."""
        self.restore_credential()
        return self.bootstrap()

    def restore_credential(self) -> Optional[str]:
        store = self.context.credential_store
        if store is None:
            return None
        stored = store.load()
        if stored:
            self.context.credential = stored
            self.view.set_credential(stored)
        return stored

    def bootstrap(self) -> BootstrapState:
        if self.bootstrap_state is not BootstrapState.IDLE:
            return self.bootstrap_state

        self.view.set_action_enabled(False)
        try:
            self.bootstrap_state = BootstrapState.LOADING_DATASET
            self.view.set_status(UIConstants.MSG_FETCHING_DATASET, "loading")
            self.context.dataset = self.loader(self.context.dataset_location)
            logger.info(f"[Bootstrap] Dataset ready: {len(self.context.dataset)} reviews")

            self.bootstrap_state = BootstrapState.LOADING_MODEL
            self.view.set_status(UIConstants.MSG_INITIALIZING_MODEL, "loading")
            classifier = self.context.classifier
            if self.context.credential and not classifier.token:
                classifier.token = self.context.credential
            classifier.initialize()
        except Exception as e:
            self._fail_bootstrap(e)
            return self.bootstrap_state

        self.bootstrap_state = BootstrapState.READY
        self.view.set_status(UIConstants.MSG_MODEL_READY, "success")
        self.view.set_action_enabled(True)
        return self.bootstrap_state

    def _fail_bootstrap(self, error: Exception) -> None:
        if isinstance(error, DatasetError):
            message = f"Dataset loading error: {error}"
        elif isinstance(error, ReviewSenseError):
            message = str(error)
        else:
            message = f"Unexpected startup error: {error}"

        logger.error(f"[Bootstrap] Failed: {message}")
        self.bootstrap_state = BootstrapState.FAILED
        self.view.show_error(message)
        self.view.set_status(UIConstants.MSG_STARTUP_FAILED, "danger")
        self.view.set_action_enabled(False)

    @property
    def ready(self) -> bool:
        return self.bootstrap_state is BootstrapState.READY

    # ---- Analysis track ----

    def on_analyze_requested(self) -> Optional[Interpretation]:
        """Run one analysis; return its interpretation, or None on failure."""
        self.view.hide_error()

        if not self.ready or self.context.dataset is None:
            self.view.show_error(UIConstants.MSG_DATASET_MISSING)
            return None

        self.running = True
        self.view.set_action_enabled(False)
        self.view.set_loading(True)
        self.view.hide_result()
        try:
            self.stage = AnalysisStage.SAMPLING
            review = self.context.dataset.sample(self.rng)
            self.view.show_review(review)

            self.stage = AnalysisStage.CLASSIFYING
            prediction = self.context.classifier.classify(review)

            self.stage = AnalysisStage.INTERPRETING
            interpretation = interpret(prediction)

            self.stage = AnalysisStage.RENDERING
            self.view.show_result(interpretation)
            self.context.history.append(
                AnalysisRecord(review=review, interpretation=interpretation, timestamp=time.time())
            )

            self.stage = AnalysisStage.LOGGING
            self._log_event(review, interpretation)
        except Exception as e:
            logger.error(f"Analysis failed during {self.stage.value}: {e}")
            self.view.show_error(f"Analysis failed: {e}")
            return None
        finally:
            self.stage = AnalysisStage.IDLE
            self.running = False
            self.view.set_action_enabled(True)
            self.view.set_loading(False)

        return interpretation

    def _log_event(self, review: str, interpretation: Interpretation) -> None:
        if self.telemetry is None:
            return
        try:
            event = self.telemetry.build_event(
                review,
                interpretation,
                user_id=self.context.telemetry_user,
                url=self.context.page_url,
                user_agent=self.context.user_agent,
            )
            self.telemetry.send(event)
        except Exception as e:
            logger.error(f"[Sheets] Telemetry dropped: {e}")

    # ---- Credential ----

    def on_credential_changed(self, value: str) -> None:
        token = (value or "").strip()
        self.context.credential = token
        self.view.set_credential(token)
        if token and self.context.credential_store is not None:
            self.context.credential_store.save(token)
