"""Workflow orchestration for ReviewSense."""

from .controller import AnalysisStage, BootstrapState, SessionContext, WorkflowController
from .view import AnalysisView, ViewState

__all__ = [
    "AnalysisStage",
    "BootstrapState",
    "SessionContext",
    "WorkflowController",
    "AnalysisView",
    "ViewState",
]
