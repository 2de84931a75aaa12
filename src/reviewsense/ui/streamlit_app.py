"""Streamlit UI for ReviewSense."""

import streamlit as st
import logging

from reviewsense.core.config import settings
from reviewsense.core.constants import StorageConstants, UIConstants
from reviewsense.core.models import SentimentCategory
from reviewsense.services.credentials import CredentialStore
from reviewsense.services.telemetry import TelemetrySink
from reviewsense.workflow.controller import BootstrapState, SessionContext, WorkflowController
from reviewsense.workflow.view import ViewState

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def _cached_pipeline(task: str, model: str, token: str = None):
    """Load the transformers pipeline once per process."""
    from transformers import pipeline

    kwargs = {"model": model}
    if token:
        kwargs["token"] = token
    return pipeline(task, **kwargs)


def _pipeline_factory(task, **kwargs):
    return _cached_pipeline(task, kwargs["model"], kwargs.get("token"))


def _icon(icon_id: str) -> str:
    return UIConstants.ICON_EMOJI.get(icon_id, "")


def _new_controller() -> WorkflowController:
    headers = st.context.headers
    host = headers.get("Host", "")
    context = SessionContext.from_settings(
        pipeline_factory=_pipeline_factory,
        credential_store=CredentialStore(),
        page_url=f"http://{host}/" if host else "",
        user_agent=headers.get("User-Agent", ""),
    )
    return WorkflowController(context, ViewState(), telemetry=TelemetrySink())


def _on_token_input():
    st.session_state.controller.on_credential_changed(
        st.session_state.get(StorageConstants.CREDENTIAL_KEY, "")
    )


def render_status(view: ViewState):
    text = f"{_icon(view.status_icon)} {view.status_message}"
    if view.status_category == "success":
        st.success(text)
    elif view.status_category == "danger":
        st.error(text)
    else:
        st.info(text)


def render_result(view: ViewState):
    if not view.result_visible or view.result is None:
        return
    result = view.result
    st.subheader(f"{_icon(result.icon)} {result.label}")
    st.caption(f"Confidence Score: {result.confidence_percent}")
    st.progress(min(1.0, max(0.0, result.score)))
    if result.category is SentimentCategory.NEUTRAL:
        st.caption("Model confidence too low for a polar verdict")


# Page configuration
st.set_page_config(
    page_title="ReviewSense — Sentiment Analyzer",
    page_icon="🧠",
    layout="centered"
)

if "controller" not in st.session_state:
    st.session_state.controller = _new_controller()
    restored = st.session_state.controller.restore_credential()
    if restored:
        st.session_state[StorageConstants.CREDENTIAL_KEY] = restored

controller: WorkflowController = st.session_state.controller
view: ViewState = controller.view

st.title("🧠 ReviewSense — Review Sentiment Analyzer")
st.write("Pick a random product review and classify its sentiment with a pretrained model.")

with st.sidebar:
    st.header("🔑 Hugging Face")
    st.text_input(
        "API Token (optional)",
        type="password",
        key=StorageConstants.CREDENTIAL_KEY,
        on_change=_on_token_input,
        help="Stored locally and used to download the model",
    )
    st.caption(f"Model: `{settings.model_id}`")
    st.caption(f"Dataset: `{settings.dataset_path}`")

status_slot = st.empty()
error_slot = st.empty()


def _paint_status(current: ViewState):
    with status_slot.container():
        render_status(current)


if controller.bootstrap_state is BootstrapState.IDLE:
    # Slots belong to this script run; never keep the hook on the stored view.
    view.on_status = _paint_status
    try:
        controller.bootstrap()
    finally:
        view.on_status = None

run_analysis = st.button(
    "🔍 Analyze Random Review",
    type="primary",
    disabled=not view.action_enabled,
)

if run_analysis and not controller.running:
    with st.spinner("Analyzing sentiment..."):
        controller.on_analyze_requested()

with status_slot.container():
    render_status(view)

if view.error_visible:
    error_slot.error(view.error_message)

if view.review_text:
    st.markdown("**Review**")
    st.info(view.review_text)

render_result(view)
