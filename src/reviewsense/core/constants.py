"""Constants and configuration values for ReviewSense."""

# Interpretation Constants
class ThresholdConstants:
    """Constants for turning a label/score pair into a category."""

    CONFIDENCE_THRESHOLD = 0.5  # strict: a score of exactly 0.5 is neutral
    POSITIVE_LABEL = "POSITIVE"
    NEGATIVE_LABEL = "NEGATIVE"
    NEUTRAL_LABEL = "NEUTRAL"

# UI Constants
class UIConstants:
    """Icons and messages shown on the analysis page."""

    STATUS_ICONS = {
        "loading": "fa-spinner fa-pulse",
        "success": "fa-check-circle",
        "danger": "fa-exclamation-triangle",
    }

    # Streamlit has no Font Awesome, so the page maps icon ids to emoji
    ICON_EMOJI = {
        "fa-spinner fa-pulse": "⏳",
        "fa-check-circle": "✅",
        "fa-exclamation-triangle": "⚠️",
        "fa-thumbs-up": "👍",
        "fa-thumbs-down": "👎",
        "fa-meh": "😐",
    }

    POSITIVE_ICON = "fa-thumbs-up"
    NEGATIVE_ICON = "fa-thumbs-down"
    NEUTRAL_ICON = "fa-meh"

    MSG_FETCHING_DATASET = "Fetching review dataset..."
    MSG_INITIALIZING_MODEL = "Initializing AI classifier (may take ~60 seconds first time)..."
    MSG_MODEL_READY = "AI classifier ready! Click button to analyze."
    MSG_STARTUP_FAILED = "Application startup failed. Refresh to retry."
    MSG_DATASET_MISSING = "Dataset not loaded. Please refresh page."

# Telemetry Constants
class TelemetryConstants:
    """Constants for the spreadsheet logging endpoint."""

    DEFAULT_ENDPOINT = (
        "https://script.google.com/macros/s/"
        "AKfycbyk3-wEI1sI5WmvflYV5CP0YsEklSV9NOuuGyPapa6V56PSefKYIHyLIf-ZhNXKmoR7/exec"
    )
    EVENT_NAME = "sentiment_analysis"
    VARIANT = "A"
    ANONYMOUS_USER = "anonymous"
    SESSION_PREFIX = "session-"
    USER_AGENT = "ReviewSense/1.0"

# Storage Constants
class StorageConstants:
    """Constants for the durable credential store."""

    CREDENTIAL_DIR = ".cache/reviewsense"
    CREDENTIAL_KEY = "hf_api_token"

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    DEFAULT_DATASET = "reviews_test.tsv"
    DEFAULT_TEXT_COLUMN = "text"
    DEFAULT_DELIMITER = "\t"
    DEFAULT_ENCODING = "utf-8"
    CONFIG_FILE = ".env.example"  # configuration template file
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Model Constants
class ModelConstants:
    """Constants for the pretrained sentiment model."""

    TASK = "text-classification"
    DEFAULT_MODEL_ID = "distilbert-base-uncased-finetuned-sst-2-english"
