"""Configuration management for ReviewSense."""

from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import FileConstants, ModelConstants, StorageConstants, TelemetryConstants


class Settings(BaseSettings):
    """Application settings."""

    # Dataset
    dataset_path: str = Field(FileConstants.DEFAULT_DATASET, description="Path or URL of the review TSV")
    text_column: str = Field(FileConstants.DEFAULT_TEXT_COLUMN, description="Column holding review text")
    dataset_delimiter: str = Field(FileConstants.DEFAULT_DELIMITER, description="Dataset field delimiter")
    dataset_encoding: str = Field(FileConstants.DEFAULT_ENCODING, description="Dataset text encoding")

    # Model
    model_id: str = Field(ModelConstants.DEFAULT_MODEL_ID, description="Pretrained sentiment model identifier")

    # Telemetry
    telemetry_url: str = Field(TelemetryConstants.DEFAULT_ENDPOINT, description="Spreadsheet logging endpoint")
    telemetry_variant: str = Field(TelemetryConstants.VARIANT, description="Experiment variant tag")
    telemetry_event: str = Field(TelemetryConstants.EVENT_NAME, description="Telemetry event name")
    request_timeout: float = Field(10.0, description="HTTP timeout in seconds")

    # Credential storage
    credential_dir: str = Field(StorageConstants.CREDENTIAL_DIR, description="Directory of the credential store")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    class Config:
        env_prefix = "REVIEWSENSE_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
