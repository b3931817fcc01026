"""Domain errors and failure typing."""


class PipelineError(Exception):
    """Base class for scrape run failures."""

    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class StageError(PipelineError):
    """Raised for failures that abort the run."""

    error_code = "STAGE_ERROR"


class SessionError(StageError):
    """Raised when the search page is requested without a portal session."""

    error_code = "SESSION_ERROR"


class StorageError(PipelineError):
    """Raised when a record cannot be written to the database."""

    error_code = "STORAGE_ERROR"
