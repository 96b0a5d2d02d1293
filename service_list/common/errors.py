"""Domain errors and failure typing."""


class PipelineError(Exception):
    """Base class for pipeline failures."""

    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class SourceReadError(PipelineError):
    """Raised when the upstream export is missing or cannot be parsed."""

    error_code = "SOURCE_READ_ERROR"


class WriteError(PipelineError):
    """Raised when the transformed services cannot be persisted."""

    error_code = "WRITE_ERROR"
