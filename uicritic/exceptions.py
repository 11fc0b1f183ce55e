class AnalysisError(Exception):
    """Raised when an image analysis request cannot be completed.

    ``stage`` is set by the pipeline to the stage that failed.
    """

    stage: str | None = None


class ValidationError(AnalysisError):
    """Raised when a required request field is missing or empty."""


class ResourceFetchError(AnalysisError):
    """Raised when the remote image is unreachable or returns a non-2xx status."""


class ModelInvocationError(AnalysisError):
    """Raised when the generative model call fails for any upstream reason."""

    def __init__(self, message: str, code: int | None = None, status: str | None = None):
        super().__init__(message)
        self.code = code
        self.status = status


class EmptyCompletionError(AnalysisError):
    """Raised when the model answered but produced no extractable text."""


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing."""
