"""
Pipeline Errors

Failure taxonomy for the name score pipeline. Only the I/O collaborators
raise these; the transformers are total over their inputs.
"""

from typing import Optional


class PipelineError(Exception):
    """Base class for failures that abort a pipeline run."""

    phase: str = "pipeline"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SourceUnavailable(PipelineError):
    """
    Raised when the name list cannot be fetched or parsed.

    Covers transport failures, non-2xx responses, bodies that are not a
    JSON array of objects, and records without a NAME field.
    """

    phase = "source"


class SinkRejected(PipelineError):
    """
    Raised when the score submission fails or is refused.

    The computed score is kept on the exception so callers can report it.
    """

    phase = "sink"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        score: Optional[int] = None,
    ):
        super().__init__(message, status_code=status_code, body=body)
        self.score = score


__all__ = [
    "PipelineError",
    "SourceUnavailable",
    "SinkRejected",
]
