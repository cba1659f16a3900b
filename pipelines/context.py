"""
Pipeline Context

Manages pipeline execution context including run tracking, logging, and timing.
"""

from __future__ import annotations

import traceback
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

import pytz

from core.errors import PipelineError
from core.logging import get_logger
from schemas.common import ApiStatus
from schemas.pipeline import PipelineResult


@dataclass
class PipelineContext:
    """
    Manages pipeline execution context including:
    - Run ID bound to every log line
    - Timing information
    - Records processed counter
    - Computed score and sink status

    Usage:
        ctx = PipelineContext("name_score")
        ctx.start_tracking()
        try:
            # Do work
            ctx.increment_records(10)
            return ctx.mark_success()
        except Exception as e:
            return ctx.mark_failed(e)
    """

    pipeline_name: str
    timezone: str = "US/Central"
    run_id: uuid.UUID = field(default_factory=uuid.uuid4)
    started_at: Optional[datetime] = None
    records_processed: int = 0
    total_score: Optional[int] = None
    submission_status: Optional[int] = None

    _log: Any = field(default=None, repr=False)

    def __post_init__(self):
        """Initialize the bound logger and start time."""
        if self.started_at is None:
            self.started_at = self._now()
        self._log = get_logger("pipeline").bind(
            pipeline=self.pipeline_name,
            run_id=str(self.run_id),
        )

    def _now(self) -> datetime:
        return datetime.now(pytz.timezone(self.timezone))

    @property
    def log(self):
        """Get the bound logger for this context."""
        return self._log

    def start_tracking(self) -> None:
        """Mark the start of the run."""
        self.started_at = self._now()
        self._log.info("pipeline_started")

    def increment_records(self, count: int = 1) -> None:
        """Increment the records processed counter."""
        self.records_processed += count

    def record_score(self, total_score: int) -> None:
        """Keep the computed score so it survives a failed submission."""
        self.total_score = total_score

    def record_submission(self, status_code: int) -> None:
        self.submission_status = status_code

    def mark_success(self, message: Optional[str] = None) -> PipelineResult:
        """
        Mark pipeline as successful and return result.

        Args:
            message: Optional custom success message

        Returns:
            PipelineResult with success status
        """
        completed_at = self._now()
        duration = (completed_at - self.started_at).total_seconds()

        self._log.info(
            "pipeline_completed",
            records_processed=self.records_processed,
            total_score=self.total_score,
            duration_seconds=duration,
        )

        return PipelineResult(
            status=ApiStatus.SUCCESS,
            message=message or f"{self.pipeline_name} completed successfully",
            started_at=self.started_at.isoformat(),
            completed_at=completed_at.isoformat(),
            duration_seconds=duration,
            records_processed=self.records_processed,
            total_score=self.total_score,
            submission_status=self.submission_status,
        )

    def mark_failed(self, error: Exception) -> PipelineResult:
        """
        Mark pipeline as failed and return error result.

        Args:
            error: The exception that caused the failure

        Returns:
            PipelineResult with error status
        """
        completed_at = self._now()
        duration = (completed_at - self.started_at).total_seconds()
        error_msg = f"{type(error).__name__}: {str(error)}"
        phase = error.phase if isinstance(error, PipelineError) else "compute"
        status_code = getattr(error, "status_code", None)
        tb = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )

        self._log.error(
            "pipeline_failed",
            phase=phase,
            error=error_msg,
            status_code=status_code,
            total_score=self.total_score,
            traceback=tb,
        )

        return PipelineResult(
            status=ApiStatus.ERROR,
            message=f"{self.pipeline_name} failed during {phase}",
            started_at=self.started_at.isoformat(),
            completed_at=completed_at.isoformat(),
            duration_seconds=duration,
            records_processed=self.records_processed,
            total_score=self.total_score,
            submission_status=status_code if phase == "sink" else self.submission_status,
            error=f"{error_msg}\n{tb}",
        )
