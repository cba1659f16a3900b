"""
Base Pipeline

Abstract base class for all data pipelines.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from core.settings import Settings, get_settings
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from schemas.pipeline import PipelineResult


class BasePipeline(ABC):
    """
    Abstract base class for all data pipelines.

    Provides:
    - Run tracking via PipelineContext
    - Structured logging bound to the run ID
    - Standardized error handling (any exception becomes a failed result)
    - Template method pattern for run lifecycle
    - Thread-based execution to avoid blocking the async event loop

    Subclasses must implement:
    - config: PipelineConfig class attribute
    - execute(): The actual pipeline logic (synchronous)

    Example:
        class NameScorePipeline(BasePipeline):
            config = PipelineConfig(
                name="name_score",
                display_name="Name Score",
                description="Scores the source name list",
                target="score sink",
            )

            def execute(self, ctx: PipelineContext) -> None:
                names = self.extractor.extract()
                ctx.increment_records(len(names))
    """

    # Class-level configuration - must be overridden by subclasses
    config: ClassVar[PipelineConfig]

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize pipeline and validate configuration."""
        self._validate_config()
        self.settings = settings or get_settings()

    def _validate_config(self) -> None:
        """Validate that config is properly defined."""
        if getattr(self.__class__, "config", None) is None:
            raise ValueError(
                f"{self.__class__.__name__} must define a 'config' class attribute"
            )

    @abstractmethod
    def execute(self, ctx: PipelineContext) -> None:
        """
        Execute the pipeline logic.

        Runs synchronously; blocking HTTP calls are safe here.

        Args:
            ctx: Pipeline context with logging, tracking, and timing

        Raises:
            Any exception will be caught and converted to a failed result
        """
        pass

    def run_sync(self) -> PipelineResult:
        """
        Run the full pipeline lifecycle synchronously.

        Returns:
            PipelineResult with status, timing, score, and records processed
        """
        ctx = PipelineContext(self.config.name, timezone=self.settings.timezone)
        ctx.start_tracking()

        try:
            self.execute(ctx)
            return ctx.mark_success()
        except Exception as e:
            return ctx.mark_failed(e)

    async def run(self) -> PipelineResult:
        """
        Run the pipeline from async code.

        The synchronous lifecycle runs in a thread pool worker via
        asyncio.to_thread() so the event loop is not blocked.
        """
        return await asyncio.to_thread(self.run_sync)

    @classmethod
    def get_info(cls) -> dict:
        """Get pipeline information for listing."""
        return {
            "name": cls.config.name,
            "display_name": cls.config.display_name,
            "description": cls.config.description,
            "target": cls.config.target,
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name={self.config.name})>"
