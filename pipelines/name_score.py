"""
Name Score Pipeline

Fetches the source name list, scores it, and submits the total.

Flow: name source -> normalize -> rank -> score -> score sink.
The fetch completes before any transformation starts, and the score is
logged before submission so it is never lost to a sink failure.
"""

import logging
from typing import Callable, Optional

from core.settings import Settings
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.extractors.name_source import NameSourceExtractor
from pipelines.loaders.score_sink import ScoreSinkLoader
from pipelines.transformers import (
    calculate_total_score,
    normalize_names,
    position_names,
    rank_names,
)
from schemas.name_score import PositionedName


NameObserver = Callable[[PositionedName], None]


class NameScorePipeline(BasePipeline):
    """
    Scores the source name list and reports the total.

    An optional observer receives every PositionedName once the total
    has been computed; it is never called from inside the scoring itself.
    """

    config = PipelineConfig(
        name="name_score",
        display_name="Name Score",
        description="Scores the source name list by position-weighted letter sums",
        target="score sink",
    )

    def __init__(
        self,
        settings: Optional[Settings] = None,
        observer: Optional[NameObserver] = None,
        subject_name: Optional[str] = None,
        test_mode: Optional[bool] = None,
    ):
        super().__init__(settings)
        self.extractor = NameSourceExtractor(self.settings)
        self.loader = ScoreSinkLoader(self.settings)
        self.observer = observer
        self.subject_name = subject_name
        self.test_mode = test_mode

    def execute(self, ctx: PipelineContext) -> None:
        """Fetch, score, and submit."""
        raw_names = self.extractor.extract()
        ctx.increment_records(len(raw_names))

        ranked = rank_names(normalize_names(raw_names))
        total_score = calculate_total_score(ranked)

        ctx.record_score(total_score)
        ctx.log.info("total_score_computed", total_score=total_score, names=len(ranked))

        self._notify(ranked, ctx)

        receipt = self.loader.load(
            total_score,
            subject_name=self.subject_name,
            test_mode=self.test_mode,
        )
        ctx.record_submission(receipt.status_code)

    def _notify(self, ranked: list[str], ctx: PipelineContext) -> None:
        """
        Report each positioned name to the observer, or debug-log it.

        Observer errors are logged and never block the submission.
        """
        observer = self.observer
        if observer is None:
            if not ctx.log.is_enabled_for(logging.DEBUG):
                return
            observer = _debug_observer(ctx)

        try:
            for entry in position_names(ranked):
                observer(entry)
        except Exception as e:
            ctx.log.warning(
                "name_observer_failed",
                error=f"{type(e).__name__}: {e}",
                exc_info=True,
            )


def _debug_observer(ctx: PipelineContext) -> NameObserver:
    def observe(entry: PositionedName) -> None:
        ctx.log.debug(
            "name_scored",
            name=entry.name,
            value=entry.letter_sum,
            position=entry.position,
            score=entry.score,
        )

    return observe
