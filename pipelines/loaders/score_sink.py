"""
Score Sink Loader

Submits the total score to the configured target endpoint.

The target receives a POST with query parameters identifying the subject
and whether the submission is a test run:

    POST {target_url}?archivo=first_names&extension=txt&nombre=Jane&prueba=0
    {"ResultadoObtenido": 871198282}
"""

from typing import Any, Optional

from core.errors import SinkRejected
from core.http import send_request
from core.settings import Settings
from pipelines.loaders.base import BaseLoader
from schemas.name_score import ScoreSubmission, SubmissionReceipt


class ScoreSinkLoader(BaseLoader):
    """Loader that posts a TotalScore to the score sink."""

    CONTENT_TYPE = "application/json; utf-8"

    def __init__(self, settings: Settings):
        super().__init__("score_sink")
        self.settings = settings

    def _get_headers(self) -> dict:
        return {
            "Authorization": self.settings.target_auth.get_secret_value(),
            "Content-Type": self.CONTENT_TYPE,
        }

    def _get_params(self, subject_name: str, test_mode: bool) -> dict:
        return {
            "archivo": self.settings.source_file,
            "extension": self.settings.source_extension,
            "nombre": subject_name,
            "prueba": 1 if test_mode else 0,
        }

    def load(
        self,
        result: int,
        subject_name: Optional[str] = None,
        test_mode: Optional[bool] = None,
        **kwargs: Any,
    ) -> SubmissionReceipt:
        """
        Submit a total score.

        Args:
            result: The total score to report
            subject_name: Overrides settings.subject_name
            test_mode: Overrides settings.test_mode

        Returns:
            SubmissionReceipt with the sink's status code and raw body

        Raises:
            SinkRejected: On transport errors or non-2xx responses
        """
        subject_name = subject_name if subject_name is not None else self.settings.subject_name
        test_mode = test_mode if test_mode is not None else self.settings.test_mode

        if not self.settings.target_url:
            raise SinkRejected("TARGET_URL is not configured", score=result)

        submission = ScoreSubmission(total_score=result)
        self.log.debug(
            "score_submit_start",
            url=self.settings.target_url,
            subject=subject_name,
            test_mode=test_mode,
        )

        try:
            response = send_request(
                "POST",
                self.settings.target_url,
                SinkRejected,
                timeout=self.settings.http_timeout,
                params=self._get_params(subject_name, test_mode),
                headers=self._get_headers(),
                json=submission.to_payload(),
            )
        except SinkRejected as e:
            e.score = result
            raise

        receipt = SubmissionReceipt(
            status_code=response.status_code,
            body=_flatten_body(response.text),
        )
        self.log.info(
            "score_submitted",
            status_code=receipt.status_code,
            body=receipt.body,
        )
        return receipt


def _flatten_body(text: str) -> str:
    """Join response lines with surrounding whitespace trimmed."""
    return "".join(line.strip() for line in text.splitlines())
