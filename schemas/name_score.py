"""
Name Score Schemas

Wire shapes exchanged with the name source and the score sink, plus the
per-name breakdown produced by the scorer.
"""

from pydantic import BaseModel, ConfigDict, Field


class PositionedName(BaseModel):
    """A normalized name with its 1-based rank and score contribution."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(pattern=r"^[A-Z]*$")
    position: int = Field(ge=1)
    letter_sum: int = Field(ge=0)

    @property
    def score(self) -> int:
        return self.letter_sum * self.position


class ScoreSubmission(BaseModel):
    """Body posted to the score sink: {"ResultadoObtenido": <int>}."""

    model_config = ConfigDict(populate_by_name=True)

    total_score: int = Field(ge=0, alias="ResultadoObtenido")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class SubmissionReceipt(BaseModel):
    """What the sink answered. The body is opaque and only logged."""

    status_code: int
    body: str = ""
