from pydantic import BaseModel, ConfigDict, Field

from resume_detector.scoring.models import ScoreResult


class AnalyzeResponse(BaseModel):
    """Success body of POST /api/analyze."""

    model_config = ConfigDict(populate_by_name=True)

    ai_probability: float = Field(alias="aiProbability")
    word_count: int = Field(alias="wordCount")
    text_length: int = Field(alias="textLength")

    @classmethod
    def from_result(cls, result: ScoreResult) -> "AnalyzeResponse":
        return cls(
            ai_probability=result.ai_probability,
            word_count=result.word_count,
            text_length=result.text_length,
        )


class ErrorResponse(BaseModel):
    error: str
