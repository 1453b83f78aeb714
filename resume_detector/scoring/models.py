from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreResult:
    """Output of the scorer for one piece of text."""

    ai_probability: float
    word_count: int
    text_length: int
    ai_score: float = 0.0  # weighted sum of AI indicator matches
    human_score: float = 0.0  # weighted sum of human indicator matches
