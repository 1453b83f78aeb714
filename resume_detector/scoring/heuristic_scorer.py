import math
from typing import ClassVar

from resume_detector.logging.logger import Log
from resume_detector.scoring.base import BaseScorer
from resume_detector.scoring.indicators import (
    AI_INDICATORS,
    HUMAN_INDICATORS,
    IndicatorSet,
)
from resume_detector.scoring.models import ScoreResult


class HeuristicScorer(BaseScorer):
    """Weighs AI-style phrasing against personal, specific detail.

    probability = ai / (ai + human) * 100 + length bias, clamped to
    [MIN_PROBABILITY, MAX_PROBABILITY]. Text with no indicator at all
    scores NO_SIGNAL_PROBABILITY.
    """

    NO_SIGNAL_PROBABILITY: ClassVar[float] = 50.0
    MIN_PROBABILITY: ClassVar[float] = 5.0
    MAX_PROBABILITY: ClassVar[float] = 95.0

    # (exclusive word-count upper bound, additive factor), first match wins
    LENGTH_FACTORS: ClassVar[tuple[tuple[int, float], ...]] = ((200, 0.1), (500, 0.05))

    def __init__(
        self,
        ai_indicators: IndicatorSet = AI_INDICATORS,
        human_indicators: IndicatorSet = HUMAN_INDICATORS,
    ) -> None:
        self._ai_indicators = ai_indicators
        self._human_indicators = human_indicators

    def score(self, text: str) -> ScoreResult:
        lowered = text.lower()
        ai_score = self._ai_indicators.score(text, lowered)
        human_score = self._human_indicators.score(text, lowered)
        word_count = len(text.split())

        Log.debug(f"Indicator totals: ai={ai_score}, human={human_score}")

        return ScoreResult(
            ai_probability=self._probability(ai_score, human_score, word_count),
            word_count=word_count,
            text_length=len(text),
            ai_score=ai_score,
            human_score=human_score,
        )

    def _probability(self, ai_score: float, human_score: float, word_count: int) -> float:
        total = ai_score + human_score
        if total == 0:
            return self.NO_SIGNAL_PROBABILITY

        raw = ai_score / total * 100 + self._length_factor(word_count) * 100
        clamped = min(self.MAX_PROBABILITY, max(self.MIN_PROBABILITY, raw))
        return self._round(clamped)

    @classmethod
    def _length_factor(cls, word_count: int) -> float:
        for upper_bound, factor in cls.LENGTH_FACTORS:
            if word_count < upper_bound:
                return factor
        return 0.0

    @staticmethod
    def _round(value: float) -> float:
        """Round to one decimal, halves rounding up."""
        return math.floor(value * 10 + 0.5) / 10
