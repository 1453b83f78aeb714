from abc import ABC, abstractmethod

from resume_detector.scoring.models import ScoreResult


class BaseScorer(ABC):
    """Contract for all AI-likelihood scorers."""

    @abstractmethod
    def score(self, text: str) -> ScoreResult:
        """Estimate how likely *text* was produced by an AI writing tool.

        Args:
            text: Plain text extracted from a resume.

        Returns:
            ScoreResult with the probability (0-100) and text statistics.
        """
