from abc import ABC, abstractmethod
from dataclasses import dataclass

from resume_detector.analysis.models import RawDocument
from resume_detector.scoring.models import ScoreResult


@dataclass(slots=True)
class AnalysisContext:
    document: RawDocument
    extracted_text: str = ""
    score_result: ScoreResult | None = None


class AnalysisStep(ABC):
    @abstractmethod
    def run(self, context: AnalysisContext) -> AnalysisContext:
        raise NotImplementedError
