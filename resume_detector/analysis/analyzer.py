from resume_detector.analysis.models import RawDocument
from resume_detector.analysis.pipeline import AnalysisContext, AnalysisStep
from resume_detector.analysis.steps import (
    ExtractTextStep,
    ScoreTextStep,
    ValidateMediaTypeStep,
    ValidateSizeStep,
)
from resume_detector.config.settings import Settings
from resume_detector.pdf.factory import PdfExtractorFactory
from resume_detector.scoring.base import BaseScorer
from resume_detector.scoring.heuristic_scorer import HeuristicScorer
from resume_detector.scoring.models import ScoreResult


class Analyzer:
    """Runs an uploaded resume through the analysis steps.

    Pipeline: validate type -> validate size -> extract text -> score.
    A step that rejects the document raises and stops the pipeline.
    """

    def __init__(self, steps: list[AnalysisStep]) -> None:
        self._steps = steps

    def analyze(self, document: RawDocument) -> ScoreResult:
        context = AnalysisContext(document=document)
        for step in self._steps:
            context = step.run(context)
        if context.score_result is None:
            raise ValueError("Analysis pipeline finished without a score")
        return context.score_result


def build_analyzer(
    settings: Settings,
    scorer: BaseScorer | None = None,
) -> Analyzer:
    """Build an Analyzer with the configured extractor and scorer."""
    pdf_extractor = PdfExtractorFactory.create(settings)
    steps: list[AnalysisStep] = [
        ValidateMediaTypeStep(),
        ValidateSizeStep(settings.max_upload_bytes),
        ExtractTextStep(pdf_extractor),
        ScoreTextStep(scorer or HeuristicScorer()),
    ]
    return Analyzer(steps)
