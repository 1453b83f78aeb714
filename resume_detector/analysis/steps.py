from resume_detector.analysis.exceptions import (
    FileTooLargeError,
    TextExtractionError,
    UnsupportedMediaTypeError,
)
from resume_detector.analysis.models import PDF_MEDIA_TYPE
from resume_detector.analysis.pipeline import AnalysisContext, AnalysisStep
from resume_detector.logging.logger import Log
from resume_detector.pdf.base import BasePdfExtractor, is_blank
from resume_detector.scoring.base import BaseScorer


class ValidateMediaTypeStep(AnalysisStep):
    def run(self, context: AnalysisContext) -> AnalysisContext:
        content_type = context.document.content_type
        if content_type != PDF_MEDIA_TYPE:
            raise UnsupportedMediaTypeError()
        return context


class ValidateSizeStep(AnalysisStep):
    def __init__(self, max_bytes: int) -> None:
        self._max_bytes = max_bytes

    def run(self, context: AnalysisContext) -> AnalysisContext:
        if context.document.size_bytes > self._max_bytes:
            raise FileTooLargeError()
        return context


class ExtractTextStep(AnalysisStep):
    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def run(self, context: AnalysisContext) -> AnalysisContext:
        text = self._pdf_extractor.extract(context.document.content)
        if is_blank(text):
            raise TextExtractionError()
        context.extracted_text = text
        Log.info(f"Extracted {len(text)} chars from '{context.document.filename}'")
        return context


class ScoreTextStep(AnalysisStep):
    def __init__(self, scorer: BaseScorer) -> None:
        self._scorer = scorer

    def run(self, context: AnalysisContext) -> AnalysisContext:
        if not context.extracted_text:
            raise ValueError("AnalysisContext.extracted_text must be set before scoring")
        result = self._scorer.score(context.extracted_text)
        context.score_result = result
        Log.info(
            f"Scored '{context.document.filename}': "
            f"{result.ai_probability}% over {result.word_count} words"
        )
        return context
