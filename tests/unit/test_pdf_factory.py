from unittest.mock import MagicMock

import pytest

from resume_detector.pdf.factory import PdfExtractorFactory
from resume_detector.pdf.heuristic_adapter import HeuristicPdfAdapter


def _make_settings(pdf_engine: str) -> MagicMock:
    """Create a minimal Settings-like object with only pdf_engine."""
    return MagicMock(pdf_engine=pdf_engine)


class TestPdfExtractorFactory:
    def test_creates_heuristic_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("heuristic"))
        assert isinstance(adapter, HeuristicPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("Heuristic"))
        assert isinstance(adapter, HeuristicPdfAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfExtractorFactory.create(_make_settings("pdfminer"))
