"""Pattern-based text recovery from raw PDF bytes.

This is not a PDF parser. It ignores fonts, encodings, compression and
layout, and only looks at the byte stream as text:

1. Text objects: every ``BT ... ET`` span is scanned for literal string
   operands ``(...)``; their contents are joined with single spaces.
2. Fallback: when pass 1 finds nothing, non-printable bytes are blanked and
   runs of plain alphabetic words are kept. Too few words means failure.

Both delimiter scans are plain ``str.find`` loops, so run time stays linear
in the input size even for unterminated ``BT`` or ``(`` runs.
"""

import re
from collections.abc import Iterator
from typing import ClassVar

from resume_detector.logging.logger import Log
from resume_detector.pdf.base import BasePdfExtractor, is_blank


def _delimited(buffer: str, opening: str, closing: str, min_length: int = 0) -> Iterator[str]:
    """Yield the text between each *opening* and the first *closing* after it.

    Matches are left to right and non-overlapping. Spans shorter than
    *min_length* are skipped and the scan resumes one character after
    their opening delimiter.
    """
    position = 0
    while True:
        start = buffer.find(opening, position)
        if start == -1:
            return
        inner_start = start + len(opening)
        end = buffer.find(closing, inner_start)
        if end == -1:
            # no later opening delimiter can be closed either
            return
        if end - inner_start < min_length:
            position = start + 1
            continue
        yield buffer[inner_start:end]
        position = end + len(closing)


class HeuristicPdfAdapter(BasePdfExtractor):
    """Recovers text from uncompressed PDF content streams."""

    _NON_PRINTABLE_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\x20-\x7E\n\r]")
    _WHITESPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")
    _ALPHA_WORD_RE: ClassVar[re.Pattern[str]] = re.compile(r"[a-zA-Z]+")

    MIN_FALLBACK_WORDS: ClassVar[int] = 11

    def extract(self, pdf_bytes: bytes) -> str:
        # latin-1 maps every byte to exactly one code point
        buffer = pdf_bytes.decode("latin-1")

        text = self._extract_text_objects(buffer)
        if not is_blank(text):
            Log.debug(f"Recovered {len(text)} chars from PDF text objects")
            return text

        text = self._extract_readable_words(buffer)
        if text:
            Log.debug(f"Recovered {len(text)} chars from readable byte runs")
        return text

    def _extract_text_objects(self, buffer: str) -> str:
        objects: list[str] = []
        for span in _delimited(buffer, "BT", "ET"):
            joined = " ".join(_delimited(span, "(", ")", min_length=1))
            if not is_blank(joined):
                objects.append(joined)
        return " ".join(objects)

    def _extract_readable_words(self, buffer: str) -> str:
        readable = self._NON_PRINTABLE_RE.sub(" ", buffer)
        readable = self._WHITESPACE_RE.sub(" ", readable).strip()
        words = [
            word
            for word in readable.split(" ")
            if len(word) > 2 and self._ALPHA_WORD_RE.fullmatch(word)
        ]
        if len(words) < self.MIN_FALLBACK_WORDS:
            return ""
        return " ".join(words)
