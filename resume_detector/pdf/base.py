from abc import ABC, abstractmethod

# Characters JavaScript's String.prototype.trim() removes. str.strip() with no
# arguments also drops \x1c-\x1f and \x85, which count as text here.
WHITESPACE = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def is_blank(text: str) -> bool:
    """True when *text* is empty or holds only whitespace."""
    return not text.strip(WHITESPACE)


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract best-effort plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Extracted text, or an empty string when nothing readable was
            found. Adapters never raise; deciding whether empty text is an
            error is left to the caller.
        """
