from collections.abc import Callable

import pytest


def build_pdf(content_stream: bytes) -> bytes:
    """Assemble a minimal single-page PDF around an uncompressed content stream."""
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(content_stream)
        + content_stream
        + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    body = b"%PDF-1.4\n"
    for number, obj in enumerate(objects, start=1):
        body += b"%d 0 obj\n" % number + obj + b"\nendobj\n"
    return body + b"trailer\n<< /Root 1 0 R >>\n%%EOF\n"


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """A PDF with one text object holding two literal strings."""
    return build_pdf(b"BT /F1 12 Tf 72 720 Td (Hello) Tj (World) Tj ET")


@pytest.fixture()
def multi_object_pdf_bytes() -> bytes:
    """A PDF with several text objects, one of them without literal strings."""
    return build_pdf(
        b"BT /F1 12 Tf 72 720 Td (Senior Engineer) Tj ET\n"
        b"BT /F1 12 Tf 72 700 Td <48656c6c6f> Tj ET\n"
        b"BT /F1 12 Tf 72 680 Td (I love Python) Tj ET"
    )


@pytest.fixture()
def readable_words_pdf_bytes() -> bytes:
    """No text objects, but plain alphabetic words between binary bytes."""
    words = (
        b"Senior software engineer with many years building reliable "
        b"distributed payment systems across three continents"
    )
    return b"%PDF-1.4\n\x00\x9f\xe2" + words.replace(b" ", b" \x01\x02 ") + b"\n\xff%%EOF"


@pytest.fixture()
def scanned_pdf_bytes() -> bytes:
    """Binary noise with no text objects and no readable word runs."""
    return b"%PDF-1.4\n" + bytes(range(256)) * 4 + b"\n%%EOF\n"


@pytest.fixture()
def make_pdf() -> Callable[[bytes], bytes]:
    return build_pdf
