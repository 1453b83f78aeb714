from dataclasses import dataclass

PDF_MEDIA_TYPE = "application/pdf"


@dataclass(frozen=True)
class RawDocument:
    """An uploaded file as received from the client."""

    filename: str
    content_type: str
    content: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.content)
