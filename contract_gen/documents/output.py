"""Rendered document container."""

from dataclasses import dataclass

PDF_MIME_TYPE = "application/pdf"


@dataclass(frozen=True)
class DocumentBlob:
    """Binary document handed to the caller for download or storage."""

    content: bytes
    filename: str
    page_count: int
    mime_type: str = PDF_MIME_TYPE

    def __len__(self) -> int:
        return len(self.content)
