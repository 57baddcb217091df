import mimetypes
from dataclasses import dataclass
from enum import Enum

PDF_MIME_TYPE = "application/pdf"
DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"
RENDERED_PAGE_MIME_TYPE = "image/png"


class MediaKind(str, Enum):
    IMAGE = "image"
    PDF = "pdf"


@dataclass(frozen=True)
class SourceFile:
    """An uploaded file admitted to the pipeline. Never mutated."""

    name: str
    data: bytes
    content_type: str = ""

    @property
    def kind(self) -> MediaKind:
        """PDF when declared or named as one; anything else is an image."""
        if self.content_type == PDF_MIME_TYPE or self.name.lower().endswith(".pdf"):
            return MediaKind.PDF
        return MediaKind.IMAGE

    @property
    def image_mime_type(self) -> str:
        """Declared image type, else a guess from the name, else JPEG."""
        if self.content_type.startswith("image/"):
            return self.content_type
        guessed, _ = mimetypes.guess_type(self.name)
        if guessed and guessed.startswith("image/"):
            return guessed
        return DEFAULT_IMAGE_MIME_TYPE


@dataclass(frozen=True)
class PageImage:
    """One image unit sent to the model: a whole image or one rendered page."""

    data: bytes
    mime_type: str
    source_name: str
    page_number: int | None = None

    @property
    def display_name(self) -> str:
        if self.page_number is None:
            return self.source_name
        return f"{self.source_name} (page {self.page_number})"
