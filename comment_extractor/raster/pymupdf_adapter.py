import importlib
from types import ModuleType

from comment_extractor.raster.base import BaseRasterEngine
from comment_extractor.raster.exceptions import RasterizationError, RasterizationUnavailable


class PyMuPdfRasterEngine(BaseRasterEngine):
    """Renders PDF pages to PNG using PyMuPDF."""

    def render(self, pdf_bytes: bytes, scale: float) -> list[bytes]:
        pymupdf = self._load_backend()
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")
        except Exception as exc:
            raise RasterizationError(f"pymupdf could not open document: {exc}") from exc

        matrix = pymupdf.Matrix(scale, scale)
        images: list[bytes] = []
        with doc:
            for number, page in enumerate(doc, start=1):
                try:
                    pixmap = page.get_pixmap(matrix=matrix)
                    images.append(pixmap.tobytes("png"))
                except Exception as exc:
                    raise RasterizationError(
                        f"pymupdf failed to render page {number}: {exc}"
                    ) from exc
        return images

    @staticmethod
    def _load_backend() -> ModuleType:
        try:
            return importlib.import_module("pymupdf")
        except ImportError as exc:
            raise RasterizationUnavailable(
                f"PDF processing is not available: pymupdf cannot be loaded ({exc})"
            ) from exc
