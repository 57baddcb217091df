import importlib
import io
from types import ModuleType

from comment_extractor.raster.base import BaseRasterEngine
from comment_extractor.raster.exceptions import RasterizationError, RasterizationUnavailable

_NATIVE_DPI = 72


class PdfPlumberRasterEngine(BaseRasterEngine):
    """Renders PDF pages to PNG using pdfplumber (pypdfium2 under the hood)."""

    def render(self, pdf_bytes: bytes, scale: float) -> list[bytes]:
        pdfplumber = self._load_backend()
        resolution = int(_NATIVE_DPI * scale)
        images: list[bytes] = []
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                for number, page in enumerate(pdf.pages, start=1):
                    images.append(self._render_page(page, number, resolution))
        except RasterizationError:
            raise
        except Exception as exc:
            raise RasterizationError(f"pdfplumber could not open document: {exc}") from exc
        return images

    @staticmethod
    def _render_page(page: object, number: int, resolution: int) -> bytes:
        try:
            rendered = page.to_image(resolution=resolution)  # type: ignore[attr-defined]
            buf = io.BytesIO()
            rendered.original.save(buf, format="PNG")
            return buf.getvalue()
        except Exception as exc:
            raise RasterizationError(
                f"pdfplumber failed to render page {number}: {exc}"
            ) from exc

    @staticmethod
    def _load_backend() -> ModuleType:
        try:
            return importlib.import_module("pdfplumber")
        except ImportError as exc:
            raise RasterizationUnavailable(
                f"PDF processing is not available: pdfplumber cannot be loaded ({exc})"
            ) from exc
