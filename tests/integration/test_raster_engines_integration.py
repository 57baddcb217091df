"""Rendering real PDFs with both raster engines."""

import io

import pytest
from PIL import Image

from comment_extractor.raster.base import BaseRasterEngine
from comment_extractor.raster.pdfplumber_adapter import PdfPlumberRasterEngine
from comment_extractor.raster.pymupdf_adapter import PyMuPdfRasterEngine

_LETTER_WIDTH_POINTS = 612

ENGINES = [PyMuPdfRasterEngine, PdfPlumberRasterEngine]


@pytest.mark.parametrize("engine_cls", ENGINES)
class TestRenderRealPdf:
    def test_single_page(self, engine_cls: type[BaseRasterEngine], sample_pdf_bytes: bytes) -> None:
        pages = engine_cls().render(sample_pdf_bytes, 2.0)
        assert len(pages) == 1
        assert pages[0].startswith(b"\x89PNG")

    def test_page_count_and_order(
        self, engine_cls: type[BaseRasterEngine], multi_page_pdf_bytes: bytes
    ) -> None:
        pages = engine_cls().render(multi_page_pdf_bytes, 2.0)
        assert len(pages) == 3

    def test_output_is_upscaled(
        self, engine_cls: type[BaseRasterEngine], sample_pdf_bytes: bytes
    ) -> None:
        png = engine_cls().render(sample_pdf_bytes, 2.0)[0]
        width, _height = Image.open(io.BytesIO(png)).size
        assert width >= 2 * _LETTER_WIDTH_POINTS - 1
