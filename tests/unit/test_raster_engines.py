"""Backend-availability behaviour of the raster engines."""

import sys
from unittest.mock import patch

import pytest

from comment_extractor.raster.exceptions import RasterizationError, RasterizationUnavailable
from comment_extractor.raster.pdfplumber_adapter import PdfPlumberRasterEngine
from comment_extractor.raster.pymupdf_adapter import PyMuPdfRasterEngine


class TestMissingBackend:
    def test_pymupdf_unavailable(self) -> None:
        with patch.dict(sys.modules, {"pymupdf": None}):
            with pytest.raises(RasterizationUnavailable, match="not available"):
                PyMuPdfRasterEngine().render(b"%PDF", 2.0)

    def test_pdfplumber_unavailable(self) -> None:
        with patch.dict(sys.modules, {"pdfplumber": None}):
            with pytest.raises(RasterizationUnavailable, match="not available"):
                PdfPlumberRasterEngine().render(b"%PDF", 2.0)

    def test_unavailable_is_a_rasterization_error(self) -> None:
        assert issubclass(RasterizationUnavailable, RasterizationError)


class TestInvalidDocument:
    def test_pymupdf_rejects_garbage(self) -> None:
        with pytest.raises(RasterizationError):
            PyMuPdfRasterEngine().render(b"not a pdf", 2.0)

    def test_pdfplumber_rejects_garbage(self) -> None:
        with pytest.raises(RasterizationError):
            PdfPlumberRasterEngine().render(b"not a pdf", 2.0)
