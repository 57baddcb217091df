from unittest.mock import MagicMock

import pytest

from comment_extractor.raster.exceptions import RasterizationError, RasterizationUnavailable
from comment_extractor.raster.models import SourceFile
from comment_extractor.raster.rasterizer import Rasterizer


def _make_rasterizer(pages: list[bytes] | None = None, scale: float = 2.0) -> tuple[Rasterizer, MagicMock]:
    engine = MagicMock()
    engine.render.return_value = pages if pages is not None else [b"p1", b"p2"]
    return Rasterizer(engine=engine, scale=scale), engine


class TestImagePassthrough:
    def test_returns_single_page_unchanged(self) -> None:
        rasterizer, engine = _make_rasterizer()
        source = SourceFile(name="shot.jpg", data=b"jpeg", content_type="image/jpeg")

        pages = rasterizer.rasterize(source)

        assert len(pages) == 1
        assert pages[0].data == b"jpeg"
        assert pages[0].mime_type == "image/jpeg"
        assert pages[0].page_number is None
        engine.render.assert_not_called()


class TestPdfRendering:
    def test_one_png_page_per_rendered_page(self) -> None:
        rasterizer, _engine = _make_rasterizer([b"a", b"b", b"c"])
        source = SourceFile(name="thread.pdf", data=b"%PDF")

        pages = rasterizer.rasterize(source)

        assert [p.page_number for p in pages] == [1, 2, 3]
        assert [p.data for p in pages] == [b"a", b"b", b"c"]
        assert all(p.mime_type == "image/png" for p in pages)
        assert pages[1].display_name == "thread.pdf (page 2)"

    def test_passes_scale_to_engine(self) -> None:
        rasterizer, engine = _make_rasterizer(scale=3.0)
        rasterizer.rasterize(SourceFile(name="thread.pdf", data=b"%PDF"))
        engine.render.assert_called_once_with(b"%PDF", 3.0)

    def test_zero_pages_raises(self) -> None:
        rasterizer, _engine = _make_rasterizer([])
        with pytest.raises(RasterizationError, match="no pages"):
            rasterizer.rasterize(SourceFile(name="thread.pdf", data=b"%PDF"))

    def test_engine_errors_propagate(self) -> None:
        rasterizer, engine = _make_rasterizer()
        engine.render.side_effect = RasterizationUnavailable("no backend")
        with pytest.raises(RasterizationUnavailable, match="no backend"):
            rasterizer.rasterize(SourceFile(name="thread.pdf", data=b"%PDF"))


class TestScale:
    def test_scale_below_two_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 2.0"):
            Rasterizer(engine=MagicMock(), scale=1.5)
