from comment_extractor.config.settings import Settings
from comment_extractor.raster.base import BaseRasterEngine
from comment_extractor.raster.pdfplumber_adapter import PdfPlumberRasterEngine
from comment_extractor.raster.pymupdf_adapter import PyMuPdfRasterEngine
from comment_extractor.raster.rasterizer import Rasterizer


class RasterEngineFactory:
    """Creates the correct raster engine based on settings."""

    ADAPTERS: dict[str, type[BaseRasterEngine]] = {
        "pymupdf": PyMuPdfRasterEngine,
        "pdfplumber": PdfPlumberRasterEngine,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRasterEngine:
        engine = settings.raster_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown raster engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def create_rasterizer(cls, settings: Settings) -> Rasterizer:
        return Rasterizer(engine=cls.create(settings), scale=settings.raster_scale)
