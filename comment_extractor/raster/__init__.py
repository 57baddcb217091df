from comment_extractor.raster.base import BaseRasterEngine
from comment_extractor.raster.factory import RasterEngineFactory
from comment_extractor.raster.models import MediaKind, PageImage, SourceFile
from comment_extractor.raster.rasterizer import Rasterizer

__all__ = [
    "BaseRasterEngine",
    "MediaKind",
    "PageImage",
    "RasterEngineFactory",
    "Rasterizer",
    "SourceFile",
]
