from comment_extractor.logging.logger import Log
from comment_extractor.raster.base import BaseRasterEngine
from comment_extractor.raster.exceptions import RasterizationError
from comment_extractor.raster.models import (
    RENDERED_PAGE_MIME_TYPE,
    MediaKind,
    PageImage,
    SourceFile,
)

MIN_SCALE = 2.0


class Rasterizer:
    """Turns a source file into the ordered page images sent to the model.

    Images pass through untouched. PDFs are rendered page by page through the
    configured engine; a failure on any page aborts the whole document.
    """

    def __init__(self, engine: BaseRasterEngine, scale: float = MIN_SCALE) -> None:
        if scale < MIN_SCALE:
            raise ValueError(f"Raster scale must be at least {MIN_SCALE}, got {scale}")
        self._engine = engine
        self._scale = scale

    def rasterize(self, source: SourceFile) -> list[PageImage]:
        """Produce one PageImage per image, or one per PDF page.

        Raises:
            RasterizationUnavailable: if the raster backend cannot be loaded.
            RasterizationError: if the document cannot be rendered.
        """
        if source.kind is MediaKind.IMAGE:
            return [
                PageImage(
                    data=source.data,
                    mime_type=source.image_mime_type,
                    source_name=source.name,
                )
            ]

        rendered = self._engine.render(source.data, self._scale)
        if not rendered:
            raise RasterizationError("Document contains no pages")
        Log.info(f"Rasterized {len(rendered)} pages", file=source.name)
        return [
            PageImage(
                data=png,
                mime_type=RENDERED_PAGE_MIME_TYPE,
                source_name=source.name,
                page_number=number,
            )
            for number, png in enumerate(rendered, start=1)
        ]
