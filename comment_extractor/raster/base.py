from abc import ABC, abstractmethod


class BaseRasterEngine(ABC):
    """Contract for all PDF rasterization adapters."""

    @abstractmethod
    def render(self, pdf_bytes: bytes, scale: float) -> list[bytes]:
        """Render every page of a PDF to PNG bytes, in document order.

        Args:
            pdf_bytes: Raw PDF file content.
            scale: Upscaling factor relative to the native 72 DPI page size.

        Returns:
            One PNG image per page.

        Raises:
            RasterizationUnavailable: if the backend library cannot be loaded.
            RasterizationError: if the document or any page fails to render.
        """
