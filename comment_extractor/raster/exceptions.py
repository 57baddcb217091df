class RasterizationError(Exception):
    """Raised when a document cannot be rendered into page images."""


class RasterizationUnavailable(RasterizationError):
    """Raised when the configured raster backend cannot be loaded."""
