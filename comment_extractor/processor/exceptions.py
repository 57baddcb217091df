class BatchError(Exception):
    """Base exception for batch submission errors."""


class BatchValidationError(BatchError):
    """Raised when a batch is rejected before processing starts."""
