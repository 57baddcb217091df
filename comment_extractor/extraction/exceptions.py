class InvocationError(Exception):
    """Raised when the vision model call fails."""


class InvocationNetworkError(InvocationError):
    """Raised when the AI provider call fails due to network/API issues."""


class PromptLoadError(InvocationError):
    """Raised when the bundled extraction instruction cannot be read."""
