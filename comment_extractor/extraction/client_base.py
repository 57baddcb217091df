from abc import ABC, abstractmethod


class BaseVisionClient(ABC):
    """Contract for provider-specific multimodal clients."""

    @abstractmethod
    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> str:
        """Send one image with the instruction and return the raw text reply.

        Raises:
            InvocationNetworkError: on transport or API failures.
            InvocationError: when the provider returns no text.
        """
