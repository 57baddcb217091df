"""Sends page images to the configured vision model."""

from pathlib import Path

from comment_extractor.extraction.client_base import BaseVisionClient
from comment_extractor.extraction.prompt_loader import load_extraction_prompt
from comment_extractor.logging.logger import Log
from comment_extractor.raster.models import PageImage


class ModelInvoker:
    """Calls the vision model once per page image with a fixed instruction."""

    def __init__(
        self,
        *,
        client: BaseVisionClient,
        model: str,
        temperature: float = 0.0,
        prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._instruction = load_extraction_prompt(prompt_path)

    @property
    def instruction(self) -> str:
        return self._instruction

    async def invoke(self, page: PageImage) -> str:
        """Return the model's raw reply for one page image.

        Raises:
            InvocationError: on any provider failure. Never retried.
        """
        Log.debug(
            "Calling vision model",
            page=page.display_name,
            model=self._model,
            image_bytes=len(page.data),
        )
        raw = await self._client.generate(
            model=self._model,
            temperature=self._temperature,
            instruction=self._instruction,
            image_bytes=page.data,
            mime_type=page.mime_type,
        )
        Log.debug(f"AI raw response:\n{raw}", page=page.display_name)
        return raw
