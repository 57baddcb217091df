import httpx
from google import genai
from google.genai import errors, types

from comment_extractor.extraction.client_base import BaseVisionClient
from comment_extractor.extraction.exceptions import InvocationError, InvocationNetworkError


class GeminiClientAdapter(BaseVisionClient):
    """Vision client adapter built on the Google Gen AI SDK."""

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
        )

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> str:
        try:
            response = await self._client.aio.models.generate_content(
                model=model,
                contents=[
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                    instruction,
                ],
                config=types.GenerateContentConfig(temperature=temperature),
            )
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise InvocationNetworkError(f"AI provider network error: {exc}") from exc
        except errors.APIError as exc:
            raise InvocationNetworkError(f"AI provider API error: {exc}") from exc

        text = response.text
        if not text:
            raise InvocationError("AI returned empty response")
        return text
