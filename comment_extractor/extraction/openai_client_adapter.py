import base64

import httpx
import openai

from comment_extractor.extraction.client_base import BaseVisionClient
from comment_extractor.extraction.exceptions import InvocationError, InvocationNetworkError


class OpenAIClientAdapter(BaseVisionClient):
    """Vision client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
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
        encoded = base64.b64encode(image_bytes).decode("ascii")
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "image_url",
                                "image_url": {"url": f"data:{mime_type};base64,{encoded}"},
                            },
                            {"type": "text", "text": instruction},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise InvocationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise InvocationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise InvocationError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise InvocationError("AI returned empty response")
        return content
