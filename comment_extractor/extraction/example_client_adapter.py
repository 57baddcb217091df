"""Example vision client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseVisionClient and register the provider in InvokerFactory.
"""

import json
from typing import ClassVar

from comment_extractor.extraction.client_base import BaseVisionClient


class ExampleClientAdapter(BaseVisionClient):
    """Example adapter that returns a fixed, well-formed extraction reply.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "comments": [
            {"username": "example_user", "text": "Example comment", "likes": "0"},
        ],
    }

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> str:
        _ = model, temperature, instruction, image_bytes, mime_type
        return json.dumps(self.DEFAULT_RESPONSE)
