"""Offline extraction client adapter.

Returns a fixed company list without any network call. Selected with
EXTRACTION_PROVIDER=example for local development and demos, and used as the
template for new provider adapters: implement BaseExtractionClient and register
the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from app.extraction.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Adapter that answers every request with the same two companies."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "companies": [
            {
                "companyName": "Example Builders Inc.",
                "phone": "(555) 010-0100",
                "email": "info@example-builders.com",
                "pointOfContact": "Jane Doe",
                "address": "100 Main St, Sacramento, CA",
                "website": "https://example-builders.com",
            },
            {
                "companyName": "Sample Construction Co.",
                "phone": "N/A",
                "email": "N/A",
            },
        ],
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
