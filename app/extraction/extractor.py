"""AI-powered company contact extractor."""

import json
import re
from pathlib import Path
from typing import Any

from app.extraction.base import BaseExtractor
from app.extraction.client_base import BaseExtractionClient
from app.extraction.exceptions import ExtractionValidationError
from app.extraction.models import CompanyRecord
from app.extraction.prompt_loader import load_json_schema, load_prompt_template
from app.extraction.validator import build_records
from app.logging.logger import Log

MAX_HTML_CHARS = 15000

_FENCE_OPEN = re.compile(r"^```[A-Za-z]*\s*")
_FENCE_CLOSE = re.compile(r"\s*```$")


class Extractor(BaseExtractor):
    """Extracts company contact records from directory HTML using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        max_html_chars: int = MAX_HTML_CHARS,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_html_chars = max_html_chars
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema_dict = json.loads(load_json_schema(json_schema_path))

    def extract(self, raw_html: str) -> list[CompanyRecord]:
        """Send the (truncated) HTML to the provider and decode its records."""
        prompt = self._build_prompt(raw_html)
        Log.debug(f"Extraction prompt:\n{prompt}")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        try:
            records = build_records(self._parse_json(raw_response))
        except ExtractionValidationError as exc:
            Log.error(f"Failed to parse AI response: {exc}")
            return []

        Log.info(f"Extraction complete: {len(records)} companies extracted")
        return records

    def _build_prompt(self, raw_html: str) -> str:
        return self._prompt_template.format(
            html_content=raw_html[: self._max_html_chars],
        )

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema_dict,
        )

    @staticmethod
    def _parse_json(raw: str) -> Any:
        cleaned = raw.strip() or "[]"
        cleaned = _FENCE_OPEN.sub("", cleaned)
        cleaned = _FENCE_CLOSE.sub("", cleaned)

        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ExtractionValidationError(f"Invalid JSON response: {exc}") from exc
