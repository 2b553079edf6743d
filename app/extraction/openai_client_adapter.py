import httpx
import openai

from app.extraction.client_base import BaseExtractionClient
from app.extraction.exceptions import ExtractionError, ExtractionNetworkError


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction AI client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        messages = [{"role": "user", "content": user_prompt}]
        if system_prompt:
            messages.insert(0, {"role": "system", "content": system_prompt})
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "company_records",
                        # strict mode would force every property to be required
                        "strict": False,
                        "schema": json_schema,
                    },
                },
                messages=messages,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise ExtractionNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise ExtractionError("AI returned no choices")
        return response.choices[0].message.content or ""
