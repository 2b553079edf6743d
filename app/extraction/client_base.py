from abc import ABC, abstractmethod


class BaseExtractionClient(ABC):
    """One chat round-trip to an LLM provider that honours a JSON output schema.

    Implementations return the raw reply text and leave decoding to the
    Extractor. Transport problems are raised as ExtractionNetworkError.
    """

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        """Return the reply text, or "" when the provider sent no content."""
