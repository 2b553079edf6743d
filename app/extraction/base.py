from abc import ABC, abstractmethod

from app.extraction.models import CompanyRecord


class BaseExtractor(ABC):
    """Contract for turning pasted directory HTML into company records."""

    @abstractmethod
    def extract(self, raw_html: str) -> list[CompanyRecord]:
        """Extract company contact records from an HTML snippet.

        Args:
            raw_html: HTML copied from a directory search result or profile.

        Returns:
            Records in the order the service returned them. An unparseable
            service response yields an empty list.

        Raises:
            ExtractionNetworkError: on transport or credential failures.
            ExtractionError: when the provider returns no usable choice.
        """
