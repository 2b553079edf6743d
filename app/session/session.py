from app.export.csv_exporter import CsvExport, CsvExporter
from app.extraction.base import BaseExtractor
from app.extraction.models import CompanyRecord, ProcessingStatus
from app.logging.logger import Log

FAILURE_MESSAGE = (
    "Failed to parse the content. Ensure your API key is valid "
    "and the HTML snippet is readable."
)


class ExtractionSession:
    """In-memory UI state: pasted input, current records, status and error.

    There is no lock around process(). The page disables its trigger while a
    request is in flight; a second caller on another path is not blocked.
    """

    def __init__(
        self,
        extractor: BaseExtractor,
        exporter: CsvExporter | None = None,
    ) -> None:
        self._extractor = extractor
        self._exporter = exporter or CsvExporter()
        self.input_text = ""
        self.records: list[CompanyRecord] = []
        self.status = ProcessingStatus.IDLE
        self.error_message: str | None = None

    def process(self, text: str) -> None:
        """Run one extraction cycle for the pasted text.

        Blank input is ignored without any state change.
        """
        if not text.strip():
            Log.debug("Ignoring extraction request with blank input")
            return

        self.input_text = text
        self.error_message = None
        self.status = ProcessingStatus.PROCESSING
        Log.info(f"Extracting companies from {len(text)} chars of HTML")

        try:
            records = self._extractor.extract(text)
        except Exception as exc:
            Log.exception(f"Extraction failed: {exc}")
            self.error_message = FAILURE_MESSAGE
            self.status = ProcessingStatus.ERROR
            return

        self.records = list(records)
        self.status = ProcessingStatus.COMPLETED
        Log.info(f"Extraction cycle completed with {len(self.records)} companies")

    def export(self) -> CsvExport | None:
        """Render the current records as CSV; None when there are none."""
        export = self._exporter.export(self.records)
        if export is not None:
            Log.info(f"Exporting {len(self.records)} companies to {export.filename}")
        return export

    def snapshot(self) -> dict[str, object]:
        return {
            "status": self.status.value,
            "records": [record.to_dict() for record in self.records],
            "error": self.error_message,
            "inputText": self.input_text,
        }
