"""CSV rendering of extracted company records.

Every value is wrapped in double quotes. Embedded quotes are doubled only in
the company name and address columns; the remaining columns are wrapped as-is.
"""

from dataclasses import dataclass
from typing import ClassVar

from app.extraction.models import CompanyRecord

EXPORT_FILENAME = "procore_contacts_export.csv"


@dataclass(frozen=True)
class CsvExport:
    """A rendered CSV document ready to be offered as a download."""

    filename: str
    content: str
    media_type: str = "text/csv;charset=utf-8"

    def encode(self) -> bytes:
        return self.content.encode("utf-8")


class CsvExporter:
    """Renders records as the six-column contacts CSV."""

    HEADERS: ClassVar[tuple[str, ...]] = (
        "Company Name",
        "Phone",
        "Email",
        "Point of Contact",
        "Address",
        "Website",
    )

    def export(self, records: list[CompanyRecord]) -> CsvExport | None:
        """Return the download for the records, or None when there is nothing to export."""
        if not records:
            return None
        return CsvExport(filename=EXPORT_FILENAME, content=self.render(records))

    def render(self, records: list[CompanyRecord]) -> str:
        lines = [",".join(self.HEADERS)]
        lines.extend(self._render_row(record) for record in records)
        return "\n".join(lines)

    @staticmethod
    def _render_row(record: CompanyRecord) -> str:
        fields = (
            _escape(record.company_name),
            record.phone,
            record.email,
            record.point_of_contact,
            _escape(record.address),
            record.website,
        )
        return ",".join(f'"{value}"' for value in fields)


def _escape(value: str) -> str:
    return value.replace('"', '""')
