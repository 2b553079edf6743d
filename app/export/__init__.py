from app.export.csv_exporter import EXPORT_FILENAME, CsvExport, CsvExporter

__all__ = ["EXPORT_FILENAME", "CsvExport", "CsvExporter"]
