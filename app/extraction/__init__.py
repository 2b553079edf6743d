from app.extraction.base import BaseExtractor
from app.extraction.extractor import Extractor
from app.extraction.factory import ExtractorFactory
from app.extraction.models import NOT_AVAILABLE, CompanyRecord, ProcessingStatus

__all__ = [
    "NOT_AVAILABLE",
    "BaseExtractor",
    "CompanyRecord",
    "Extractor",
    "ExtractorFactory",
    "ProcessingStatus",
]
