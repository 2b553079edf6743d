from app.session.session import FAILURE_MESSAGE, ExtractionSession

__all__ = ["FAILURE_MESSAGE", "ExtractionSession"]
