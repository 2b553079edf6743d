"""Failures raised while turning pasted HTML into company records.

Only ExtractionValidationError is absorbed by the Extractor (the caller sees an
empty list); the others reach the UI session, which reports a generic failure.
"""


class ExtractionError(Exception):
    """Base class; also raised when the provider answers without a usable choice."""


class ExtractionValidationError(ExtractionError):
    """The service text is not JSON or does not have the company-list shape."""


class ExtractionNetworkError(ExtractionError):
    """Connection, timeout, credential or provider-side API failure."""
