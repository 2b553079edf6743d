"""Builds CompanyRecords from the parsed service response."""

from typing import Any

from app.extraction.exceptions import ExtractionValidationError
from app.extraction.models import NOT_AVAILABLE, CompanyRecord

_WRAPPER_KEY = "companies"
_REQUIRED_FIELDS = ("companyName", "phone", "email")
_OPTIONAL_FIELDS = ("pointOfContact", "address", "website")


def build_records(data: Any) -> list[CompanyRecord]:
    """Validate the decoded JSON and build records in response order.

    Accepts a bare array of company objects or an object wrapping that array
    under "companies".

    Raises:
        ExtractionValidationError: on any shape failure.
    """
    items = _unwrap(data)
    return [_build_record(item, i) for i, item in enumerate(items)]


def _unwrap(data: Any) -> list[Any]:
    if isinstance(data, dict):
        if _WRAPPER_KEY not in data:
            raise ExtractionValidationError(f"Missing top-level field: {_WRAPPER_KEY}")
        data = data[_WRAPPER_KEY]
    if not isinstance(data, list):
        raise ExtractionValidationError("Response must be an array of companies")
    return data


def _build_record(raw: Any, index: int) -> CompanyRecord:
    if not isinstance(raw, dict):
        raise ExtractionValidationError(f"Company at index {index} must be an object")
    for field in _REQUIRED_FIELDS:
        if field not in raw:
            raise ExtractionValidationError(
                f"Company at index {index}: missing required field '{field}'"
            )
    values = {
        field: _text_value(raw.get(field), field, index)
        for field in (*_REQUIRED_FIELDS, *_OPTIONAL_FIELDS)
    }
    return CompanyRecord(
        company_name=values["companyName"],
        phone=values["phone"],
        email=values["email"],
        point_of_contact=values["pointOfContact"],
        address=values["address"],
        website=values["website"],
    )


def _text_value(raw: Any, field: str, index: int) -> str:
    if raw is None:
        return NOT_AVAILABLE
    if not isinstance(raw, str):
        raise ExtractionValidationError(
            f"Company at index {index}: '{field}' must be a string"
        )
    return raw
