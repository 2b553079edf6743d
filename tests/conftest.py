from pathlib import Path

import pytest

from app.extraction.models import CompanyRecord

_SETTINGS_ENV_VARS = (
    "APP_ENV",
    "LOG_LEVEL",
    "HOST",
    "PORT",
    "API_KEY",
    "EXTRACTION_PROVIDER",
    "EXTRACTION_MODEL_NAME",
    "EXTRACTION_BASE_URL",
    "EXTRACTION_TIMEOUT_SECONDS",
    "EXTRACTION_TEMPERATURE",
    "MAX_HTML_CHARS",
    "COPY_INDICATOR_SECONDS",
)


@pytest.fixture(autouse=True)
def _isolated_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's environment and .env file out of Settings()."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def acme_record() -> CompanyRecord:
    return CompanyRecord(
        company_name='Acme "Builders"',
        phone="(916) 555-0100",
        email="bids@acme.example",
        point_of_contact="Pat Lee",
        address='12 "Old" Mill Rd, Fresno, CA',
        website="https://acme.example",
    )


@pytest.fixture()
def sparse_record() -> CompanyRecord:
    return CompanyRecord(company_name="Bare Co", phone="N/A", email="N/A")
