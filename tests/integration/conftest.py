from unittest.mock import MagicMock

import pytest
from flask import Flask
from flask.testing import FlaskClient

from app.script_panel.panel import CopyIndicator, ScriptPanel, load_script_text
from app.session.session import ExtractionSession
from app.web.server import create_app


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def mock_extractor() -> MagicMock:
    extractor = MagicMock()
    extractor.extract.return_value = []
    return extractor


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session(mock_extractor: MagicMock) -> ExtractionSession:
    return ExtractionSession(mock_extractor)


@pytest.fixture
def flask_app(session: ExtractionSession, clock: FakeClock) -> Flask:
    panel = ScriptPanel(load_script_text(), CopyIndicator(delay_seconds=2.0, clock=clock))
    app = create_app(session, panel)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(flask_app: Flask) -> FlaskClient:
    return flask_app.test_client()
