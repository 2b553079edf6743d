from flask import Flask

from app.config.settings import Settings
from app.extraction.factory import ExtractorFactory
from app.logging.logger import Log
from app.script_panel.panel import CopyIndicator, ScriptPanel, load_script_text
from app.session.session import ExtractionSession
from app.web.server import create_app


def build_app(settings: Settings) -> Flask:
    """Wire the extractor, UI session and script panel into the Flask app."""
    extractor = ExtractorFactory.create(settings)
    session = ExtractionSession(extractor)
    panel = ScriptPanel(
        load_script_text(),
        CopyIndicator(delay_seconds=settings.copy_indicator_seconds),
    )
    return create_app(session, panel)


def main() -> None:
    """Entry point: load settings -> configure logging -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    Log.info(
        f"Starting extraction tool ({settings.app_env}) with provider "
        f"'{settings.extraction_provider}' on {settings.host}:{settings.port}"
    )
    app = build_app(settings)
    app.run(host=settings.host, port=settings.port, debug=False)


if __name__ == "__main__":
    main()
