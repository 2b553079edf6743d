"""Flask shell serving the extraction page and its JSON API."""

from flask import Flask, Response, jsonify, render_template, request

from app.extraction.models import ProcessingStatus
from app.logging.logger import Log
from app.script_panel.panel import ScriptPanel
from app.session.session import ExtractionSession


def create_app(session: ExtractionSession, panel: ScriptPanel) -> Flask:
    """Build the Flask app around one UI session and the script panel."""
    app = Flask(__name__)

    @app.route("/", methods=["GET"])
    def index():
        return render_template(
            "index.html",
            session=session,
            statuses=ProcessingStatus,
            script_text=panel.script_text,
            copied=panel.indicator.is_active(),
            copy_reset_ms=int(panel.indicator.delay_seconds * 1000),
        )

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "healthy"}), 200

    @app.route("/api/status", methods=["GET"])
    def status():
        return jsonify(session.snapshot()), 200

    @app.route("/api/extract", methods=["POST"])
    def extract():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        html = data.get("html", "")
        if not isinstance(html, str):
            html = ""
        session.process(html)
        return jsonify(session.snapshot()), 200

    @app.route("/api/export", methods=["GET"])
    def export():
        csv_export = session.export()
        if csv_export is None:
            return Response(status=204)
        return Response(
            csv_export.encode(),
            content_type=csv_export.media_type,
            headers={
                "Content-Disposition": f'attachment; filename="{csv_export.filename}"',
            },
        )

    @app.route("/api/script", methods=["GET"])
    def script():
        return Response(panel.script_text, mimetype="text/plain")

    @app.route("/api/script/copy", methods=["POST"])
    def copy_script():
        text = panel.copy()
        return jsonify({
            "script": text,
            "copied": True,
            "resetAfterSeconds": panel.indicator.delay_seconds,
        }), 200

    Log.debug("Flask app created")
    return app
