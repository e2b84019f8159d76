"""Flask application for the reading platform.

Teachers post reference passages, students submit transcripts of their reading,
and every submission is scored by the reading_fluency engine and kept in the
store for the teacher dashboard.
"""
import logging
from typing import Optional

from flask import Blueprint, Flask, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from reading_fluency import (
    FluencyConfig,
    InvalidDurationError,
    OversizedInputError,
    compare_texts,
    generate_report,
    load_config,
)

from .rendering import render_detail_html
from .schemas import ReadingCreate, TextCreate, describe_errors
from .store import ReadingStore

logger = logging.getLogger(__name__)

readings_bp = Blueprint("readings", __name__, url_prefix="/api")


def _store() -> ReadingStore:
    return current_app.extensions["reading_store"]


def _config() -> FluencyConfig:
    return current_app.extensions["fluency_config"]


def _invalid(exc: ValidationError):
    return jsonify({"error": "Missing or invalid fields", "details": describe_errors(exc)}), 400


# ============================================================================
# ROUTES - TEXTS (teacher)
# ============================================================================
@readings_bp.route("/texts", methods=["POST"])
def create_text():
    try:
        body = TextCreate.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return _invalid(e)

    record = _store().add_text(body.title, body.content, body.duration_sec)
    logger.info("Created text %d (%s)", record["id"], record["title"])
    return jsonify({"id": record["id"]}), 201


@readings_bp.route("/texts", methods=["GET"])
def list_texts():
    return jsonify(_store().list_texts())


@readings_bp.route("/texts/latest", methods=["GET"])
def latest_text():
    return jsonify(_store().latest_text())


# ============================================================================
# ROUTES - READINGS (student submissions, teacher dashboard)
# ============================================================================
@readings_bp.route("/readings", methods=["POST"])
def submit_reading():
    try:
        body = ReadingCreate.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return _invalid(e)

    store = _store()
    text = store.get_text(body.text_id)
    if text is None:
        return jsonify({"error": "Text not found"}), 404

    try:
        result = compare_texts(text["content"], body.transcript, body.duration_sec, config=_config())
    except InvalidDurationError as e:
        return jsonify({"error": str(e)}), 400
    except OversizedInputError as e:
        logger.warning("Rejected reading for text %d: %s", body.text_id, e)
        return jsonify({"error": str(e), "limit": e.limit}), 413

    report = generate_report(result)
    detail_html = render_detail_html(result.render())
    record = store.add_reading(
        body.student_name, body.text_id, body.transcript, result, report["words"], detail_html
    )
    logger.info(
        "Scored reading %d for %s: %d words, %d errors, %.1f wpm",
        record["id"], body.student_name, record["words_read"], record["errors"], record["wpm"],
    )
    return jsonify({
        "id": record["id"],
        "words_read": record["words_read"],
        "errors": record["errors"],
        "wpm": record["wpm"],
        "detail_html": detail_html,
        "words": report["words"],
        "summary": report["summary"],
    }), 201


@readings_bp.route("/readings", methods=["GET"])
def list_readings():
    student_name = request.args.get("student_name") or None
    text_id = None
    raw_text_id = request.args.get("text_id")
    if raw_text_id:
        try:
            text_id = int(raw_text_id)
        except ValueError:
            return jsonify({"error": f"text_id must be an integer, got {raw_text_id!r}"}), 400
    return jsonify(_store().list_readings(student_name=student_name, text_id=text_id))


@readings_bp.route("/student/<name>/history", methods=["GET"])
def student_history(name):
    return jsonify(_store().student_history(name))


@readings_bp.route("/reading/<int:reading_id>/detail", methods=["GET"])
def reading_detail(reading_id):
    detail = _store().reading_detail(reading_id)
    if detail is None:
        return jsonify({"error": "Not found"}), 404
    return jsonify(detail)


# ============================================================================
# APPLICATION
# ============================================================================
def create_app(config: Optional[FluencyConfig] = None, store: Optional[ReadingStore] = None) -> Flask:
    """Build the Flask app.

    Args:
        config: Engine and server settings (defaults to load_config())
        store: Backing store for texts and readings (defaults to a fresh ReadingStore)
    """
    app = Flask(__name__)
    app.extensions["fluency_config"] = config or load_config()
    app.extensions["reading_store"] = store if store is not None else ReadingStore()
    app.register_blueprint(readings_bp)

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok", "service": "reading-fluency"})

    @app.errorhandler(Exception)
    def unexpected_error(e):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.description}), e.code
        logger.exception("Unhandled error on %s", request.path)
        return jsonify({"error": "Internal server error"}), 500

    return app
