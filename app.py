#!/usr/bin/env python3
"""Flask web app for the FEthink prompting automarker."""

import functools

from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS
from jsonschema import ValidationError

from automarker.audit import audit_log, setup_app_logging
from automarker.session_gate import MAX_CODE_LENGTH, SessionGate, validate_code
from automarker.settings import Settings, load_settings
from marking.content import MAX_WORDS, QUESTION_TEXT, TARGET_WORDS, TEMPLATE_TEXT
from marking.scoring import mark_prompting_response
from marking.scoring.engine import MIN_WORDS_GATE
from marking.text import clamp_str
from marking.validation import validate_mark_result

log = setup_app_logging()

COOKIE_NAME = "fethink_prompting_session"
MAX_ANSWER_CHARS = 6000

api = Blueprint("api", __name__, url_prefix="/api")


def _json_body() -> dict:
    """Request JSON as a dict; anything else (missing, invalid, non-object) is {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _gate() -> SessionGate:
    return current_app.config["SESSION_GATE"]


def require_session(view):
    """
    Reject with 401 unless the request carries a valid, unexpired session cookie.

    Rejections are audited under the view's action name (api_mark -> "mark").
    """
    action = view.__name__.removeprefix("api_")

    @functools.wraps(view)
    def wrapped(*args, **kwargs):
        token = request.cookies.get(COOKIE_NAME)
        if not _gate().check_session(token):
            audit_log(
                action=action,
                status="rejected",
                error="unauthorized",
                extra={"cookie_present": bool(token)},
            )
            log.info("Rejected %s: no valid session (cookie_present=%s)", request.path, bool(token))
            return jsonify({"ok": False, "error": "unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapped


@api.route("/health", methods=["GET"])
def api_health():
    return jsonify({"ok": True, "status": "running"})


@api.route("/config", methods=["GET"])
def api_config():
    """Question, answer template and word targets for the frontend."""
    settings = _settings()
    return jsonify({
        "ok": True,
        "questionText": QUESTION_TEXT,
        "templateText": TEMPLATE_TEXT,
        "targetWords": TARGET_WORDS,
        "minWordsGate": MIN_WORDS_GATE,
        "maxWords": MAX_WORDS,
        "courseBackUrl": settings.course_back_url,
        "nextLessonUrl": settings.next_lesson_url,
    })


@api.route("/unlock", methods=["POST"])
def api_unlock():
    """Check the access code and set the session cookie."""
    data = _json_body()
    settings = _settings()

    if not validate_code(data.get("code"), settings.access_code, max_len=MAX_CODE_LENGTH):
        audit_log(action="unlock", status="rejected", error="invalid_code")
        log.info("Unlock rejected: invalid code")
        return jsonify({"ok": False, "error": "invalid_code"}), 401

    session = _gate().issue_session()
    resp = jsonify({"ok": True})
    resp.set_cookie(
        COOKIE_NAME,
        session.token,
        max_age=session.max_age,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="Lax",
    )
    audit_log(action="unlock", status="success", extra={"expires_at": session.expires_at})
    log.info("Unlock granted: session expires_at=%d", session.expires_at)
    return resp


@api.route("/mark", methods=["POST"])
@require_session
def api_mark():
    """Mark an answer. Requires a session from /api/unlock."""
    data = _json_body()
    answer_text = clamp_str(data.get("answerText") or data.get("answer") or "", MAX_ANSWER_CHARS)

    try:
        result = mark_prompting_response(answer_text)
        validate_mark_result(result)
    except ValidationError as e:
        audit_log(
            action="mark",
            status="error",
            answer_char_count=len(answer_text),
            error=e.message,
        )
        log.exception("Mark result failed schema validation")
        return jsonify({"ok": False, "error": "internal_error"}), 500

    audit_log(
        action="mark",
        status="success",
        word_count=result["wordCount"],
        gated=result["gated"],
        answer_char_count=len(answer_text),
    )
    log.info("Mark complete: word_count=%d gated=%s", result["wordCount"], result["gated"])
    return jsonify({"ok": True, "result": result})


def create_app(settings: Settings | None = None) -> Flask:
    """Build the app. Settings are fixed for the life of the app."""
    settings = settings or load_settings()

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = 1024 * 1024  # 1MB
    app.config["SETTINGS"] = settings
    app.config["SESSION_GATE"] = SessionGate(settings.cookie_secret, settings.session_minutes)
    CORS(app)
    app.register_blueprint(api)
    return app


_default_app = None


def __getattr__(name):
    """Build the environment-configured app on first access to `app` (e.g. `gunicorn app:app`)."""
    global _default_app
    if name != "app":
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    if _default_app is None:
        _default_app = create_app()
    return _default_app


if __name__ == "__main__":
    app = create_app()
    settings = app.config["SETTINGS"]
    log.info(
        "FEthink automarker starting on port %d | session_minutes=%d | persistent secret: %s | Logs: logs/app.log | Audit: logs/audit.log",
        settings.port,
        settings.session_minutes,
        not settings.secret_is_ephemeral,
    )
    app.run(host="0.0.0.0", port=settings.port)
