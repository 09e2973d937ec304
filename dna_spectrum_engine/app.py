"""
Flask backend API for the DNA Spectrum Engine.

This module provides REST endpoints for submitting assessments and
retrieving, listing and reporting on completed results. Every JSON
response uses the envelope ``{"success": bool, "data": ..., "error": str}``.
"""

import io
import logging

from flask import Blueprint, Flask, current_app, jsonify, request, send_file
from flask_cors import CORS
from pydantic import ValidationError

from dna_spectrum_engine import __version__
from dna_spectrum_engine.core.config_loader import Settings, load_settings
from dna_spectrum_engine.core.exceptions import (
    AssessmentNotFoundError,
    AssessmentValidationError,
    DNASpectrumError,
    ReportGenerationError,
)
from dna_spectrum_engine.core.models import AssessmentResult, QuestionCategory
from dna_spectrum_engine.core.orchestrator import Orchestrator, parse_responses
from dna_spectrum_engine.modules.catalog import all_questions, by_category
from dna_spectrum_engine.modules.reporting import (
    AssessmentReportVisualizer,
    build_pdf,
    pdf_filename,
)

logger = logging.getLogger(__name__)

EXTENSION_KEY = "dna_spectrum"

api = Blueprint("api", __name__, url_prefix="/api")


def _orchestrator() -> Orchestrator:
    return current_app.extensions[EXTENSION_KEY]


def _settings() -> Settings:
    return _orchestrator().settings


def ok(data, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


# ============================================================================
# API Routes
# ============================================================================


@api.route("/health", methods=["GET"])
def health_check():
    """Health check endpoint."""
    return ok({
        "status": "healthy",
        "service": "DNA Spectrum Engine",
        "version": __version__,
    })


@api.route("/questions", methods=["GET"])
def list_questions():
    """Return the question catalog, optionally filtered by ``?category=``."""
    category = request.args.get("category")
    if category:
        try:
            questions = by_category(QuestionCategory(category))
        except ValueError:
            return fail(f"Unknown category: {category}", 400)
    else:
        questions = all_questions()

    return ok({
        "questions": [q.to_wire() for q in questions],
        "categories": [{"id": c.value, "label": c.label} for c in QuestionCategory],
    })


@api.route("/assessment/submit", methods=["POST"])
def submit_assessment():
    """Score and store a completed assessment.

    Request JSON:
        - clientName: str (optional)
        - clientEmail: str (optional)
        - responses: list of {questionId, score} (30 entries)

    Returns:
        JSON with assessmentId, the full result and whether it was persisted
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        logger.warning("Empty or invalid request body received for submit")
        return fail("Empty request body or invalid JSON", 400)

    client_name = data.get("clientName")
    client_email = data.get("clientEmail")
    for field, value in (("clientName", client_name), ("clientEmail", client_email)):
        if value is not None and not isinstance(value, str):
            return fail(f"{field} must be a string", 400)

    try:
        responses = parse_responses(data.get("responses"))
        submission = _orchestrator().submit(
            responses,
            client_name=client_name,
            client_email=client_email,
        )
    except AssessmentValidationError as e:
        return fail(e.message, 400)
    except Exception:
        logger.exception("Error submitting assessment")
        return fail("Internal server error", 500)

    return ok({
        "assessmentId": submission.result.id,
        "result": submission.result.to_wire(),
        "persisted": submission.persisted,
    })


@api.route("/assessment/<assessment_id>", methods=["GET"])
def get_assessment(assessment_id: str):
    """Return a stored result exactly as it was computed."""
    try:
        result = _orchestrator().retrieve(assessment_id)
    except AssessmentNotFoundError as e:
        return fail(e.message, 404)
    except Exception:
        logger.exception("Error fetching assessment %s", assessment_id)
        return fail("Internal server error", 500)

    return ok(result.to_wire())


@api.route("/assessment/<assessment_id>", methods=["DELETE"])
def delete_assessment(assessment_id: str):
    try:
        removed = _orchestrator().delete(assessment_id)
    except Exception:
        logger.exception("Error deleting assessment %s", assessment_id)
        return fail("Internal server error", 500)

    if not removed:
        return fail("Assessment not found", 404)
    return ok({"assessmentId": assessment_id, "deleted": True})


@api.route("/assessments", methods=["GET"])
def list_assessments():
    """List results newest first (``?limit=50&offset=0``)."""
    limit = request.args.get("limit", 50, type=int)
    offset = request.args.get("offset", 0, type=int)
    if limit < 1 or offset < 0:
        return fail("limit must be positive and offset non-negative", 400)

    try:
        results = _orchestrator().list_results(limit=limit, offset=offset)
    except Exception:
        logger.exception("Error listing assessments")
        return fail("Internal server error", 500)

    return ok({
        "assessments": [r.to_wire() for r in results],
        "limit": limit,
        "offset": offset,
    })


@api.route("/assessments/stats", methods=["GET"])
def assessment_stats():
    try:
        stats = _orchestrator().stats()
    except Exception:
        logger.exception("Error computing assessment stats")
        return fail("Internal server error", 500)
    return ok(stats.to_wire())


@api.route("/pdf/generate", methods=["POST"])
def generate_pdf():
    """Render a PDF report.

    Request JSON (one of):
        - result: a full assessment result as returned by submit
        - assessmentId: id of a stored result

    Returns:
        The PDF as an attachment
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return fail("Empty request body or invalid JSON", 400)

    try:
        if data.get("result") is not None:
            result = AssessmentResult.model_validate(data["result"])
        elif data.get("assessmentId"):
            result = _orchestrator().retrieve(data["assessmentId"])
        else:
            return fail("No result provided", 400)
    except ValidationError as e:
        logger.warning("Invalid result supplied for PDF: %s", e)
        return fail("Invalid result", 400)
    except AssessmentNotFoundError as e:
        return fail(e.message, 404)
    except DNASpectrumError:
        logger.exception("Error loading result for PDF")
        return fail("Internal server error", 500)

    try:
        pdf_bytes = build_pdf(result, title=_settings().assessment.title)
    except ReportGenerationError:
        return fail("Failed to generate PDF", 500)

    return send_file(
        io.BytesIO(pdf_bytes),
        mimetype="application/pdf",
        as_attachment=True,
        download_name=pdf_filename(result),
    )


@api.route("/report/<assessment_id>", methods=["GET"])
def get_report(assessment_id: str):
    """Serve the interactive HTML report for a stored result."""
    try:
        result = _orchestrator().retrieve(assessment_id)
        visualizer = AssessmentReportVisualizer(plotly_js=_settings().report.plotly_js)
        content = visualizer.render_html(result, title=_settings().assessment.title)
    except AssessmentNotFoundError as e:
        return fail(e.message, 404)
    except ReportGenerationError:
        return fail("Failed to generate report", 500)
    except Exception:
        logger.exception("Error generating report for %s", assessment_id)
        return fail("Internal server error", 500)

    return content, 200, {"Content-Type": "text/html; charset=utf-8"}


# ============================================================================
# Error Handlers
# ============================================================================


def not_found(error):
    """Handle 404 errors."""
    return fail("Not found", 404)


def method_not_allowed(error):
    return fail("Method not allowed", 405)


def internal_error(error):
    """Handle 500 errors."""
    logger.exception("Internal server error")
    return fail("Internal server error", 500)


# ============================================================================
# Application Initialization
# ============================================================================


def create_app(
    settings: Settings | None = None,
    orchestrator: Orchestrator | None = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Application settings. Loaded from the default
            configuration when omitted.
        orchestrator: Optional pre-built orchestrator (tests inject one
            with custom stores).

    Returns:
        The configured Flask app.
    """
    if settings is None:
        settings = orchestrator.settings if orchestrator is not None else load_settings()

    logging.basicConfig(
        level=getattr(logging, settings.logging.level, logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    app = Flask(__name__)
    CORS(app)  # Enable CORS for frontend

    app.extensions[EXTENSION_KEY] = orchestrator or Orchestrator(settings)
    app.register_blueprint(api)
    app.register_error_handler(404, not_found)
    app.register_error_handler(405, method_not_allowed)
    app.register_error_handler(500, internal_error)

    logger.info("Flask application initialized")
    return app
